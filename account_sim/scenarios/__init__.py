"""Scenarios that drive simulated accounts through settlement months."""

from account_sim.scenarios.monthly import MonthlySimulation

__all__ = ["MonthlySimulation"]
