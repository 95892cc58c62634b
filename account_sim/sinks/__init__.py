"""Output sinks for settlement summaries."""

from account_sim.sinks.console import ConsoleSink
from account_sim.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
