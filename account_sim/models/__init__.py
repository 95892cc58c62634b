"""Account models for the monthly settlement simulation."""

from account_sim.models.account import Account, StatementSink
from account_sim.models.enums import AccountKind, Direction
from account_sim.models.statement import MonthlyStatement, Transaction
from account_sim.models.variants import (
    FeeAccount,
    GamblerAccount,
    NickleNDimeAccount,
)

__all__ = [
    "Account",
    "AccountKind",
    "Direction",
    "FeeAccount",
    "GamblerAccount",
    "MonthlyStatement",
    "NickleNDimeAccount",
    "StatementSink",
    "Transaction",
]
