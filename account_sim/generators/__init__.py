"""Random generators for accounts and transactions."""

from account_sim.generators.account import AccountGenerator
from account_sim.generators.transaction import PlannedTransaction, TransactionGenerator

__all__ = [
    "AccountGenerator",
    "PlannedTransaction",
    "TransactionGenerator",
]
