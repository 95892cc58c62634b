"""Records produced while a simulated month runs."""

from dataclasses import dataclass
from decimal import Decimal

from account_sim.models.enums import AccountKind, Direction


@dataclass(frozen=True)
class Transaction:
    """A deposit or withdrawal applied to an account by the driver.

    ``amount`` is what was requested; variants may apply a different amount,
    which shows up in ``balance_after``.
    """

    account_id: str
    direction: Direction
    amount: Decimal
    month: int
    balance_after: Decimal


@dataclass(frozen=True)
class MonthlyStatement:
    """Summary emitted for one account at month-end settlement."""

    account_id: str
    kind: AccountKind
    month: int
    transaction_count: int
    balance: Decimal

    def format_line(self) -> str:
        """Render the console settlement line."""
        return (
            f"transactions:{self.transaction_count}\t"
            f"balance:{self.balance}\t({self.kind.value})"
        )
