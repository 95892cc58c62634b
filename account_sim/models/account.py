"""Shared account behavior for every simulated account variant."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Protocol, Union

from account_sim.models.enums import AccountKind
from account_sim.models.statement import MonthlyStatement

Amount = Union[Decimal, int, float, str]


class StatementSink(Protocol):
    """Anything that can receive a settlement summary."""

    def write_statement(self, statement: MonthlyStatement) -> None: ...


def to_decimal(value: Amount) -> Decimal:
    """Normalise an amount to ``Decimal`` without float artefacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class Account(ABC):
    """Bank account with deposit, withdraw and monthly settlement.

    Every balance change goes through :meth:`_apply_deposit` or
    :meth:`_apply_withdrawal`. Variants that change withdrawal behavior
    override :meth:`withdraw` and call :meth:`_apply_withdrawal` themselves,
    so the transaction counter is updated in exactly one place.

    The balance may go negative; amounts are not validated.

    Parameters
    ----------
    balance : Amount
        Opening balance.
    account_id : str
        Identifier used by the store and in emitted statements.
    owner : str
        Account holder name.
    """

    kind: AccountKind

    def __init__(self, balance: Amount = 0, account_id: str = "", owner: str = "") -> None:
        self.balance = to_decimal(balance)
        self.account_id = account_id
        self.owner = owner
        self.transaction_count = 0

    def deposit(self, amount: Amount) -> None:
        """Add ``amount`` to the balance."""
        self._apply_deposit(amount)

    def withdraw(self, amount: Amount) -> None:
        """Remove ``amount`` from the balance."""
        self._apply_withdrawal(amount)

    def get_balance(self) -> Decimal:
        return self.balance

    def settle_month(self, sink: StatementSink | None = None, month: int = 0) -> MonthlyStatement:
        """Close the current month.

        Applies the variant's charge, emits the summary line and resets the
        transaction counter, in that order. The charge's own withdrawal is
        included in the emitted count.

        Parameters
        ----------
        sink : StatementSink | None
            Destination for the summary. Printed to stdout when omitted.
        month : int
            Month number recorded on the statement.

        Returns
        -------
        MonthlyStatement
            The emitted summary.
        """
        self.charge_policy()

        statement = MonthlyStatement(
            account_id=self.account_id,
            kind=self.kind,
            month=month,
            transaction_count=self.transaction_count,
            balance=self.balance,
        )
        try:
            if sink is None:
                print(statement.format_line())
            else:
                sink.write_statement(statement)
        finally:
            self.transaction_count = 0
        return statement

    @abstractmethod
    def charge_policy(self) -> None:
        """Apply this variant's end-of-month charge."""

    def _apply_deposit(self, amount: Amount) -> None:
        self.balance += to_decimal(amount)
        self.transaction_count += 1

    def _apply_withdrawal(self, amount: Amount) -> None:
        self.balance -= to_decimal(amount)
        self.transaction_count += 1

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(account_id={self.account_id!r}, "
            f"balance={self.balance}, transaction_count={self.transaction_count})"
        )
