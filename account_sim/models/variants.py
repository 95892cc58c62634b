"""Account variants, each with its own end-of-month charge."""

from __future__ import annotations

import random
from decimal import Decimal

from account_sim.models.account import Account, Amount, to_decimal
from account_sim.models.enums import AccountKind


class FeeAccount(Account):
    """Charges a flat fee every month regardless of activity."""

    kind = AccountKind.FEE
    FLAT_FEE = Decimal("5.00")

    def __init__(
        self,
        balance: Amount = 0,
        account_id: str = "",
        owner: str = "",
        flat_fee: Amount | None = None,
    ) -> None:
        super().__init__(balance, account_id, owner)
        self.flat_fee = self.FLAT_FEE if flat_fee is None else to_decimal(flat_fee)

    def charge_policy(self) -> None:
        self.withdraw(self.flat_fee)


class NickleNDimeAccount(Account):
    """Charges a fixed amount per withdrawal made during the month.

    The withdrawal count is kept apart from ``transaction_count``:
    deposits do not touch it and it is cleared after each charge.
    """

    kind = AccountKind.NICKLE_N_DIME
    PER_WITHDRAWAL_FEE = Decimal("0.50")

    def __init__(
        self,
        balance: Amount = 0,
        account_id: str = "",
        owner: str = "",
        per_withdrawal_fee: Amount | None = None,
    ) -> None:
        super().__init__(balance, account_id, owner)
        self.per_withdrawal_fee = (
            self.PER_WITHDRAWAL_FEE
            if per_withdrawal_fee is None
            else to_decimal(per_withdrawal_fee)
        )
        self.withdrawal_count = 0

    def withdraw(self, amount: Amount) -> None:
        self.withdrawal_count += 1
        self._apply_withdrawal(amount)

    def charge_policy(self) -> None:
        # No withdrawals means no charge transaction either.
        if self.withdrawal_count:
            self._apply_withdrawal(self.withdrawal_count * self.per_withdrawal_fee)
        self.withdrawal_count = 0


class GamblerAccount(Account):
    """Withdrawals are a coin flip: double the amount, or nothing at all.

    With probability ``double_probability`` the applied withdrawal is twice
    the requested amount; otherwise a zero withdrawal is applied, which
    still counts as a transaction. There is no monthly charge.

    Parameters
    ----------
    rng : random.Random | None
        Random source for the outcome draw. A fresh unseeded instance is
        used when omitted.
    double_probability : float | None
        Chance that a withdrawal is doubled (default 0.51).
    """

    kind = AccountKind.GAMBLER
    DOUBLE_PROBABILITY = 0.51

    def __init__(
        self,
        balance: Amount = 0,
        account_id: str = "",
        owner: str = "",
        rng: random.Random | None = None,
        double_probability: float | None = None,
    ) -> None:
        super().__init__(balance, account_id, owner)
        self.rng = rng or random.Random()
        self.double_probability = (
            self.DOUBLE_PROBABILITY if double_probability is None else double_probability
        )

    def withdraw(self, amount: Amount) -> None:
        if self.rng.random() < self.double_probability:
            self._apply_withdrawal(to_decimal(amount) * 2)
        else:
            self._apply_withdrawal(Decimal("0"))

    def charge_policy(self) -> None:
        pass

