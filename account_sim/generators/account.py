"""Account generator for the settlement simulation."""

from __future__ import annotations

import random
from decimal import Decimal
from typing import Iterator

from account_sim.config import FeeScheduleConfig
from account_sim.exceptions import UnknownAccountKindError
from account_sim.generators.base import BaseGenerator
from account_sim.models import (
    Account,
    AccountKind,
    FeeAccount,
    GamblerAccount,
    NickleNDimeAccount,
)
from account_sim.models.account import Amount


class AccountGenerator(BaseGenerator):
    """Generate accounts of random variant kinds.

    Kinds are drawn with ``kind_weights`` (uniform by default). Every
    generated account gets a Faker-backed id and owner name; Gambler
    accounts share the generator's random source so a seeded run stays
    reproducible end to end.
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        fees: FeeScheduleConfig | None = None,
        kind_weights: dict[AccountKind, float] | None = None,
    ) -> None:
        super().__init__(seed, rng=rng)
        self.fees = fees or FeeScheduleConfig()
        weights = kind_weights or {kind: 1.0 for kind in AccountKind}
        self.kinds = list(weights.keys())
        self.kind_weights = list(weights.values())

    def create(
        self,
        kind: AccountKind | str,
        balance: Amount,
        account_id: str | None = None,
        owner: str | None = None,
    ) -> Account:
        """Build an account of a given kind.

        Parameters
        ----------
        kind : AccountKind | str
            Variant to build; accepts the enum or its name, e.g. ``"Fee"``.
        balance : Amount
            Opening balance.
        account_id : str | None
            Identifier; a UUID is generated when omitted.
        owner : str | None
            Holder name; a fake name is generated when omitted.

        Returns
        -------
        Account
            New account with a zero transaction count.

        Raises
        ------
        UnknownAccountKindError
            If ``kind`` names no known variant.
        """
        try:
            kind = AccountKind(kind)
        except ValueError:
            raise UnknownAccountKindError(f"Unknown account kind: {kind!r}") from None

        account_id = account_id or self.fake.uuid4()
        owner = owner or self.fake.name()

        if kind is AccountKind.FEE:
            return FeeAccount(balance, account_id, owner, flat_fee=self.fees.flat_fee)
        if kind is AccountKind.NICKLE_N_DIME:
            return NickleNDimeAccount(
                balance, account_id, owner, per_withdrawal_fee=self.fees.per_withdrawal_fee
            )
        return GamblerAccount(
            balance,
            account_id,
            owner,
            rng=self.rng,
            double_probability=self.fees.gambler_double_probability,
        )

    def generate(
        self,
        balance_range: tuple[Decimal, Decimal] = (Decimal("0"), Decimal("1000")),
    ) -> Account:
        """Generate a single account of a random kind and opening balance."""
        kind = self.rng.choices(self.kinds, weights=self.kind_weights, k=1)[0]
        return self.create(kind, self._money(*balance_range))

    def generate_batch(
        self,
        count: int,
        balance_range: tuple[Decimal, Decimal] = (Decimal("0"), Decimal("1000")),
    ) -> Iterator[Account]:
        """Generate ``count`` accounts."""
        for _ in range(count):
            yield self.generate(balance_range)
