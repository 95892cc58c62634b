"""Transaction generator for the settlement simulation."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, Sequence

from account_sim.generators.base import BaseGenerator
from account_sim.models import Direction


@dataclass(frozen=True)
class PlannedTransaction:
    """A transaction drawn by the generator but not yet applied."""

    account_id: str
    direction: Direction
    amount: Decimal


class TransactionGenerator(BaseGenerator):
    """Draw random deposits and withdrawals against a set of accounts.

    Each draw picks a target account uniformly, a direction with equal odds
    and an amount uniformly from ``amount_range``.
    """

    DIRECTIONS = list(Direction)

    def generate(
        self,
        account_ids: Sequence[str],
        amount_range: tuple[Decimal, Decimal] = (Decimal("1"), Decimal("100")),
    ) -> PlannedTransaction:
        """Draw a single transaction.

        Parameters
        ----------
        account_ids : Sequence[str]
            Candidate target accounts; must not be empty.
        amount_range : tuple[Decimal, Decimal]
            Inclusive amount bounds.

        Returns
        -------
        PlannedTransaction
            The drawn transaction.
        """
        return PlannedTransaction(
            account_id=self.rng.choice(account_ids),
            direction=self.rng.choice(self.DIRECTIONS),
            amount=self._money(*amount_range),
        )

    def generate_batch(
        self,
        account_ids: Sequence[str],
        count: int,
        amount_range: tuple[Decimal, Decimal] = (Decimal("1"), Decimal("100")),
    ) -> Iterator[PlannedTransaction]:
        """Draw ``count`` transactions; yields nothing when there are no accounts."""
        if not account_ids:
            return
        for _ in range(count):
            yield self.generate(account_ids, amount_range)
