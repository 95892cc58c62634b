"""Base generator class for all simulation generators."""

from __future__ import annotations

import random
from abc import ABC
from decimal import Decimal

from faker import Faker

CENT = Decimal("0.01")


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: a private ``random.Random`` for every
    numeric draw and a Faker instance for identities, both seeded from the
    same value so a run can be reproduced. Faker is only built on first
    use of :attr:`fake`.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    rng : random.Random | None
        Random source to share with other generators. Created from
        ``seed`` when omitted.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        rng: random.Random | None = None,
    ) -> None:
        self.seed = seed
        self.locale = locale
        self.rng = rng or random.Random(seed)
        self._fake: Faker | None = None

    @property
    def fake(self) -> Faker:
        if self._fake is None:
            self._fake = Faker(self.locale)
            if self.seed is not None:
                self._fake.seed_instance(self.seed)
        return self._fake

    def _money(self, low: Decimal, high: Decimal) -> Decimal:
        """Draw a two-decimal amount uniformly from ``[low, high]``."""
        cents = self.rng.randint(int(Decimal(low) * 100), int(Decimal(high) * 100))
        return (Decimal(cents) / 100).quantize(CENT)
