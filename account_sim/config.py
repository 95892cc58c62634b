"""Configuration management for account-sim."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path

from account_sim.exceptions import ConfigurationError
from account_sim.models.enums import AccountKind


@dataclass
class FeeScheduleConfig:
    """Monthly charge parameters for each account variant."""

    flat_fee: Decimal = Decimal("5.00")
    per_withdrawal_fee: Decimal = Decimal("0.50")
    gambler_double_probability: float = 0.51


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class SimulationConfig:
    """Main configuration for a simulation run."""

    num_accounts: int = 10
    transactions_per_month: int = 50
    months: int = 1
    initial_balance_range: tuple[Decimal, Decimal] = (Decimal("0"), Decimal("1000"))
    amount_range: tuple[Decimal, Decimal] = (Decimal("1"), Decimal("100"))
    kind_weights: dict[AccountKind, float] = field(
        default_factory=lambda: {kind: 1.0 for kind in AccountKind}
    )
    fees: FeeScheduleConfig = field(default_factory=FeeScheduleConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"

    def validate(self) -> None:
        """Check the configuration for values the simulation cannot run with.

        Raises
        ------
        ConfigurationError
            If any count is negative, a range is inverted, the gambler
            probability is outside [0, 1] or no account kind has weight.
        """
        if self.num_accounts < 0:
            raise ConfigurationError(f"num_accounts must be >= 0, got {self.num_accounts}")
        if self.transactions_per_month < 0:
            raise ConfigurationError(
                f"transactions_per_month must be >= 0, got {self.transactions_per_month}"
            )
        if self.months < 1:
            raise ConfigurationError(f"months must be >= 1, got {self.months}")

        for name, (low, high) in (
            ("initial_balance_range", self.initial_balance_range),
            ("amount_range", self.amount_range),
        ):
            if low > high:
                raise ConfigurationError(f"{name} is inverted: {low} > {high}")

        if not 0.0 <= self.fees.gambler_double_probability <= 1.0:
            raise ConfigurationError(
                "gambler_double_probability must be within [0, 1], "
                f"got {self.fees.gambler_double_probability}"
            )

        if not self.kind_weights or sum(self.kind_weights.values()) <= 0:
            raise ConfigurationError("kind_weights must give at least one kind a positive weight")
        if any(weight < 0 for weight in self.kind_weights.values()):
            raise ConfigurationError("kind_weights must not be negative")

    @classmethod
    def from_env(cls) -> "SimulationConfig":
        """Create config from environment variables."""
        import json
        import os

        try:
            fees = FeeScheduleConfig(
                flat_fee=Decimal(os.getenv("SIM_FLAT_FEE", "5.00")),
                per_withdrawal_fee=Decimal(os.getenv("SIM_PER_WITHDRAWAL_FEE", "0.50")),
                gambler_double_probability=float(os.getenv("SIM_GAMBLER_ODDS", "0.51")),
            )
        except (InvalidOperation, ValueError) as exc:
            raise ConfigurationError(f"Invalid fee schedule: {exc!r}") from exc

        output = OutputConfig(
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        kind_weights_str = os.getenv("SIM_KIND_WEIGHTS")
        if kind_weights_str:
            try:
                parsed = json.loads(kind_weights_str)
                if not isinstance(parsed, dict):
                    raise TypeError(f"expected a JSON object, got {type(parsed).__name__}")
                kind_weights = {
                    AccountKind(name): float(weight) for name, weight in parsed.items()
                }
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(f"Invalid SIM_KIND_WEIGHTS: {exc}") from exc
        else:
            kind_weights = {kind: 1.0 for kind in AccountKind}

        return cls(
            num_accounts=int(os.getenv("SIM_ACCOUNTS", "10")),
            transactions_per_month=int(os.getenv("SIM_TRANSACTIONS", "50")),
            months=int(os.getenv("SIM_MONTHS", "1")),
            kind_weights=kind_weights,
            fees=fees,
            output=output,
            seed=int(os.getenv("SEED")) if os.getenv("SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
