#!/usr/bin/env python3
"""Run the monthly account settlement simulation.

Creates a population of random Fee, NickleNDime and Gambler accounts,
applies random deposits and withdrawals, then settles every account at
month end and writes one summary line per account:

    transactions:<count>	balance:<balance>	(<Kind>)

Defaults come from SIM_* environment variables (see account_sim.config);
command-line flags override them.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from account_sim.config import SimulationConfig
from account_sim.exceptions import AccountSimError
from account_sim.logging import get_logger, setup_logging
from account_sim.scenarios import MonthlySimulation
from account_sim.sinks import ConsoleSink, JsonFileSink

logger = get_logger(__name__)


def build_parser(defaults: SimulationConfig) -> argparse.ArgumentParser:
    """Build the command-line parser around environment defaults."""
    parser = argparse.ArgumentParser(
        description="Simulate monthly settlement of polymorphic bank accounts"
    )
    parser.add_argument(
        "--accounts",
        type=int,
        default=defaults.num_accounts,
        help=f"Number of accounts to create (default: {defaults.num_accounts})",
    )
    parser.add_argument(
        "--transactions",
        type=int,
        default=defaults.transactions_per_month,
        help=f"Random transactions per month (default: {defaults.transactions_per_month})",
    )
    parser.add_argument(
        "--months",
        type=int,
        default=defaults.months,
        help=f"Months to simulate (default: {defaults.months})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=defaults.seed,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--output",
        choices=["console", "json"],
        default="console",
        help="Where settlement lines go (default: console)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=defaults.output.output_dir,
        help=f"Directory for --output json (default: {defaults.output.output_dir})",
    )
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        help=f"Log level (default: {defaults.log_level})",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log format (default: standard)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        config = SimulationConfig.from_env()
    except (AccountSimError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    args = build_parser(config).parse_args(argv)
    setup_logging(args.log_level, args.log_format)

    config.num_accounts = args.accounts
    config.transactions_per_month = args.transactions
    config.months = args.months
    config.seed = args.seed
    config.output.output_dir = args.output_dir
    config.log_level = args.log_level

    if args.output == "json":
        sink = JsonFileSink(config.output.output_dir, pretty=config.output.pretty_json)
    else:
        sink = ConsoleSink()

    try:
        MonthlySimulation(config).run(sink)
    except AccountSimError as exc:
        logger.error("Simulation failed: %s", exc)
        return 1
    finally:
        sink.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
