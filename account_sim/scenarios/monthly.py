"""Monthly settlement scenario: random accounts, random activity, month-end fees."""

import random

from account_sim.config import SimulationConfig
from account_sim.generators import AccountGenerator, TransactionGenerator
from account_sim.logging import get_logger
from account_sim.models import Direction, MonthlyStatement, StatementSink, Transaction
from account_sim.store import AccountStore

logger = get_logger(__name__)


class MonthlySimulation:
    """Run a population of mixed account variants through one or more months.

    Each month the scenario applies ``transactions_per_month`` random
    deposits and withdrawals through the shared account contract, then
    settles every account in creation order. Settlement lines go to the
    sink given to :meth:`run` (stdout when omitted).

    All randomness, including Gambler outcomes, comes from one
    ``random.Random``, so equal seeds give equal runs.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the monthly scenario.

        Parameters
        ----------
        config : SimulationConfig | None
            Simulation parameters; defaults apply when omitted.
        rng : random.Random | None
            Random source. Built from ``config.seed`` when omitted.

        Raises
        ------
        ConfigurationError
            If ``config`` does not validate.
        """
        self.config = config or SimulationConfig()
        self.config.validate()
        self.rng = rng or random.Random(self.config.seed)

        self.store = AccountStore()
        self.month = 0
        self._account_gen = AccountGenerator(
            seed=self.config.seed,
            rng=self.rng,
            fees=self.config.fees,
            kind_weights=self.config.kind_weights,
        )
        self._transaction_gen = TransactionGenerator(seed=self.config.seed, rng=self.rng)

    def populate(self) -> AccountStore:
        """Create ``num_accounts`` random accounts in the store."""
        for account in self._account_gen.generate_batch(
            self.config.num_accounts, self.config.initial_balance_range
        ):
            self.store.add_account(account)

        logger.info("Created %d accounts", len(self.store.accounts))
        return self.store

    def apply_transactions(self) -> list[Transaction]:
        """Apply one month of random activity and record it."""
        applied = []
        for planned in self._transaction_gen.generate_batch(
            self.store.account_ids(),
            self.config.transactions_per_month,
            self.config.amount_range,
        ):
            account = self.store.get_account(planned.account_id)
            if planned.direction is Direction.DEPOSIT:
                account.deposit(planned.amount)
            else:
                account.withdraw(planned.amount)

            transaction = Transaction(
                account_id=account.account_id,
                direction=planned.direction,
                amount=planned.amount,
                month=self.month,
                balance_after=account.get_balance(),
            )
            self.store.add_transaction(transaction)
            applied.append(transaction)

        logger.debug("Month %d: applied %d transactions", self.month, len(applied))
        return applied

    def settle(self, sink: StatementSink | None = None) -> list[MonthlyStatement]:
        """Settle every account for the current month."""
        statements = []
        for account in self.store.accounts.values():
            statement = account.settle_month(sink, month=self.month)
            self.store.add_statement(statement)
            statements.append(statement)
        return statements

    def run_month(self, sink: StatementSink | None = None) -> list[MonthlyStatement]:
        """Advance one month: activity, then settlement."""
        self.month += 1
        self.apply_transactions()
        statements = self.settle(sink)
        logger.debug("Month %d: settled %d accounts", self.month, len(statements))
        return statements

    def run(self, sink: StatementSink | None = None) -> AccountStore:
        """Populate the accounts and run every configured month.

        Returns
        -------
        AccountStore
            Store holding accounts, transactions and statements.
        """
        logger.info(
            "Starting monthly simulation: %d accounts, %d transactions/month, %d months",
            self.config.num_accounts,
            self.config.transactions_per_month,
            self.config.months,
        )

        if not self.store.accounts:
            self.populate()

        for _ in range(self.config.months):
            self.run_month(sink)

        logger.info(
            "Simulation finished: %d transactions, %d statements",
            len(self.store.transactions),
            len(self.store.statements),
        )
        return self.store
