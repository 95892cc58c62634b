"""In-memory store for simulated accounts and their history."""

from dataclasses import dataclass, field

from account_sim.exceptions import EntityNotFoundError
from account_sim.models import Account, MonthlyStatement, Transaction


@dataclass
class AccountStore:
    """Accounts owned by a simulation run, with transaction and statement logs."""

    accounts: dict[str, Account] = field(default_factory=dict)
    transactions: list[Transaction] = field(default_factory=list)
    statements: list[MonthlyStatement] = field(default_factory=list)

    # Relationship indexes
    _account_transactions: dict[str, list[int]] = field(default_factory=dict)
    _account_statements: dict[str, list[int]] = field(default_factory=dict)

    def add_account(self, account: Account) -> None:
        """Add an account to the store."""
        self.accounts[account.account_id] = account
        self._account_transactions[account.account_id] = []
        self._account_statements[account.account_id] = []

    def get_account(self, account_id: str) -> Account:
        """Look up an account by id."""
        try:
            return self.accounts[account_id]
        except KeyError:
            raise EntityNotFoundError(f"Account {account_id} not found") from None

    def add_transaction(self, transaction: Transaction) -> None:
        """Record an applied transaction."""
        if transaction.account_id not in self.accounts:
            raise EntityNotFoundError(f"Account {transaction.account_id} not found")

        self._account_transactions[transaction.account_id].append(len(self.transactions))
        self.transactions.append(transaction)

    def add_statement(self, statement: MonthlyStatement) -> None:
        """Record a settlement summary."""
        if statement.account_id not in self.accounts:
            raise EntityNotFoundError(f"Account {statement.account_id} not found")

        self._account_statements[statement.account_id].append(len(self.statements))
        self.statements.append(statement)

    def get_account_transactions(self, account_id: str) -> list[Transaction]:
        """Get all transactions applied to an account."""
        return [self.transactions[i] for i in self._account_transactions.get(account_id, [])]

    def get_account_statements(self, account_id: str) -> list[MonthlyStatement]:
        """Get every statement emitted for an account, oldest first."""
        return [self.statements[i] for i in self._account_statements.get(account_id, [])]

    def account_ids(self) -> list[str]:
        """Account ids in insertion order."""
        return list(self.accounts)
