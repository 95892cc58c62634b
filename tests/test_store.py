"""Tests for the in-memory account store."""

from decimal import Decimal

import pytest

from account_sim.exceptions import EntityNotFoundError
from account_sim.models import (
    AccountKind,
    Direction,
    FeeAccount,
    MonthlyStatement,
    NickleNDimeAccount,
    Transaction,
)
from account_sim.store import AccountStore


def make_transaction(account_id: str, amount: str = "1.00") -> Transaction:
    return Transaction(
        account_id=account_id,
        direction=Direction.DEPOSIT,
        amount=Decimal(amount),
        month=1,
        balance_after=Decimal(amount),
    )


def make_statement(account_id: str, month: int = 1) -> MonthlyStatement:
    return MonthlyStatement(
        account_id=account_id,
        kind=AccountKind.FEE,
        month=month,
        transaction_count=1,
        balance=Decimal("0"),
    )


@pytest.fixture
def store(sample_account_id: str) -> AccountStore:
    store = AccountStore()
    store.add_account(FeeAccount(Decimal("0"), sample_account_id))
    store.add_account(NickleNDimeAccount(Decimal("0"), "acct-test-002"))
    return store


class TestAccountStore:
    """Tests for AccountStore."""

    def test_empty_store(self) -> None:
        """Test a new store holds nothing."""
        store = AccountStore()

        assert store.accounts == {}
        assert store.transactions == []
        assert store.statements == []
        assert store.account_ids() == []

    def test_add_and_get_account(self, store: AccountStore, sample_account_id: str) -> None:
        """Test accounts are retrievable by id."""
        account = store.get_account(sample_account_id)

        assert account.account_id == sample_account_id
        assert account.kind is AccountKind.FEE

    def test_account_ids_keep_insertion_order(self, store: AccountStore, sample_account_id: str) -> None:
        """Test ids come back in the order accounts were added."""
        assert store.account_ids() == [sample_account_id, "acct-test-002"]

    def test_get_unknown_account(self, store: AccountStore) -> None:
        """Test looking up a missing account raises."""
        with pytest.raises(EntityNotFoundError, match="acct-missing"):
            store.get_account("acct-missing")

    def test_add_transaction(self, store: AccountStore, sample_account_id: str) -> None:
        """Test transactions are indexed by account."""
        store.add_transaction(make_transaction(sample_account_id, "1.00"))
        store.add_transaction(make_transaction("acct-test-002", "2.00"))
        store.add_transaction(make_transaction(sample_account_id, "3.00"))

        amounts = [t.amount for t in store.get_account_transactions(sample_account_id)]
        assert amounts == [Decimal("1.00"), Decimal("3.00")]
        assert len(store.transactions) == 3

    def test_add_transaction_unknown_account(self, store: AccountStore) -> None:
        """Test a transaction for a missing account is rejected."""
        with pytest.raises(EntityNotFoundError):
            store.add_transaction(make_transaction("acct-missing"))

    def test_add_statement(self, store: AccountStore, sample_account_id: str) -> None:
        """Test statements are indexed by account, oldest first."""
        store.add_statement(make_statement(sample_account_id, month=1))
        store.add_statement(make_statement(sample_account_id, month=2))

        months = [s.month for s in store.get_account_statements(sample_account_id)]
        assert months == [1, 2]
        assert store.get_account_statements("acct-test-002") == []

    def test_add_statement_unknown_account(self, store: AccountStore) -> None:
        """Test a statement for a missing account is rejected."""
        with pytest.raises(EntityNotFoundError):
            store.add_statement(make_statement("acct-missing"))

    def test_history_of_unknown_account_is_empty(self, store: AccountStore) -> None:
        """Test history lookups do not raise for unknown ids."""
        assert store.get_account_transactions("nope") == []
        assert store.get_account_statements("nope") == []
