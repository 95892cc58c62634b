"""In-memory data stores for maintaining simulation state."""

from account_sim.store.accounts import AccountStore

__all__ = ["AccountStore"]
