"""Custom exception hierarchy for account-sim."""


class AccountSimError(Exception):
    """Base exception for all account-sim errors."""


class EntityNotFoundError(AccountSimError):
    """Raised when a referenced account does not exist."""


class ConfigurationError(AccountSimError):
    """Raised when configuration is invalid or missing."""


class UnknownAccountKindError(ConfigurationError):
    """Raised when an account kind has no registered variant."""


class SinkError(AccountSimError):
    """Raised when a sink operation fails."""
