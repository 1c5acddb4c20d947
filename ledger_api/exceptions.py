"""Custom exception hierarchy for ledger-api."""


class LedgerError(Exception):
    """Base exception for all ledger-api errors."""


class EntityNotFoundError(LedgerError):
    """Raised when a referenced entity does not exist."""


class AccountNotFoundError(EntityNotFoundError):
    """Raised when no account matches the given id."""


class TransactionNotFoundError(EntityNotFoundError):
    """Raised when an account has no transaction with the given id."""


class DuplicateKeyError(LedgerError):
    """Raised when a unique account key is already registered."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"Account with {field} {value!r} already exists")
        self.field = field
        self.value = value


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""


class IdentifierCollisionError(LedgerError):
    """Raised when the id factory returns an id that was already issued."""
