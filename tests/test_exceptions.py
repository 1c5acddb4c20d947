"""Tests for custom exception hierarchy."""

from ledger_api.exceptions import (
    AccountNotFoundError,
    ConfigurationError,
    DuplicateKeyError,
    EntityNotFoundError,
    IdentifierCollisionError,
    LedgerError,
    TransactionNotFoundError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_ledger_error_is_exception(self) -> None:
        assert isinstance(LedgerError("test"), Exception)

    def test_entity_not_found_is_ledger_error(self) -> None:
        assert isinstance(EntityNotFoundError("test"), LedgerError)

    def test_account_not_found_is_entity_not_found(self) -> None:
        err = AccountNotFoundError("test")
        assert isinstance(err, EntityNotFoundError)
        assert isinstance(err, LedgerError)

    def test_transaction_not_found_is_entity_not_found(self) -> None:
        err = TransactionNotFoundError("test")
        assert isinstance(err, EntityNotFoundError)
        assert not isinstance(err, AccountNotFoundError)

    def test_duplicate_key_is_ledger_error(self) -> None:
        err = DuplicateKeyError("email", "a@b.com")
        assert isinstance(err, LedgerError)
        assert not isinstance(err, EntityNotFoundError)

    def test_configuration_error_is_ledger_error(self) -> None:
        assert isinstance(ConfigurationError("test"), LedgerError)

    def test_identifier_collision_is_ledger_error(self) -> None:
        err = IdentifierCollisionError("test")
        assert isinstance(err, LedgerError)
        assert not isinstance(err, DuplicateKeyError)

    def test_duplicate_key_attributes(self) -> None:
        err = DuplicateKeyError("national_id", "123")
        assert err.field == "national_id"
        assert err.value == "123"
        assert str(err) == "Account with national_id '123' already exists"

    def test_exception_message(self) -> None:
        err = AccountNotFoundError("Account acct-001 not found")
        assert str(err) == "Account acct-001 not found"
