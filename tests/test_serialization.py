"""Tests for wire serialization."""

from decimal import Decimal

import pytest

from ledger_api.models import (
    Account,
    Balance,
    Transaction,
    TransactionListing,
)
from ledger_api.serialization import (
    account_to_dict,
    balance_to_dict,
    listing_to_dict,
    serialize_amount,
    transaction_to_dict,
    wire_field_name,
)


def _account() -> Account:
    return Account(
        account_id="acct-001",
        name="Maria",
        national_id="123.456.789-09",
        email="maria@example.com",
        age=32,
        transactions=[
            Transaction(transaction_id="tx-001", title="Salário", value=Decimal("1200.50"), kind="income")
        ],
    )


class TestSerializeAmount:
    """Tests for serialize_amount."""

    def test_decimal(self) -> None:
        assert serialize_amount(Decimal("99.99")) == 99.99

    def test_fifteen_digits_are_exact(self) -> None:
        assert serialize_amount(Decimal("9999999999999.99")) == 9999999999999.99

    @pytest.mark.parametrize("value", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_rejected(self, value: str) -> None:
        with pytest.raises(ValueError, match="not finite"):
            serialize_amount(Decimal(value))


class TestWireFieldName:
    """Tests for wire_field_name."""

    def test_national_id_is_cpf(self) -> None:
        assert wire_field_name("national_id") == "cpf"

    def test_same_name_passthrough(self) -> None:
        assert wire_field_name("email") == "email"


class TestRecordConversion:
    """Tests for record-to-dict helpers."""

    def test_transaction_to_dict(self) -> None:
        tx = Transaction(transaction_id="tx-1", title="Aluguel", value=Decimal("1000"), kind="outcome")

        assert transaction_to_dict(tx) == {
            "id": "tx-1",
            "title": "Aluguel",
            "value": 1000.0,
            "type": "outcome",
        }

    def test_account_to_dict_with_transactions(self) -> None:
        data = account_to_dict(_account())

        assert data["id"] == "acct-001"
        assert data["cpf"] == "123.456.789-09"
        assert data["transactions"] == [
            {"id": "tx-001", "title": "Salário", "value": 1200.5, "type": "income"}
        ]

    def test_account_to_dict_without_transactions(self) -> None:
        data = account_to_dict(_account(), include_transactions=False)

        assert set(data) == {"id", "name", "cpf", "email", "age"}

    def test_balance_to_dict(self) -> None:
        balance = Balance(income=Decimal("1500"), outcome=Decimal("1000"), total=Decimal("500"))

        assert balance_to_dict(balance) == {"income": 1500.0, "outcome": 1000.0, "total": 500.0}

    def test_listing_to_dict(self) -> None:
        account = _account()
        listing = TransactionListing(
            transactions=account.transactions,
            balance=Balance(income=Decimal("1200.50"), total=Decimal("1200.50")),
        )

        data = listing_to_dict(listing)

        assert len(data["transactions"]) == 1
        assert data["balance"] == {"income": 1200.5, "outcome": 0.0, "total": 1200.5}
