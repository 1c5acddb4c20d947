"""Conversion of ledger records to JSON-compatible dicts.

Field names follow the public wire format: accounts expose ``id`` and
``cpf``, transactions expose ``id`` and ``type``.
"""

from decimal import Decimal
from typing import Any

from ledger_api.models import Account, Balance, Transaction, TransactionListing

# Core field name -> wire field name, where they differ
WIRE_FIELD_NAMES = {"national_id": "cpf"}


def wire_field_name(field: str) -> str:
    """Return the name a core field has in request and response bodies."""
    return WIRE_FIELD_NAMES.get(field, field)


def serialize_amount(value: Decimal) -> float:
    """Serialize an amount as a JSON number.

    Raises
    ------
    ValueError
        If the amount is not finite.
    """
    if not value.is_finite():
        raise ValueError(f"Amount {value} is not finite")
    return float(value)


def transaction_to_dict(transaction: Transaction) -> dict[str, Any]:
    """Convert a transaction to its wire representation."""
    return {
        "id": transaction.transaction_id,
        "title": transaction.title,
        "value": serialize_amount(transaction.value),
        "type": transaction.kind,
    }


def account_to_dict(account: Account, include_transactions: bool = True) -> dict[str, Any]:
    """Convert an account to its wire representation.

    Parameters
    ----------
    account : Account
        Account to convert.
    include_transactions : bool
        Embed the account's transactions (read endpoints omit them).
    """
    data: dict[str, Any] = {
        "id": account.account_id,
        "name": account.name,
        "cpf": account.national_id,
        "email": account.email,
        "age": account.age,
    }
    if include_transactions:
        data["transactions"] = [transaction_to_dict(t) for t in account.transactions]
    return data


def balance_to_dict(balance: Balance) -> dict[str, Any]:
    """Convert a balance to its wire representation."""
    return {
        "income": serialize_amount(balance.income),
        "outcome": serialize_amount(balance.outcome),
        "total": serialize_amount(balance.total),
    }


def listing_to_dict(listing: TransactionListing) -> dict[str, Any]:
    """Convert a transaction listing to ``{"transactions", "balance"}``."""
    return {
        "transactions": [transaction_to_dict(t) for t in listing.transactions],
        "balance": balance_to_dict(listing.balance),
    }
