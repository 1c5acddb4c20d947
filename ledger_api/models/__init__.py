"""Domain models for the ledger."""

from ledger_api.models.account import Account, AccountFields
from ledger_api.models.enums import TransactionKind
from ledger_api.models.transaction import (
    Balance,
    Transaction,
    TransactionFields,
    TransactionListing,
)

__all__ = [
    "Account",
    "AccountFields",
    "Balance",
    "Transaction",
    "TransactionFields",
    "TransactionKind",
    "TransactionListing",
]
