"""Sample data generators for demo and test stores."""

from ledger_api.generators.account import AccountFieldsGenerator
from ledger_api.generators.sample import populate_store
from ledger_api.generators.transaction import TransactionFieldsGenerator

__all__ = [
    "AccountFieldsGenerator",
    "TransactionFieldsGenerator",
    "populate_store",
]
