"""In-memory ledger store: accounts and their transactions."""

from ledger_api.store.accounts import AccountStore, AccountsView
from ledger_api.store.ledger import LedgerEngine

__all__ = ["AccountStore", "AccountsView", "LedgerEngine"]
