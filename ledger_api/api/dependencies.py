"""
Dependency injection

Store and engine are held on ``app.state`` by ``create_app``.
"""

from fastapi import Request

from ledger_api.store import AccountStore, LedgerEngine


def get_store(request: Request) -> AccountStore:
    """Return the application's account store."""
    return request.app.state.store


def get_engine(request: Request) -> LedgerEngine:
    """Return the application's ledger engine."""
    return request.app.state.engine
