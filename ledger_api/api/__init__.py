"""HTTP transport for the ledger."""

from ledger_api.api.app import create_app

__all__ = ["create_app"]
