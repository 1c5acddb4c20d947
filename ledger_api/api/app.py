"""
FastAPI application

App factory, router registration and error translation.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ledger_api import __version__
from ledger_api.api.routes import accounts, health, transactions
from ledger_api.config import LedgerConfig
from ledger_api.exceptions import DuplicateKeyError, EntityNotFoundError
from ledger_api.logging import get_logger
from ledger_api.serialization import wire_field_name
from ledger_api.store import AccountStore, LedgerEngine

logger = get_logger(__name__)


async def _not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": str(exc)})


async def _duplicate_key_handler(request: Request, exc: DuplicateKeyError) -> JSONResponse:
    field = wire_field_name(exc.field)
    logger.info("Rejected duplicate %s on %s", field, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"message": f"{field} {exc.value!r} is already registered", "field": field},
    )


def create_app(
    config: LedgerConfig | None = None,
    store: AccountStore | None = None,
) -> FastAPI:
    """Build the HTTP application around a store.

    Parameters
    ----------
    config : LedgerConfig | None
        Configuration; defaults to ``LedgerConfig()``.
    store : AccountStore | None
        Store to serve. A new one is created from ``config`` when omitted.

    Returns
    -------
    FastAPI
        Application with ``state.store``, ``state.engine`` and ``state.config``.
    """
    config = config or LedgerConfig()
    if store is None:
        store = AccountStore(enforce_unique_on_update=config.enforce_unique_on_update)

    app = FastAPI(
        title="Ledger API",
        description="Accounts, income/outcome transactions and balances",
        version=__version__,
    )
    app.state.config = config
    app.state.store = store
    app.state.engine = LedgerEngine(store)

    app.add_exception_handler(EntityNotFoundError, _not_found_handler)
    app.add_exception_handler(DuplicateKeyError, _duplicate_key_handler)

    app.include_router(health.router)
    app.include_router(accounts.router)
    app.include_router(transactions.router)

    return app
