"""
Health check endpoint

GET /health - server status
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ledger_api import __version__
from ledger_api.api.dependencies import get_store
from ledger_api.store import AccountStore

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response"""

    status: str
    version: str
    accounts: int


@router.get("/health", response_model=HealthResponse)
def health_check(store: AccountStore = Depends(get_store)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, accounts=len(store))
