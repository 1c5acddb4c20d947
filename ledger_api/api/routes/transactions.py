"""
Transaction routes

POST   /users/{user_id}/transactions
GET    /users/{user_id}/transactions                   - with balance
GET    /users/{user_id}/transactions/{transaction_id}
PUT    /users/{user_id}/transactions/{transaction_id}
DELETE /users/{user_id}/transactions/{transaction_id}
"""

from typing import Any

from fastapi import APIRouter, Depends, Response, status

from ledger_api.api.dependencies import get_engine
from ledger_api.api.schemas import TransactionRequest
from ledger_api.serialization import listing_to_dict, transaction_to_dict
from ledger_api.store import LedgerEngine

router = APIRouter(prefix="/users/{user_id}/transactions", tags=["transactions"])


@router.post("", status_code=status.HTTP_201_CREATED)
def add_transaction(
    user_id: str,
    body: TransactionRequest,
    engine: LedgerEngine = Depends(get_engine),
) -> dict[str, Any]:
    transaction = engine.add_transaction(user_id, body.to_fields())
    return transaction_to_dict(transaction)


@router.get("")
def list_transactions(
    user_id: str,
    engine: LedgerEngine = Depends(get_engine),
) -> dict[str, Any]:
    """List an account's transactions together with income, outcome and total."""
    return listing_to_dict(engine.list_transactions_with_balance(user_id))


@router.get("/{transaction_id}")
def get_transaction(
    user_id: str,
    transaction_id: str,
    engine: LedgerEngine = Depends(get_engine),
) -> dict[str, Any]:
    return transaction_to_dict(engine.get_transaction(user_id, transaction_id))


@router.put("/{transaction_id}")
def update_transaction(
    user_id: str,
    transaction_id: str,
    body: TransactionRequest,
    engine: LedgerEngine = Depends(get_engine),
) -> dict[str, Any]:
    transaction = engine.update_transaction(user_id, transaction_id, body.to_fields())
    return transaction_to_dict(transaction)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction(
    user_id: str,
    transaction_id: str,
    engine: LedgerEngine = Depends(get_engine),
) -> Response:
    engine.delete_transaction(user_id, transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
