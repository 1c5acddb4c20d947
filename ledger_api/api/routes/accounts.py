"""
Account routes

POST   /users
GET    /users
GET    /users/{user_id}
PUT    /users/{user_id}
DELETE /users/{user_id}
"""

from typing import Any

from fastapi import APIRouter, Depends, Response, status

from ledger_api.api.dependencies import get_store
from ledger_api.api.schemas import AccountRequest
from ledger_api.serialization import account_to_dict
from ledger_api.store import AccountStore

router = APIRouter(prefix="/users", tags=["accounts"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_account(
    body: AccountRequest,
    store: AccountStore = Depends(get_store),
) -> dict[str, Any]:
    account = store.create_account(body.to_fields())
    return account_to_dict(account)


@router.get("")
def list_accounts(store: AccountStore = Depends(get_store)) -> list[dict[str, Any]]:
    return [account_to_dict(a, include_transactions=False) for a in store.list_accounts()]


@router.get("/{user_id}")
def get_account(user_id: str, store: AccountStore = Depends(get_store)) -> dict[str, Any]:
    return account_to_dict(store.get_account(user_id), include_transactions=False)


@router.put("/{user_id}")
def update_account(
    user_id: str,
    body: AccountRequest,
    store: AccountStore = Depends(get_store),
) -> dict[str, Any]:
    """Replace the account's fields; its transactions are kept."""
    account = store.update_account(user_id, body.to_fields())
    return account_to_dict(account)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_account(user_id: str, store: AccountStore = Depends(get_store)) -> Response:
    store.delete_account(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
