"""Account registry with identity and uniqueness enforcement."""

import threading
import uuid
from datetime import datetime
from typing import Callable, Iterator

from ledger_api.exceptions import (
    AccountNotFoundError,
    DuplicateKeyError,
    IdentifierCollisionError,
)
from ledger_api.logging import get_logger
from ledger_api.models import Account, AccountFields

logger = get_logger(__name__)


def new_id() -> str:
    """Return a fresh random identifier."""
    return str(uuid.uuid4())


class AccountsView:
    """Lazy, restartable view over the accounts of a store.

    Every iteration snapshots the accounts in insertion order under the
    store lock, so a view stays valid across later mutations.
    """

    def __init__(self, store: "AccountStore") -> None:
        self._store = store

    def __iter__(self) -> Iterator[Account]:
        with self._store.lock:
            snapshot = list(self._store._accounts.values())
        return iter(snapshot)

    def __len__(self) -> int:
        return len(self._store)


class AccountStore:
    """Authoritative in-memory registry of accounts.

    Each account owns its transaction list directly; there is no separate
    transaction table, so deleting an account discards its whole history.

    Parameters
    ----------
    enforce_unique_on_update : bool
        Re-run the ``national_id``/``email`` uniqueness check on update,
        ignoring the account being updated. Off by default, in which case
        an update may introduce a duplicate key.
    id_factory : Callable[[], str] | None
        Identifier generator for accounts and transactions (default uuid4).
    """

    def __init__(
        self,
        enforce_unique_on_update: bool = False,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.enforce_unique_on_update = enforce_unique_on_update
        self._id_factory = id_factory or new_id
        # Store-wide lock, shared with LedgerEngine
        self.lock = threading.RLock()
        self._accounts: dict[str, Account] = {}
        # every account and transaction id handed out, deleted ones included
        self._issued_ids: set[str] = set()

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts

    def create_account(self, fields: AccountFields) -> Account:
        """Register a new account with an empty transaction history.

        Raises
        ------
        DuplicateKeyError
            If ``national_id`` or ``email`` is already registered.
            ``national_id`` is checked first.
        """
        with self.lock:
            self._check_unique(fields)
            account = Account(
                account_id=self.issue_id(),
                name=fields.name,
                national_id=fields.national_id,
                email=fields.email,
                age=fields.age,
            )
            self._accounts[account.account_id] = account
        logger.info("Created account %s", account.account_id)
        return account

    def get_account(self, account_id: str) -> Account:
        """Return the account with the given id."""
        with self.lock:
            account = self._accounts.get(account_id)
        if account is None:
            raise AccountNotFoundError(f"Account {account_id} not found")
        return account

    def list_accounts(self) -> AccountsView:
        """Return a view over all accounts in insertion order."""
        return AccountsView(self)

    def update_account(self, account_id: str, fields: AccountFields) -> Account:
        """Replace the scalar fields of an account in place.

        The account id and its transactions are preserved.
        """
        with self.lock:
            account = self.get_account(account_id)
            if self.enforce_unique_on_update:
                self._check_unique(fields, exclude=account_id)
            account.name = fields.name
            account.national_id = fields.national_id
            account.email = fields.email
            account.age = fields.age
            account.updated_at = datetime.now()
        logger.debug("Updated account %s", account_id)
        return account

    def delete_account(self, account_id: str) -> None:
        """Remove an account and its transactions. Unknown ids are ignored."""
        with self.lock:
            account = self._accounts.pop(account_id, None)
        if account is None:
            logger.debug("Delete of unknown account %s ignored", account_id)
            return
        logger.info(
            "Deleted account %s with %d transactions",
            account_id,
            len(account.transactions),
        )

    def issue_id(self) -> str:
        """Return a new id, never handed out before by this store.

        Raises
        ------
        IdentifierCollisionError
            If the id factory repeats an earlier id.
        """
        with self.lock:
            new = self._id_factory()
            if new in self._issued_ids:
                raise IdentifierCollisionError(f"Identifier {new} was already issued")
            self._issued_ids.add(new)
        return new

    def summary(self) -> dict[str, int]:
        """Return counts of accounts and transactions."""
        with self.lock:
            return {
                "accounts": len(self._accounts),
                "transactions": sum(len(a.transactions) for a in self._accounts.values()),
            }

    def _check_unique(self, fields: AccountFields, exclude: str | None = None) -> None:
        others = [a for a in self._accounts.values() if a.account_id != exclude]
        if any(a.national_id == fields.national_id for a in others):
            raise DuplicateKeyError("national_id", fields.national_id)
        if any(a.email == fields.email for a in others):
            raise DuplicateKeyError("email", fields.email)
