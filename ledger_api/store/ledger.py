"""Per-account transaction operations and balance aggregation."""

from datetime import datetime
from decimal import Decimal
from typing import Iterable

from ledger_api.exceptions import TransactionNotFoundError
from ledger_api.logging import get_logger
from ledger_api.models import (
    Account,
    Balance,
    Transaction,
    TransactionFields,
    TransactionKind,
    TransactionListing,
)
from ledger_api.store.accounts import AccountStore

logger = get_logger(__name__)


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _to_kind(kind: str) -> str:
    # TransactionKind members are stored by value
    if isinstance(kind, TransactionKind):
        return kind.value
    return kind


class LedgerEngine:
    """Transaction CRUD over the accounts of an ``AccountStore``.

    Every operation resolves the owning account through the store first and
    runs under the store lock.
    """

    def __init__(self, store: AccountStore) -> None:
        self.store = store

    def add_transaction(self, account_id: str, fields: TransactionFields) -> Transaction:
        """Append a new transaction to an account's history."""
        with self.store.lock:
            account = self.store.get_account(account_id)
            transaction = Transaction(
                transaction_id=self.store.issue_id(),
                title=fields.title,
                value=_to_decimal(fields.value),
                kind=_to_kind(fields.kind),
            )
            account.transactions.append(transaction)
        logger.info(
            "Added %s transaction %s to account %s",
            transaction.kind,
            transaction.transaction_id,
            account_id,
        )
        return transaction

    def get_transaction(self, account_id: str, transaction_id: str) -> Transaction:
        """Return one transaction of an account."""
        with self.store.lock:
            account = self.store.get_account(account_id)
            return account.transactions[self._index_of(account, transaction_id)]

    def list_transactions_with_balance(self, account_id: str) -> TransactionListing:
        """Return an account's transactions in stored order with their balance."""
        with self.store.lock:
            account = self.store.get_account(account_id)
            transactions = list(account.transactions)
            # balance must see the same field values as the returned list
            return TransactionListing(
                transactions=transactions,
                balance=self.compute_balance(transactions),
            )

    def update_transaction(
        self,
        account_id: str,
        transaction_id: str,
        fields: TransactionFields,
    ) -> Transaction:
        """Replace title, value and kind of a transaction, keeping its id."""
        with self.store.lock:
            account = self.store.get_account(account_id)
            transaction = account.transactions[self._index_of(account, transaction_id)]
            transaction.title = fields.title
            transaction.value = _to_decimal(fields.value)
            transaction.kind = _to_kind(fields.kind)
            transaction.updated_at = datetime.now()
        logger.debug("Updated transaction %s of account %s", transaction_id, account_id)
        return transaction

    def delete_transaction(self, account_id: str, transaction_id: str) -> None:
        """Remove one transaction from its account's history."""
        with self.store.lock:
            account = self.store.get_account(account_id)
            del account.transactions[self._index_of(account, transaction_id)]
        logger.info("Deleted transaction %s of account %s", transaction_id, account_id)

    @staticmethod
    def compute_balance(transactions: Iterable[Transaction]) -> Balance:
        """Sum income and outcome values in a single pass.

        Kinds other than ``income`` and ``outcome`` are skipped.

        Parameters
        ----------
        transactions : Iterable[Transaction]
            Transactions to aggregate.

        Returns
        -------
        Balance
            ``income``, ``outcome`` and ``total = income - outcome``.
        """
        income = Decimal("0")
        outcome = Decimal("0")
        for transaction in transactions:
            if transaction.kind == TransactionKind.INCOME:
                income += transaction.value
            elif transaction.kind == TransactionKind.OUTCOME:
                outcome += transaction.value
        return Balance(income=income, outcome=outcome, total=income - outcome)

    @staticmethod
    def _index_of(account: Account, transaction_id: str) -> int:
        for index, transaction in enumerate(account.transactions):
            if transaction.transaction_id == transaction_id:
                return index
        raise TransactionNotFoundError(
            f"Transaction {transaction_id} not found in account {account.account_id}"
        )
