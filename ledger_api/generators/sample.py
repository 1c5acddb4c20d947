"""Populate a store with generated accounts and transactions."""

from ledger_api.generators.account import AccountFieldsGenerator
from ledger_api.generators.transaction import TransactionFieldsGenerator
from ledger_api.logging import get_logger
from ledger_api.store import AccountStore, LedgerEngine

logger = get_logger(__name__)


def populate_store(
    store: AccountStore,
    engine: LedgerEngine,
    num_accounts: int,
    transactions_per_account: int = 10,
    seed: int | None = None,
) -> dict[str, int]:
    """Create sample accounts through the public store operations.

    Parameters
    ----------
    store : AccountStore
        Store to fill.
    engine : LedgerEngine
        Engine bound to ``store``.
    num_accounts : int
        Number of accounts to create.
    transactions_per_account : int
        Transactions added to each account.
    seed : int | None
        Random seed for reproducibility.

    Returns
    -------
    dict[str, int]
        Store summary after population.
    """
    account_gen = AccountFieldsGenerator(seed=seed)
    transaction_gen = TransactionFieldsGenerator(seed=seed)

    for fields in account_gen.generate_batch(num_accounts):
        account = store.create_account(fields)
        for tx_fields in transaction_gen.generate_batch(transactions_per_account):
            engine.add_transaction(account.account_id, tx_fields)

    summary = store.summary()
    logger.info(
        "Populated store with %d accounts and %d transactions",
        summary["accounts"],
        summary["transactions"],
    )
    return summary
