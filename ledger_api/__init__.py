"""In-memory personal-finance ledger: accounts, transactions and balances."""

__version__ = "0.1.0"
