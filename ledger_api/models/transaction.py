"""Transaction and balance models."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass
class TransactionFields:
    """Transaction fields supplied on create and update.

    ``kind`` is free-form: only ``income`` and ``outcome`` count towards a
    balance, anything else is stored as given.
    """

    title: str
    value: Decimal
    kind: str


@dataclass
class Transaction:
    """Single income or outcome entry of an account."""

    transaction_id: str
    title: str
    value: Decimal
    kind: str
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime | None = None


@dataclass
class Balance:
    """Aggregate over a transaction sequence."""

    income: Decimal = Decimal("0")
    outcome: Decimal = Decimal("0")
    total: Decimal = Decimal("0")


@dataclass
class TransactionListing:
    """Transactions of an account in stored order, with their balance."""

    transactions: list[Transaction]
    balance: Balance
