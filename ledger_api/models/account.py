"""Account model."""

from dataclasses import dataclass, field
from datetime import datetime

from ledger_api.models.transaction import Transaction


@dataclass
class AccountFields:
    """Scalar account fields supplied on create and update."""

    name: str
    national_id: str  # CPF
    email: str
    age: int


@dataclass
class Account:
    """Account holder owning an ordered transaction history."""

    account_id: str
    name: str
    national_id: str
    email: str
    age: int
    transactions: list[Transaction] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime | None = None
