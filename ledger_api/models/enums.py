"""Enumeration types for ledger entities."""

from enum import Enum


class TransactionKind(str, Enum):
    INCOME = "income"
    OUTCOME = "outcome"
