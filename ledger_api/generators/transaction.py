"""Transaction fields generator."""

from __future__ import annotations

import random
from decimal import Decimal
from typing import Iterator

from ledger_api.generators.base import BaseGenerator
from ledger_api.models import TransactionFields, TransactionKind


class TransactionFieldsGenerator(BaseGenerator):
    """Generate income and outcome entries."""

    KINDS = list(TransactionKind)
    KIND_WEIGHTS = [0.35, 0.65]

    TITLES = {
        TransactionKind.INCOME: [
            "Salário",
            "Freelance",
            "Reembolso",
            "Rendimento poupança",
            "Venda",
        ],
        TransactionKind.OUTCOME: [
            "Aluguel",
            "Supermercado",
            "Conta de luz",
            "Internet",
            "Restaurante",
            "Transporte",
            "Farmácia",
        ],
    }

    MAX_VALUE = 50000

    def generate(self) -> TransactionFields:
        """Generate fields for a single transaction.

        Returns
        -------
        TransactionFields
            Generated transaction fields.
        """
        kind = random.choices(self.KINDS, weights=self.KIND_WEIGHTS, k=1)[0]

        # Pareto distribution: many small entries, few large ones
        value = random.paretovariate(1.5) * 50
        value = round(min(value, self.MAX_VALUE), 2)

        return TransactionFields(
            title=random.choice(self.TITLES[kind]),
            value=Decimal(str(value)),
            kind=kind.value,
        )

    def generate_batch(self, count: int) -> Iterator[TransactionFields]:
        """Generate fields for multiple transactions."""
        for _ in range(count):
            yield self.generate()
