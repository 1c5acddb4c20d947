"""Account fields generator."""

from __future__ import annotations

import random
from typing import Iterator

from ledger_api.generators.base import BaseGenerator
from ledger_api.models import AccountFields


class AccountFieldsGenerator(BaseGenerator):
    """Generate account holder data.

    CPFs and emails are drawn through Faker's ``unique`` proxy, so one
    generator never repeats a key and its output can be registered in a
    single store without ``DuplicateKeyError``.
    """

    MIN_AGE = 18
    MAX_AGE = 90

    def generate(self) -> AccountFields:
        """Generate fields for a single account.

        Returns
        -------
        AccountFields
            Generated account fields.
        """
        return AccountFields(
            name=self.fake.name(),
            national_id=self.fake.unique.cpf(),
            email=self.fake.unique.email(),
            age=random.randint(self.MIN_AGE, self.MAX_AGE),
        )

    def generate_batch(self, count: int) -> Iterator[AccountFields]:
        """Generate fields for multiple accounts.

        Parameters
        ----------
        count : int
            Number of accounts to generate.

        Yields
        ------
        AccountFields
            Generated account fields.
        """
        for _ in range(count):
            yield self.generate()
