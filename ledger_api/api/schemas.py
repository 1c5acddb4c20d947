"""
Request schemas (Pydantic)

Validation stage run before any store operation. Field names follow the
public wire format (``cpf``, ``type``).
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from ledger_api.models import AccountFields, TransactionFields

# Amounts are emitted as JSON numbers; 15 significant digits survive the
# float conversion exactly.
MAX_VALUE_DIGITS = 15
MAX_VALUE_PLACES = 2


class AccountRequest(BaseModel):
    """Account body for create and update."""

    name: str = Field(..., min_length=1, description="Display name")
    cpf: str = Field(..., min_length=1, description="National id (CPF)")
    email: str = Field(..., min_length=1, description="Email address")
    age: int = Field(..., gt=0, description="Age in years")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Maria Silva",
                    "cpf": "123.456.789-09",
                    "email": "maria@example.com",
                    "age": 32,
                }
            ]
        }
    }

    def to_fields(self) -> AccountFields:
        return AccountFields(
            name=self.name,
            national_id=self.cpf,
            email=self.email,
            age=self.age,
        )


class TransactionRequest(BaseModel):
    """Transaction body for create and update."""

    title: str = Field(..., description="Description")
    value: Decimal = Field(
        ...,
        ge=0,
        max_digits=MAX_VALUE_DIGITS,
        decimal_places=MAX_VALUE_PLACES,
        allow_inf_nan=False,
        description="Non-negative amount, at most 15 digits and 2 decimal places",
    )
    type: str = Field(..., min_length=1, description="income, outcome or any other label")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"title": "Salário", "value": 1200, "type": "income"},
                {"title": "Aluguel", "value": 1000, "type": "outcome"},
            ]
        }
    }

    def to_fields(self) -> TransactionFields:
        return TransactionFields(title=self.title, value=self.value, kind=self.type)
