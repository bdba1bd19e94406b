"""
Pydantic schemas for account operations.

The wire format uses camelCase field names; Python code uses
the snake_case attribute names.
"""

from decimal import Decimal

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


CAMEL_CASE = {"alias_generator": to_camel, "populate_by_name": True}


# --- Request Schemas ---

class AccountCreate(BaseModel):
    """Request to open a new account."""
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)

    model_config = CAMEL_CASE


class AmountRequest(BaseModel):
    """Amount to deposit or withdraw."""
    amount: Decimal = Field(ge=Decimal("0.01"), decimal_places=4)


class TransferRequest(BaseModel):
    """
    Move money between two accounts.

    Both accounts are named by last name.
    """
    source: str = Field(alias="from", min_length=1, max_length=100)
    destination: str = Field(alias="to", min_length=1, max_length=100)
    amount: Decimal = Field(ge=Decimal("0.01"), decimal_places=4)

    model_config = {"populate_by_name": True}


# --- Response Schemas ---

class AccountResponse(BaseModel):
    """Public view of an account."""
    first_name: str
    last_name: str
    balance: Decimal
    notification_preference: str

    model_config = {"from_attributes": True, **CAMEL_CASE}
