"""
Pydantic schemas for transaction history.
"""

from decimal import Decimal

from pydantic import BaseModel

from bankapp.models.enums import TransactionType


class TransactionResponse(BaseModel):
    """Public view of a transaction: only what happened and how much."""
    type: TransactionType
    amount: Decimal

    model_config = {"from_attributes": True}
