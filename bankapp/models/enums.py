"""
Shared enumerations for database models.

Mapping Python enums to database enums means only valid
values can be stored.
"""

import enum


class TransactionType(str, enum.Enum):
    """Kind of balance movement a transaction records."""
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
