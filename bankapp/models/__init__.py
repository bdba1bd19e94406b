"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from bankapp.models.base import Base
from bankapp.models.enums import TransactionType
from bankapp.models.account import Account
from bankapp.models.transaction import Transaction

__all__ = [
    "Base",
    "TransactionType",
    "Account",
    "Transaction",
]
