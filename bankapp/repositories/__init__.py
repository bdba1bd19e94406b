"""Persistence for accounts and transactions."""

from bankapp.repositories.account_repository import AccountRepository
from bankapp.repositories.transaction_repository import TransactionRepository

__all__ = ["AccountRepository", "TransactionRepository"]
