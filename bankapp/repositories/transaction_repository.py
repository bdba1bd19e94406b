"""
Transaction store.

Transactions are append-only, so there is no update or delete.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from bankapp.models.account import Account
from bankapp.models.transaction import Transaction


class TransactionRepository:

    def __init__(self, db: Session):
        self.db = db

    def save(self, transaction: Transaction) -> Transaction:
        self.db.add(transaction)
        self.db.flush()
        return transaction

    def find_all_by_account(self, account: Account) -> list[Transaction]:
        """Return every transaction of an account in the order it was recorded."""
        transactions = self.db.execute(
            select(Transaction)
            .where(Transaction.account_id == account.id)
            .order_by(Transaction.id)
        ).scalars().all()
        return list(transactions)
