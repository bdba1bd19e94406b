"""
Account store.

Repositories take the request's session and only add and
flush. The caller controls the commit.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from bankapp.models.account import Account


class AccountRepository:

    def __init__(self, db: Session):
        self.db = db

    def save(self, account: Account) -> Account:
        """Insert or update an account. The id is assigned on first save."""
        self.db.add(account)
        self.db.flush()
        return account

    def find_by_last_name(self, last_name: str) -> Account | None:
        return self.db.execute(
            select(Account).where(Account.last_name == last_name)
        ).scalar_one_or_none()

    def find_by_first_name(self, first_name: str) -> Account | None:
        """First names are not unique; the earliest account wins."""
        return self.db.execute(
            select(Account)
            .where(Account.first_name == first_name)
            .order_by(Account.id)
            .limit(1)
        ).scalar_one_or_none()

    def find_by_id(self, account_id: int) -> Account | None:
        return self.db.get(Account, account_id)
