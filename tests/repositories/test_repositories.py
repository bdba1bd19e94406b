"""
Tests for the account and transaction stores.
"""

from datetime import date
from decimal import Decimal

from bankapp.models.account import Account
from bankapp.models.enums import TransactionType
from bankapp.models.transaction import Transaction
from bankapp.repositories import AccountRepository, TransactionRepository


def new_account(first="Ben", last="Scott"):
    return Account(
        first_name=first,
        last_name=last,
        balance=Decimal("0"),
        notification_preference="email",
    )


class TestAccountRepository:

    def test_save_assigns_id(self, db_session):
        repo = AccountRepository(db_session)
        account = repo.save(new_account())
        assert account.id is not None

    def test_save_updates_existing(self, db_session):
        repo = AccountRepository(db_session)
        account = repo.save(new_account())
        account.balance = Decimal("10")
        repo.save(account)
        db_session.commit()

        assert repo.find_by_id(account.id).balance == Decimal("10")

    def test_find_by_last_name(self, db_session):
        repo = AccountRepository(db_session)
        repo.save(new_account())
        assert repo.find_by_last_name("Scott").first_name == "Ben"
        assert repo.find_by_last_name("Yarow") is None

    def test_find_by_first_name(self, db_session):
        repo = AccountRepository(db_session)
        repo.save(new_account(first="Tyler", last="Yarow"))
        repo.save(new_account(first="Tyler", last="Scott"))
        assert repo.find_by_first_name("Tyler").last_name == "Yarow"
        assert repo.find_by_first_name("Ben") is None

    def test_find_by_id_missing(self, db_session):
        assert AccountRepository(db_session).find_by_id(42) is None


class TestTransactionRepository:

    def test_find_all_by_account_in_recorded_order(self, db_session):
        accounts = AccountRepository(db_session)
        scott = accounts.save(new_account())
        yarow = accounts.save(new_account(first="Tyler", last="Yarow"))

        repo = TransactionRepository(db_session)
        for amount, owner in [("3", scott), ("1", yarow), ("2", scott)]:
            repo.save(Transaction(
                type=TransactionType.DEPOSIT,
                amount=Decimal(amount),
                date=date.today(),
                account_id=owner.id,
            ))
        db_session.commit()

        found = repo.find_all_by_account(scott)
        assert [t.amount for t in found] == [Decimal("3"), Decimal("2")]
        assert all(t.account_id == scott.id for t in found)

    def test_date_defaults_to_today(self, db_session):
        scott = AccountRepository(db_session).save(new_account())
        txn = TransactionRepository(db_session).save(Transaction(
            type=TransactionType.WITHDRAW,
            amount=Decimal("1"),
            account_id=scott.id,
        ))
        assert txn.date == date.today()
