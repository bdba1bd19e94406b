"""
Account service: account creation, deposits, withdrawals,
transfers and transaction history.

Every operation reads the current persisted state, validates,
then mutates. Validation always precedes mutation, so a rejected
deposit or withdrawal writes nothing. There is no locking: two
concurrent requests against one account can both read the same
balance and the later write wins.

The service flushes but does not commit; the caller controls the
commit. transfer() is the exception, see its docstring.
"""

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bankapp.config import get_settings
from bankapp.models.account import Account
from bankapp.models.enums import TransactionType
from bankapp.models.transaction import Transaction
from bankapp.repositories.account_repository import AccountRepository
from bankapp.repositories.transaction_repository import TransactionRepository
from bankapp.schemas.account import AccountCreate, AccountResponse
from bankapp.schemas.transaction import TransactionResponse
from bankapp.services.exceptions import (
    AccountNotFoundError,
    DepositLimitExceededError,
    DuplicateAccountError,
    InsufficientFundsError,
)
from bankapp.services.notification_service import (
    NotificationGateway,
    get_notification_gateway,
)

logger = logging.getLogger(__name__)


# Maximum total deposited into one account per calendar day.
# A total exactly equal to the limit is allowed.
DAILY_DEPOSIT_LIMIT = Decimal("5000")

# Number of transactions returned by get_latest_transactions()
HISTORY_SIZE = 10

WELCOME_SUBJECT = "Account Created"
WELCOME_BODY = "Welcome aboard!"


class AccountService:

    def __init__(self, db: Session, notifications: NotificationGateway | None = None):
        self.db = db
        self.accounts = AccountRepository(db)
        self.transactions = TransactionRepository(db)
        self.notifications = notifications or get_notification_gateway()

    # --- Creation ---

    def create_account(self, request: AccountCreate) -> AccountResponse:
        """
        Open a new account with a zero balance.

        The account's notification preference is the default
        channel. A welcome message is sent after the account is
        saved; a failed send is logged and does not undo creation.
        """
        if self.accounts.find_by_last_name(request.last_name):
            logger.warning("Rejected duplicate account '%s'", request.last_name)
            raise DuplicateAccountError(request.last_name)

        account = Account(
            first_name=request.first_name,
            last_name=request.last_name,
            balance=Decimal("0"),
            notification_preference=self.notifications.get_default_channel().name,
        )
        try:
            account = self.accounts.save(account)
        except IntegrityError as e:
            # Another request inserted the same last name after our lookup
            raise DuplicateAccountError(request.last_name) from e

        logger.info("Created account %s for '%s'", account.id, account.last_name)
        self._send_welcome(account)
        return AccountResponse.model_validate(account)

    def _send_welcome(self, account: Account) -> None:
        channel = (
            self.notifications.get_channel_by_name(account.notification_preference)
            or self.notifications.get_default_channel()
        )
        sent = channel.send(
            get_settings().NOTIFICATION_SENDER,
            account.last_name,
            WELCOME_SUBJECT,
            WELCOME_BODY,
        )
        if not sent:
            logger.warning(
                "Welcome message to '%s' via %s was not delivered",
                account.last_name, channel.name,
            )

    # --- Lookup ---

    def get_account_by_last_name(self, last_name: str) -> Account:
        account = self.accounts.find_by_last_name(last_name)
        if not account:
            raise AccountNotFoundError()
        return account

    def get_account_by_first_name(self, first_name: str) -> Account:
        account = self.accounts.find_by_first_name(first_name)
        if not account:
            raise AccountNotFoundError()
        return account

    def get_account_by_id(self, account_id: int) -> Account:
        account = self.accounts.find_by_id(account_id)
        if not account:
            raise AccountNotFoundError()
        return account

    # --- Balance movements ---

    def daily_deposit_total(self, account: Account, day: date) -> Decimal:
        """
        Sum of the account's deposits recorded on a given day.

        Always recomputed from the transaction store so it can
        never drift from the persisted history.
        """
        return sum(
            (
                t.amount for t in self.transactions.find_all_by_account(account)
                if t.type == TransactionType.DEPOSIT and t.date == day
            ),
            Decimal("0"),
        )

    def deposit(self, last_name: str, amount: Decimal) -> AccountResponse:
        """
        Deposit into an account, enforcing the daily deposit limit.

        Raises AccountNotFoundError or DepositLimitExceededError
        before anything is written.
        """
        account = self.get_account_by_last_name(last_name)
        today = date.today()

        if self.daily_deposit_total(account, today) + amount > DAILY_DEPOSIT_LIMIT:
            logger.warning(
                "Rejected deposit of %s into '%s': daily limit reached",
                amount, last_name,
            )
            raise DepositLimitExceededError(DAILY_DEPOSIT_LIMIT)

        account.balance = account.balance + amount
        account = self.accounts.save(account)
        self.transactions.save(Transaction(
            type=TransactionType.DEPOSIT,
            amount=amount,
            date=today,
            account_id=account.id,
        ))

        logger.info("Deposited %s into '%s'", amount, last_name)
        return AccountResponse.model_validate(account)

    def withdraw(self, last_name: str, amount: Decimal) -> AccountResponse:
        """
        Withdraw from an account.

        Raises AccountNotFoundError, or InsufficientFundsError if
        the balance would go negative. Nothing is written on error.
        """
        account = self.get_account_by_last_name(last_name)

        if account.balance - amount < 0:
            logger.warning(
                "Rejected withdrawal of %s from '%s': balance is %s",
                amount, last_name, account.balance,
            )
            raise InsufficientFundsError(account.balance, amount)

        account.balance = account.balance - amount
        account = self.accounts.save(account)
        self.transactions.save(Transaction(
            type=TransactionType.WITHDRAW,
            amount=amount,
            date=date.today(),
            account_id=account.id,
        ))

        logger.info("Withdrew %s from '%s'", amount, last_name)
        return AccountResponse.model_validate(account)

    def transfer(self, source: str, destination: str, amount: Decimal) -> None:
        """
        Move money from one account to another.

        This is a withdrawal followed by a deposit, not a single
        atomic operation. The withdrawal is committed before the
        deposit runs: if the deposit is rejected (unknown
        destination, daily limit) the withdrawal stays applied and
        the error propagates. A failed withdrawal stops the
        transfer before the deposit.
        """
        self.withdraw(source, amount)
        self.db.commit()
        self.deposit(destination, amount)
        logger.info("Transferred %s from '%s' to '%s'", amount, source, destination)

    # --- History ---

    def get_latest_transactions(self, last_name: str) -> list[TransactionResponse]:
        """
        Return the last ten transactions of an account.

        Entries keep the order the store returns them in, oldest
        of the ten first.
        """
        account = self.get_account_by_last_name(last_name)
        transactions = self.transactions.find_all_by_account(account)
        return [
            TransactionResponse.model_validate(t)
            for t in transactions[-HISTORY_SIZE:]
        ]
