"""
Account API endpoints.

The API layer is thin: it handles HTTP concerns (status codes,
commit and rollback) and delegates all business logic to the
AccountService.
"""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from bankapp.models.base import get_db
from bankapp.services.account_service import AccountService
from bankapp.services.exceptions import (
    BankError,
    AccountNotFoundError,
    DuplicateAccountError,
    DepositLimitExceededError,
    InsufficientFundsError,
)
from bankapp.services.notification_service import (
    NotificationGateway,
    get_notification_gateway,
)
from bankapp.schemas.account import (
    AccountCreate,
    AccountResponse,
    AmountRequest,
    TransferRequest,
)
from bankapp.schemas.transaction import TransactionResponse

router = APIRouter(prefix="/api", tags=["Accounts"])


# One status code per domain error
ERROR_STATUS = {
    AccountNotFoundError: 404,
    DuplicateAccountError: 409,
    DepositLimitExceededError: 400,
    InsufficientFundsError: 409,
}


def get_account_service(
    db: Session = Depends(get_db),
    notifications: NotificationGateway = Depends(get_notification_gateway),
) -> AccountService:
    return AccountService(db, notifications)


def _http_error(error: BankError) -> HTTPException:
    return HTTPException(status_code=ERROR_STATUS[type(error)], detail=str(error))


@router.post("/account", response_model=AccountResponse, status_code=201)
def create_account(
    request: AccountCreate,
    service: AccountService = Depends(get_account_service),
):
    """
    Open a new account.

    The account starts with a zero balance and the default
    notification channel. Returns 409 if the last name is taken.
    """
    try:
        account = service.create_account(request)
        service.db.commit()
        return account
    except BankError as e:
        service.db.rollback()
        raise _http_error(e)


@router.get("/account/first/{first_name}", response_model=AccountResponse)
def get_account_by_first_name(
    first_name: str,
    service: AccountService = Depends(get_account_service),
):
    """Find an account by first name."""
    try:
        return service.get_account_by_first_name(first_name)
    except BankError as e:
        raise _http_error(e)


@router.get("/account/id/{account_id}", response_model=AccountResponse)
def get_account_by_id(
    account_id: int,
    service: AccountService = Depends(get_account_service),
):
    """Find an account by id."""
    try:
        return service.get_account_by_id(account_id)
    except BankError as e:
        raise _http_error(e)


@router.get(
    "/account/transactions/{last_name}",
    response_model=list[TransactionResponse],
)
def get_latest_transactions(
    last_name: str,
    service: AccountService = Depends(get_account_service),
):
    """Get the ten most recent transactions of an account, oldest first."""
    try:
        return service.get_latest_transactions(last_name)
    except BankError as e:
        raise _http_error(e)


@router.get("/account/{last_name}", response_model=AccountResponse)
def get_account(
    last_name: str,
    service: AccountService = Depends(get_account_service),
):
    """Get account details by last name."""
    try:
        return service.get_account_by_last_name(last_name)
    except BankError as e:
        raise _http_error(e)


@router.post("/account/deposit/{last_name}", response_model=AccountResponse)
def deposit(
    last_name: str,
    request: AmountRequest,
    service: AccountService = Depends(get_account_service),
):
    """
    Deposit money into an account.

    Returns 400 if today's deposits would exceed the daily limit.
    """
    try:
        account = service.deposit(last_name, request.amount)
        service.db.commit()
        return account
    except BankError as e:
        service.db.rollback()
        raise _http_error(e)


@router.post("/account/withdraw/{last_name}", response_model=AccountResponse)
def withdraw(
    last_name: str,
    request: AmountRequest,
    service: AccountService = Depends(get_account_service),
):
    """
    Withdraw money from an account.

    Returns 409 if the balance is too low.
    """
    try:
        account = service.withdraw(last_name, request.amount)
        service.db.commit()
        return account
    except BankError as e:
        service.db.rollback()
        raise _http_error(e)


@router.post("/account/transfer", status_code=204)
def transfer(
    request: TransferRequest,
    service: AccountService = Depends(get_account_service),
):
    """
    Transfer money between two accounts.

    The withdrawal is committed before the deposit runs, so a
    rejected deposit leaves the source account debited.
    """
    try:
        service.transfer(request.source, request.destination, request.amount)
        service.db.commit()
    except BankError as e:
        service.db.rollback()
        raise _http_error(e)
    return Response(status_code=204)
