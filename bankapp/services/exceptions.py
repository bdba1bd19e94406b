"""Domain errors raised by the account service."""


class BankError(Exception):
    """Base class for every rejection the ledger reports to its caller."""


class AccountNotFoundError(BankError):
    """No account matches the requested last name, first name or id."""

    def __init__(self, message: str = "Account not found"):
        super().__init__(message)


class DuplicateAccountError(BankError):
    """An account with this last name already exists."""

    def __init__(self, last_name: str):
        self.last_name = last_name
        super().__init__(f"Account with last name '{last_name}' already exists")


class DepositLimitExceededError(BankError):
    """The deposit would push today's deposit total over the daily limit."""

    def __init__(self, limit):
        self.limit = limit
        super().__init__(f"Daily deposit limit of {limit} exceeded")


class InsufficientFundsError(BankError):
    """The withdrawal would drive the balance below zero."""

    def __init__(self, balance, requested):
        self.balance = balance
        self.requested = requested
        super().__init__(
            f"Insufficient funds: available={balance}, requested={requested}"
        )
