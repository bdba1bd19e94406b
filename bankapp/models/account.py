"""
Account model.

An account is a named ledger entry. The last name is the key
every mutating operation looks the account up by, so it is
unique at the database level.
"""

from decimal import Decimal

from sqlalchemy import String, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bankapp.models.base import Base


class Account(Base):
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False, index=True
    )
    balance: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    notification_preference: Mapped[str] = mapped_column(
        String(50), nullable=False
    )

    # Transactions are append-only and never deleted with the account
    transactions: Mapped[list["Transaction"]] = relationship(
        back_populates="account",
        order_by="Transaction.id",
    )

    def __repr__(self) -> str:
        return f"<Account {self.first_name} {self.last_name} {self.balance}>"
