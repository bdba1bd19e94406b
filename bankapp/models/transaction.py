"""
Transaction model.

One row per successful deposit or withdrawal. Transactions are
immutable: once recorded they are never modified or deleted.
The daily deposit limit is computed from these rows.
"""

import datetime as dt
from decimal import Decimal

from sqlalchemy import Date, Numeric, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bankapp.models.base import Base
from bankapp.models.enums import TransactionType


class Transaction(Base):
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(primary_key=True)
    type: Mapped[TransactionType] = mapped_column(
        SAEnum(
            TransactionType,
            name="transaction_type_enum",
            values_callable=lambda e: [member.value for member in e],
            create_constraint=True,
        ),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    date: Mapped[dt.date] = mapped_column(
        Date, nullable=False, default=dt.date.today
    )
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )

    account: Mapped["Account"] = relationship(back_populates="transactions")

    def __repr__(self) -> str:
        return f"<Transaction {self.type.value} {self.amount} on {self.date}>"
