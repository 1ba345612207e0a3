# ledger_view/core/models/transaction.py

import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict, field_validator

from ledger_view.core.constants.table import STORED_DATE_FORMAT
from ledger_view.core.enums.transaction_kind import TransactionKind


class Transaction(BaseModel):
    """
    Represents a single ledger entry as supplied by the data source.
    Instances are immutable; the search and sort engines only ever read them.
    """
    id: int = Field(..., description="Unique, stable identifier for the transaction")
    date: str = Field(..., description="Date the transaction occurred, stored as DD-MM-YYYY text")
    remark: str = Field(default="", description="Free-text description, may be empty")
    amount: Decimal = Field(..., description="Signed amount; credit/debit is decided by 'type'")
    currency: str = Field(..., min_length=1, max_length=10, description="Short currency code (e.g. USD)")
    type: TransactionKind = Field(..., description="Kind of transaction (Credit or Debit)")

    model_config = ConfigDict(
        frozen=True,
        extra='ignore'
    )

    @field_validator("date")
    @classmethod
    def check_stored_date(cls, value: str) -> str:
        # The stored text is kept as-is; it only has to be a real calendar date.
        datetime.datetime.strptime(value, STORED_DATE_FORMAT)
        return value

    @field_validator("currency")
    @classmethod
    def check_currency(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("currency must not be blank")
        return value

    @property
    def calendar_date(self) -> datetime.date:
        """The stored date parsed into a calendar value, used for ordering."""
        return datetime.datetime.strptime(self.date, STORED_DATE_FORMAT).date()
