# ledger_view/core/models/summary.py

from decimal import Decimal
from pydantic import BaseModel, Field

class TransactionSummary(BaseModel):
    """
    Aggregate figures shown above the transactions table.
    Credits and debits are magnitudes; the balance is credits minus debits.
    """
    total_balance: Decimal = Field(default=Decimal(0), description="Total credits minus total debits")
    total_credits: Decimal = Field(default=Decimal(0), description="Sum of credit magnitudes")
    total_debits: Decimal = Field(default=Decimal(0), description="Sum of debit magnitudes")
    transaction_count: int = Field(default=0, ge=0, description="Number of transactions summarised")
