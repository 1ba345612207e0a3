# ledger_view/logic/summary.py

import logging
from decimal import Decimal
from typing import List

from ledger_view.core.enums.transaction_kind import TransactionKind
from ledger_view.core.models.summary import TransactionSummary
from ledger_view.core.models.transaction import Transaction

logger = logging.getLogger(__name__)

class SummaryCalculator:
    """
    Computes the dashboard totals for a transaction collection.
    The sign of 'amount' is ignored; 'type' decides whether an entry is a credit or a debit.
    """

    def summarize(self, transactions: List[Transaction]) -> TransactionSummary:
        total_credits = Decimal(0)
        total_debits = Decimal(0)

        for txn in transactions:
            if txn.type is TransactionKind.CREDIT:
                total_credits += abs(txn.amount)
            else:
                total_debits += abs(txn.amount)

        summary = TransactionSummary(
            total_balance=total_credits - total_debits,
            total_credits=total_credits,
            total_debits=total_debits,
            transaction_count=len(transactions)
        )
        logger.debug(f"SummaryCalculator: {summary.transaction_count} transactions, credits={total_credits}, debits={total_debits}.")
        return summary
