# ledger_view/tests/unit/test_summary.py

from decimal import Decimal

from ledger_view.core.models.transaction import Transaction
from ledger_view.logic.summary import SummaryCalculator

def test_summarize_empty():
    summary = SummaryCalculator().summarize([])
    assert summary.transaction_count == 0
    assert summary.total_balance == Decimal(0)

def test_summarize_uses_type_for_sign():
    transactions = [
        Transaction(id=1, date="01-01-2025", amount=Decimal("3000"), currency="USD", type="Credit"),
        Transaction(id=2, date="02-01-2025", amount=Decimal("-150"), currency="USD", type="Debit"),
        # Stored without a sign, still a debit because of its type
        Transaction(id=3, date="03-01-2025", amount=Decimal("50"), currency="USD", type="Debit"),
    ]
    summary = SummaryCalculator().summarize(transactions)

    assert summary.total_credits == Decimal("3000")
    assert summary.total_debits == Decimal("200")
    assert summary.total_balance == Decimal("2800")
    assert summary.transaction_count == 3
