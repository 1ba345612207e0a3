# ledger_view/tests/unit/test_formatting.py

import pytest
from decimal import Decimal

from ledger_view.core.enums.sort_key import SortKey
from ledger_view.core.models.transaction import Transaction
from ledger_view.logic.formatting import format_amount, format_date, get_cell_value

@pytest.mark.parametrize("amount, expected", [
    (Decimal("100"), "$100"),
    (Decimal("-50"), "-$50"),
    (Decimal("1234.50"), "$1,234.5"),
    (Decimal("-1234567"), "-$1,234,567"),
    (Decimal("0.12345"), "$0.123"),
    (Decimal("0"), "$0"),
])
def test_format_amount(amount, expected):
    assert format_amount(amount) == expected

def test_format_date_keeps_stored_text():
    assert format_date("05-01-2025") == "05-01-2025"

def test_get_cell_value_per_column():
    txn = Transaction(id=1, date="05-01-2025", remark="Rent", amount=Decimal("-1200"), currency="USD", type="Debit")
    assert get_cell_value(txn, SortKey.DATE) == "05-01-2025"
    assert get_cell_value(txn, SortKey.REMARK) == "Rent"
    assert get_cell_value(txn, SortKey.AMOUNT) == "-$1,200"
    assert get_cell_value(txn, SortKey.CURRENCY) == "USD"
    assert get_cell_value(txn, SortKey.TYPE) == "Debit"
