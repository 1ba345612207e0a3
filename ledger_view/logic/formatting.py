# ledger_view/logic/formatting.py

from decimal import Decimal, ROUND_HALF_UP

from ledger_view.core.enums.sort_key import SortKey
from ledger_view.core.models.transaction import Transaction

_DISPLAY_QUANTUM = Decimal("0.001")


def format_amount(amount: Decimal) -> str:
    """
    Formats an amount for a table cell: sign, dollar symbol, thousands separators
    and at most three fraction digits, e.g. Decimal("-1234.50") -> "-$1,234.5".
    """
    magnitude = abs(amount).quantize(_DISPLAY_QUANTUM, rounding=ROUND_HALF_UP).normalize()
    sign = "-" if amount < 0 else ""
    return f"{sign}${magnitude:,f}"


def format_date(date_string: str) -> str:
    return date_string


def get_cell_value(transaction: Transaction, key: SortKey) -> str:
    """Returns the display text of one table cell."""
    key = SortKey(key)
    if key is SortKey.DATE:
        return format_date(transaction.date)
    if key is SortKey.AMOUNT:
        return format_amount(transaction.amount)
    if key is SortKey.TYPE:
        return transaction.type.value
    if key is SortKey.REMARK:
        return transaction.remark
    return transaction.currency
