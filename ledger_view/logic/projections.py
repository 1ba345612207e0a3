# ledger_view/logic/projections.py

import datetime
from decimal import Decimal
from typing import Any, Callable

from ledger_view.core.constants.table import MONTH_ABBREVIATIONS
from ledger_view.core.enums.sort_key import SortKey
from ledger_view.core.models.transaction import Transaction


def render_plain_amount(amount: Decimal) -> str:
    """
    Renders an amount as sign and magnitude only: no currency symbol,
    no grouping, no trailing zeros and never scientific notation.
    e.g. Decimal("100.00") -> "100", Decimal("-50.5") -> "-50.5"
    """
    if amount == 0:
        return "0"
    return format(amount.normalize(), "f")


def render_short_date(value: datetime.date) -> str:
    """Locale-short form, M/D/YYYY without zero padding."""
    return f"{value.month}/{value.day}/{value.year}"


def render_long_date(value: datetime.date) -> str:
    """'Mon D, YYYY' form, e.g. 'Jan 5, 2025'."""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.day}, {value.year}"


def searchable_projections(transaction: Transaction) -> list[str]:
    """
    Returns every string representation of a transaction that a search query
    is matched against. All but the raw stored date are lower-cased.
    """
    calendar_date = transaction.calendar_date
    return [
        transaction.remark.lower(),
        transaction.type.value.lower(),
        transaction.currency.lower(),
        render_plain_amount(transaction.amount),
        render_short_date(calendar_date).lower(),
        render_long_date(calendar_date).lower(),
        transaction.date,
    ]


# Typed dispatch from column key to the value that column is ordered by.
SORT_ACCESSORS: dict[SortKey, Callable[[Transaction], Any]] = {
    SortKey.DATE: lambda txn: txn.calendar_date,
    SortKey.REMARK: lambda txn: txn.remark,
    SortKey.AMOUNT: lambda txn: txn.amount,
    SortKey.CURRENCY: lambda txn: txn.currency,
    SortKey.TYPE: lambda txn: txn.type.value,
}


def sort_value(transaction: Transaction, key: SortKey) -> Any:
    return SORT_ACCESSORS[SortKey(key)](transaction)
