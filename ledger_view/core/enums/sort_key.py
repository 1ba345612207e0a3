# ledger_view/core/enums/sort_key.py

from enum import Enum

class SortKey(str, Enum):
    """
    Closed set of Transaction fields that can be displayed, searched and sorted.
    Every member needs a matching accessor in logic/projections.py.
    """
    DATE = "date"
    REMARK = "remark"
    AMOUNT = "amount"
    CURRENCY = "currency"
    TYPE = "type"
