# ledger_view/core/enums/sort_order.py

from enum import Enum

class SortOrder(str, Enum):
    """
    Direction of the active sort column.
    """
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortOrder":
        return SortOrder.ASC if self is SortOrder.DESC else SortOrder.DESC
