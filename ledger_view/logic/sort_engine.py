# ledger_view/logic/sort_engine.py

import logging
from typing import List

from ledger_view.core.enums.sort_key import SortKey
from ledger_view.core.enums.sort_order import SortOrder
from ledger_view.core.models.transaction import Transaction
from ledger_view.logic.projections import SORT_ACCESSORS

logger = logging.getLogger(__name__)

class SortEngine:
    """
    Orders transactions by a single column for display.
    """

    def sort_transactions(
        self,
        transactions: List[Transaction],
        key: SortKey,
        order: SortOrder
    ) -> List[Transaction]:
        """
        Returns a new list of the transactions ordered by 'key' in 'order'.

        Sorting Rules:
        1. Values are compared by their natural ordering: calendar order for date,
           numeric for amount, lexicographic for remark, currency and type.
        2. Transactions with equal values keep their input order, in both directions.

        Args:
            transactions: The transactions to order. The list is not modified.
            key: Column to order by. An unknown key is a programming error and raises.
            order: 'asc' or 'desc'.

        Returns:
            A new, sorted list of Transaction objects.
        """
        key = SortKey(key)
        order = SortOrder(order)
        accessor = SORT_ACCESSORS[key]

        # sorted() is stable, and reverse=True keeps ties in their original order
        sorted_transactions = sorted(transactions, key=accessor, reverse=order is SortOrder.DESC)
        logger.debug(f"SortEngine: Sorted {len(sorted_transactions)} transactions by {key.value} {order.value}.")
        return sorted_transactions
