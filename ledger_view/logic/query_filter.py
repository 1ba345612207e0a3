# ledger_view/logic/query_filter.py

import logging
from typing import List

from ledger_view.core.models.transaction import Transaction
from ledger_view.logic.projections import searchable_projections

logger = logging.getLogger(__name__)

class QueryFilter:
    """
    Narrows a transaction collection down to the entries matching a free-text query.
    """

    def filter_transactions(
        self,
        transactions: List[Transaction],
        query: str
    ) -> List[Transaction]:
        """
        Returns the transactions for which any searchable projection contains
        the query as a substring.

        Matching Rules:
        1. The query is trimmed and lower-cased once before matching.
        2. An empty (or whitespace-only) query returns the input list itself,
           not a copy, so callers can tell that nothing was filtered.
        3. Matching is plain substring containment: no prefix matching, no tokenizing.

        Args:
            transactions: The full transaction collection.
            query: The raw query as typed by the user.

        Returns:
            The matching transactions, in their input order.
        """
        normalized_query = query.strip().lower()
        if not normalized_query:
            return transactions

        matches = [
            txn for txn in transactions
            if any(normalized_query in projection for projection in searchable_projections(txn))
        ]
        logger.debug(f"QueryFilter: '{normalized_query}' matched {len(matches)} of {len(transactions)} transactions.")
        return matches
