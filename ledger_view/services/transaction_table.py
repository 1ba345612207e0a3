# ledger_view/services/transaction_table.py

import logging
from typing import List, Optional

from ledger_view.core.constants.table import TABLE_COLUMNS
from ledger_view.core.enums.sort_key import SortKey
from ledger_view.core.models.summary import TransactionSummary
from ledger_view.core.models.table import ColumnDescriptor, HeaderState, QueryState, SortState
from ledger_view.core.models.transaction import Transaction
from ledger_view.logic.formatting import get_cell_value
from ledger_view.logic.query_filter import QueryFilter
from ledger_view.logic.sort_engine import SortEngine
from ledger_view.logic.summary import SummaryCalculator

logger = logging.getLogger(__name__)

NO_TRANSACTIONS_MESSAGE = "No transactions available"


class TransactionTable:
    """
    Holds the query and sort state of one transactions view and derives the rows to display.
    The displayed rows are always sort(filter(all, query), key, order).

    Each stage is memoised on the identity of its input list plus its own parameters,
    so re-reading the rows with unchanged state returns the same list object.
    """
    def __init__(
        self,
        transactions: List[Transaction],
        query_filter: QueryFilter,
        sort_engine: SortEngine,
        summary_calculator: SummaryCalculator,
        query_state: Optional[QueryState] = None,
        sort_state: Optional[SortState] = None,
        columns: Optional[List[ColumnDescriptor]] = None
    ):
        self._transactions = transactions
        self._query_filter = query_filter
        self._sort_engine = sort_engine
        self._summary_calculator = summary_calculator
        self._query_state = query_state or QueryState()
        self._sort_state = sort_state or SortState()
        self._columns = columns if columns is not None else TABLE_COLUMNS

        # (input list, parameters, result) of the last computation of each stage
        self._filter_cache: Optional[tuple] = None
        self._sort_cache: Optional[tuple] = None

    @property
    def transactions(self) -> List[Transaction]:
        return self._transactions

    @property
    def query_state(self) -> QueryState:
        return self._query_state

    @property
    def sort_state(self) -> SortState:
        return self._sort_state

    @property
    def columns(self) -> List[ColumnDescriptor]:
        return self._columns

    # --- State transitions

    def set_query(self, query: str):
        self._query_state = QueryState(query=query)
        logger.debug(f"TransactionTable: Query set to '{query}'.")

    def clear_search(self):
        self.set_query("")

    def select_column(self, key: SortKey) -> SortState:
        """
        Applies a header click: a new column sorts descending, the active column flips direction.
        """
        self._sort_state = self._sort_state.select(key)
        logger.debug(f"TransactionTable: Sort state is now {self._sort_state.key.value} {self._sort_state.order.value}.")
        return self._sort_state

    # --- Derived data

    @property
    def filtered(self) -> List[Transaction]:
        query = self._query_state.normalized
        cache = self._filter_cache
        if cache is not None and cache[0] is self._transactions and cache[1] == query:
            return cache[2]

        result = self._query_filter.filter_transactions(self._transactions, query)
        self._filter_cache = (self._transactions, query, result)
        return result

    @property
    def rows(self) -> List[Transaction]:
        filtered = self.filtered
        params = (self._sort_state.key, self._sort_state.order)
        cache = self._sort_cache
        if cache is not None and cache[0] is filtered and cache[1] == params:
            return cache[2]

        result = self._sort_engine.sort_transactions(filtered, *params)
        self._sort_cache = (filtered, params, result)
        return result

    @property
    def is_searching(self) -> bool:
        return self._query_state.is_searching

    @property
    def match_count(self) -> Optional[int]:
        """Number of matching transactions while a query is active, otherwise None."""
        if not self.is_searching:
            return None
        return len(self.filtered)

    @property
    def match_summary(self) -> Optional[str]:
        if not self.is_searching:
            return None
        count = len(self.filtered)
        plural = "" if count == 1 else "s"
        return f"Found {count} transaction{plural} matching “{self._query_state.query}”"

    @property
    def is_empty(self) -> bool:
        return len(self.rows) == 0

    @property
    def empty_state_message(self) -> Optional[str]:
        """
        Message to show instead of the table, or None when there are rows.
        'No results for this query' is kept apart from 'no transactions at all'.
        """
        if not self.is_empty:
            return None
        if self.is_searching:
            return f"No transactions found matching \"{self._query_state.query}\""
        return NO_TRANSACTIONS_MESSAGE

    def header_states(self) -> List[HeaderState]:
        states = []
        for column in self._columns:
            is_active = column.key == self._sort_state.key
            states.append(HeaderState(
                key=column.key,
                label=column.label,
                is_active=is_active,
                order=self._sort_state.order if is_active else None
            ))
        return states

    def cell_rows(self) -> List[List[str]]:
        """The displayed rows rendered to cell text, one entry per column."""
        return [
            [get_cell_value(txn, column.key) for column in self._columns]
            for txn in self.rows
        ]

    def summary(self) -> TransactionSummary:
        return self._summary_calculator.summarize(self._transactions)
