# ledger_view/main.py

import logging
from decimal import getcontext
from typing import Any, Optional

from ledger_view.core.config.settings import Settings, settings as default_settings
from ledger_view.core.models.table import SortState
from ledger_view.data.sample_transactions import SAMPLE_TRANSACTIONS
from ledger_view.logic.error_reporter import ErrorReporter
from ledger_view.logic.parser import TransactionParser
from ledger_view.logic.query_filter import QueryFilter
from ledger_view.logic.sort_engine import SortEngine
from ledger_view.logic.summary import SummaryCalculator
from ledger_view.services.transaction_table import TransactionTable

# Configure logging
logging.basicConfig(level=default_settings.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(default_settings.APP_NAME)

# Set global Decimal precision at application startup
getcontext().prec = default_settings.DECIMAL_PRECISION


def create_transaction_table(
    raw_transactions: Optional[list[dict[str, Any]]] = None,
    settings: Optional[Settings] = None,
    error_reporter: Optional[ErrorReporter] = None
) -> TransactionTable:
    """
    Builds a TransactionTable and its collaborators from raw transaction records.
    Falls back to the bundled sample data when no records are given.
    Rejected records stay available on the error reporter that was passed in.
    """
    settings = settings or default_settings
    error_reporter = error_reporter or ErrorReporter()
    if raw_transactions is None:
        raw_transactions = SAMPLE_TRANSACTIONS

    transactions = TransactionParser(error_reporter=error_reporter).parse_transactions(raw_transactions)
    if error_reporter.has_errors():
        logger.warning(f"{len(error_reporter.get_errors())} raw transactions were rejected.")

    table = TransactionTable(
        transactions=transactions,
        query_filter=QueryFilter(),
        sort_engine=SortEngine(),
        summary_calculator=SummaryCalculator(),
        sort_state=SortState(key=settings.DEFAULT_SORT_KEY, order=settings.DEFAULT_SORT_ORDER)
    )
    logger.info(f"Transaction table ready with {len(transactions)} transactions, sorted by {settings.DEFAULT_SORT_KEY.value} {settings.DEFAULT_SORT_ORDER.value}.")
    return table


if __name__ == "__main__":
    logger.info(f"Starting {default_settings.APP_NAME} v{default_settings.APP_VERSION} in {'DEBUG' if default_settings.DEBUG_MODE else 'PRODUCTION'} mode...")
    demo_table = create_transaction_table()
    logger.info(f"Summary: {demo_table.summary().model_dump()}")
    for cells in demo_table.cell_rows():
        logger.info(" | ".join(cells))
