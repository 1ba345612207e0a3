# ledger_view/logic/parser.py

import logging
from typing import Any
from pydantic import ValidationError, TypeAdapter

from ledger_view.core.models.transaction import Transaction
from ledger_view.logic.error_reporter import ErrorReporter

logger = logging.getLogger(__name__)

UNKNOWN_ID = "UNKNOWN_ID"

class TransactionParser:
    """
    Parses raw transaction dictionaries from the data source into validated Transaction objects.
    Records that fail validation, or reuse an id already seen, are reported to the shared
    ErrorReporter and left out of the result.

    Every rejected record gets its own entry on the reporter:
    - a record without an id is reported as 'UNKNOWN_ID#<position>',
    - a record reusing the id of a kept transaction is reported as '<id>#dup<position>',
    - an invalid record whose id was already reported is reported as '<id>#<position>'.
    """
    def __init__(self, error_reporter: ErrorReporter):
        self._single_transaction_adapter = TypeAdapter(Transaction)
        self._error_reporter = error_reporter

    def parse_transactions(
        self, raw_transactions_data: list[dict[str, Any]]
    ) -> list[Transaction]:
        """
        Parses a list of raw transaction dictionaries.
        Valid records are returned in their input order; the first record with a given id wins.
        """
        parsed_transactions: list[Transaction] = []
        seen_ids: set[int] = set()

        for index, raw_txn_data in enumerate(raw_transactions_data):
            raw_id = raw_txn_data.get("id") if isinstance(raw_txn_data, dict) else None

            try:
                validated_txn = self._single_transaction_adapter.validate_python(raw_txn_data)
            except ValidationError as e:
                error_messages = "; ".join(
                    [f"{err['loc'][0] if err['loc'] else 'record'}: {err['msg']}" for err in e.errors()]
                )
                self._reject(self._rejection_key(raw_id, index), f"Validation error: {error_messages}")
                continue
            except Exception as e:
                self._reject(self._rejection_key(raw_id, index), f"Unexpected parsing error: {type(e).__name__}: {str(e)}")
                continue

            if validated_txn.id in seen_ids:
                self._reject(
                    f"{validated_txn.id}#dup{index}",
                    f"Duplicate transaction id {validated_txn.id}; only the first occurrence is kept."
                )
                continue

            seen_ids.add(validated_txn.id)
            parsed_transactions.append(validated_txn)

        logger.info(f"TransactionParser: Parsed {len(parsed_transactions)} of {len(raw_transactions_data)} raw transactions.")
        return parsed_transactions

    def _rejection_key(self, raw_id: Any, index: int) -> str:
        if raw_id is None:
            return f"{UNKNOWN_ID}#{index}"
        if self._error_reporter.has_errors_for(str(raw_id)):
            return f"{raw_id}#{index}"
        return str(raw_id)

    def _reject(self, transaction_id: str, error_reason: str):
        logger.warning(f"TransactionParser: Rejected transaction {transaction_id}: {error_reason}")
        self._error_reporter.add_error(transaction_id, error_reason)
