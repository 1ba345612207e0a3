# ledger_view/logic/error_reporter.py

from ledger_view.core.models.errors import RejectedTransaction

REASON_SEPARATOR = "; "

class ErrorReporter:
    """
    Collects the raw transaction records rejected while building a collection.
    """
    def __init__(self):
        self._rejected_transactions: dict[str, RejectedTransaction] = {}

    def add_error(self, transaction_id: str, error_reason: str):
        """
        Adds an error for a specific transaction. If the transaction ID already has
        an error, the new reason is appended unless that exact reason is already recorded.
        """
        transaction_id = str(transaction_id)
        if transaction_id in self._rejected_transactions:
            rejected_txn = self._rejected_transactions[transaction_id]
            if error_reason not in rejected_txn.error_reason.split(REASON_SEPARATOR):
                rejected_txn.error_reason += f"{REASON_SEPARATOR}{error_reason}"
        else:
            self._rejected_transactions[transaction_id] = RejectedTransaction(
                transaction_id=transaction_id,
                error_reason=error_reason
            )

    def get_errors(self) -> list[RejectedTransaction]:
        """
        Returns all rejected records, in the order they were first reported.
        """
        return list(self._rejected_transactions.values())

    def has_errors(self) -> bool:
        return bool(self._rejected_transactions)

    def has_errors_for(self, transaction_id: str) -> bool:
        return str(transaction_id) in self._rejected_transactions

    def clear(self):
        """
        Clears all collected errors.
        """
        self._rejected_transactions = {}
