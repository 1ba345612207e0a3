# ledger_view/core/enums/transaction_kind.py

from enum import Enum

class TransactionKind(str, Enum):
    """
    Defines the supported kinds of ledger entries.
    Inheriting from 'str' keeps the values directly comparable with
    the raw strings coming from the data source.
    """
    CREDIT = "Credit"
    DEBIT = "Debit"
