# ledger_view/core/constants/table.py

from ledger_view.core.enums.sort_key import SortKey
from ledger_view.core.models.table import ColumnDescriptor

# Transactions store their date as DD-MM-YYYY text
STORED_DATE_FORMAT = "%d-%m-%Y"

# Fixed English abbreviations so date projections don't depend on the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

TABLE_COLUMNS: list[ColumnDescriptor] = [
    ColumnDescriptor(key=SortKey.DATE, label="Date", width="w-[700px]", min_width="min-w-[200px]"),
    ColumnDescriptor(key=SortKey.REMARK, label="Remark", width="w-[200px]", min_width="min-w-[200px]"),
    ColumnDescriptor(key=SortKey.AMOUNT, label="Amount", width="w-[100px]", min_width="min-w-[100px]"),
    ColumnDescriptor(key=SortKey.CURRENCY, label="Currency", width="w-[90px]", min_width="min-w-[90px]"),
    ColumnDescriptor(
        key=SortKey.TYPE, label="Type", width="w-[80px]", min_width="min-w-[90px]", is_last_column=True
    ),
]
