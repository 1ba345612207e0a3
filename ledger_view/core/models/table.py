# ledger_view/core/models/table.py

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from ledger_view.core.enums.sort_key import SortKey
from ledger_view.core.enums.sort_order import SortOrder


class ColumnDescriptor(BaseModel):
    """
    Static description of one table column. The width hints are layout-only;
    'key' ties the column to the sort and cell-rendering dispatch.
    """
    key: SortKey
    label: str
    width: str = ""
    min_width: str = ""
    is_last_column: bool = False

    model_config = ConfigDict(frozen=True)


class SortState(BaseModel):
    """
    The single active (key, order) pair of the transactions table.
    """
    key: SortKey = Field(default=SortKey.DATE, description="Field currently used to order rows")
    order: SortOrder = Field(default=SortOrder.DESC, description="Direction of the active sort")

    model_config = ConfigDict(frozen=True)

    def select(self, key: SortKey) -> "SortState":
        """
        Returns the state after the header for 'key' is clicked.
        A new column always starts descending; the active column flips direction.
        """
        key = SortKey(key)
        if key == self.key:
            return SortState(key=key, order=self.order.flipped())
        return SortState(key=key, order=SortOrder.DESC)


class QueryState(BaseModel):
    """Free-text search query as typed by the user."""
    query: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def normalized(self) -> str:
        return self.query.strip().lower()

    @property
    def is_searching(self) -> bool:
        return bool(self.normalized)


class HeaderState(BaseModel):
    """
    What a column header needs to render its active-sort indicator.
    'order' is None for inactive columns.
    """
    key: SortKey
    label: str
    is_active: bool
    order: Optional[SortOrder] = None

    model_config = ConfigDict(frozen=True)
