# ledger_view/core/models/errors.py

from pydantic import BaseModel, Field

class RejectedTransaction(BaseModel):
    """
    Represents a raw transaction record that was left out of the collection,
    along with the reason it was rejected.
    """
    transaction_id: str = Field(..., description="The ID of the rejected record (or a placeholder if it had none).")
    error_reason: str = Field(..., description="Why the record was rejected.")
