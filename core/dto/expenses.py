"""Expense DTOs for request parsing and response rendering."""
import datetime as dt
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

# Bounds of the BIGINT primary key
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class ExpensePayload(BaseModel):
    """
    Expense body as sent by clients on create and update.

    Every field may be omitted; omitted fields parse as None. ``createdAt``
    and unknown keys are ignored.
    """
    
    model_config = ConfigDict(extra="ignore")
    
    id: Optional[int] = Field(
        None, ge=MIN_ID, le=MAX_ID, description="Expense ID (ignored on create)"
    )
    title: Optional[str] = Field(None, description="Expense title")
    amount: Optional[float] = Field(None, description="Amount spent")
    category: Optional[str] = Field(None, description="Free-form category")
    date: Optional[dt.date] = Field(None, description="Calendar date, YYYY-MM-DD")
    note: Optional[str] = Field(None, description="Free-form note")


class ExpenseResponse(BaseModel):
    """Expense as rendered in JSON responses."""
    
    model_config = ConfigDict(from_attributes=True)
    
    id: int
    title: Optional[str]
    amount: Optional[float]
    category: Optional[str]
    date: Optional[dt.date]
    note: Optional[str]
    created_at: dt.datetime = Field(..., serialization_alias="createdAt")
    
    @classmethod
    def render(cls, expense) -> dict:
        """Dump an ORM expense into a JSON-ready dict."""
        return cls.model_validate(expense).model_dump(mode="json", by_alias=True)
