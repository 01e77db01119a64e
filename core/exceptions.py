"""
Custom application exceptions.

These exceptions represent request outcomes that the HTTP layer turns
into error responses.
"""
from typing import Optional


class ExpenseTrackerError(Exception):
    """Base exception for all application errors."""

    message: str = "An error occurred"

    def __init__(self, message: Optional[str] = None, **kwargs):
        self.message = message or self.message
        self.details = kwargs
        super().__init__(self.message)


# ============== Expenses ==============

class ExpenseError(ExpenseTrackerError):
    """Base expense error."""
    message = "Expense error"


class ExpenseNotFoundError(ExpenseError):
    """Expense not found."""
    message = "Expense not found"

    def __init__(self, expense_id: Optional[int] = None):
        self.expense_id = expense_id
        super().__init__(f"Expense #{expense_id} not found" if expense_id is not None else self.message)


class ExpenseIdRequiredError(ExpenseError):
    """Update request names no target expense."""
    message = "Expense id is required"


# ============== Validation ==============

class ValidationError(ExpenseTrackerError):
    """Request payload could not be parsed."""
    message = "Validation error"

    def __init__(self, field: str, error: str):
        self.field = field
        self.error = error
        super().__init__(f"Invalid field '{field}': {error}")
