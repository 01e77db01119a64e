"""Database models package."""
from database.models.expense import Expense

__all__ = [
    "Expense",
]
