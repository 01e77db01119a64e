"""Database repositories package."""
from database.repositories.base import BaseRepository
from database.repositories.expense import ExpenseRepository

__all__ = [
    "BaseRepository",
    "ExpenseRepository",
]
