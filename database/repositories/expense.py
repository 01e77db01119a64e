"""Repository for Expense model operations."""
from database.models.expense import Expense
from database.repositories.base import BaseRepository


class ExpenseRepository(BaseRepository[Expense]):
    """Repository for managing expenses."""
    
    model_class = Expense
