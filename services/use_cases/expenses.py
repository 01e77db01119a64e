"""
Expense use cases: list, get, create, update and delete.
"""
from typing import List, Optional

from services.use_cases.base import BaseUseCase
from database.models import Expense
from core.exceptions import (
    ExpenseNotFoundError,
    ExpenseIdRequiredError,
    ValidationError,
)
from core.dto.expenses import ExpensePayload


def _require_title(payload: ExpensePayload) -> None:
    if payload.title is None:
        raise ValidationError("title", "is required")


class ListExpensesUseCase(BaseUseCase[List[Expense]]):
    """
    Return every stored expense, unfiltered.
    """
    
    async def execute(self) -> List[Expense]:
        return await self.expenses.find_all()


class GetExpenseUseCase(BaseUseCase[Expense]):
    """
    Look up a single expense.
    """
    
    async def execute(self, expense_id: int) -> Expense:
        """
        Args:
            expense_id: ID of the expense
            
        Returns:
            The stored Expense
            
        Raises:
            ExpenseNotFoundError: If no expense has this ID
        """
        expense = await self.expenses.find_by_id(expense_id)
        if expense is None:
            raise ExpenseNotFoundError(expense_id)
        return expense


class CreateExpenseUseCase(BaseUseCase[Expense]):
    """
    Create a new expense. The store always assigns the ID.
    """
    
    async def execute(self, payload: ExpensePayload) -> Expense:
        """
        Persist a new expense built from the payload.
        
        Any ID the client sent is discarded, so a create can never
        overwrite an existing row.
        
        Args:
            payload: Parsed request body
            
        Returns:
            Saved Expense with its new ID
            
        Raises:
            ValidationError: If title is missing
        """
        _require_title(payload)
        
        expense = Expense(
            title=payload.title,
            amount=payload.amount,
            category=payload.category,
            date=payload.date,
            note=payload.note,
        )
        expense.id = None
        
        return await self.expenses.save(expense)


class UpdateExpenseUseCase(BaseUseCase[Expense]):
    """
    Overwrite the editable fields of an existing expense.
    
    Every editable field is replaced, including with None when the
    payload omits it. ``id`` and ``created_at`` are never touched.
    """
    
    async def execute(
        self,
        expense_id: Optional[int],
        payload: ExpensePayload,
    ) -> Expense:
        """
        Args:
            expense_id: ID from the request path, if the route carries one
            payload: Parsed request body; its ``id`` is used when the
                path has none
            
        Returns:
            Updated Expense
            
        Raises:
            ExpenseIdRequiredError: If neither path nor payload has an ID
            ExpenseNotFoundError: If the target expense does not exist
            ValidationError: If title is missing
        """
        target_id = expense_id if expense_id is not None else payload.id
        if target_id is None:
            raise ExpenseIdRequiredError()
        
        existing = await self.expenses.find_by_id(target_id)
        if existing is None:
            raise ExpenseNotFoundError(target_id)
        
        _require_title(payload)
        
        existing.title = payload.title
        existing.amount = payload.amount
        existing.category = payload.category
        existing.date = payload.date
        existing.note = payload.note
        
        return await self.expenses.save(existing)


class DeleteExpenseUseCase(BaseUseCase[None]):
    """
    Delete an expense that is known to exist.
    """
    
    async def execute(self, expense_id: int) -> None:
        """
        Raises:
            ExpenseNotFoundError: If no expense has this ID
        """
        if not await self.expenses.exists_by_id(expense_id):
            raise ExpenseNotFoundError(expense_id)
        await self.expenses.delete_by_id(expense_id)
