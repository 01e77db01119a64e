"""
Use Cases package for business logic encapsulation.

This package contains use case classes that encapsulate the expense
operations and orchestrate calls into the repositories.
"""

from services.use_cases.expenses import (
    ListExpensesUseCase,
    GetExpenseUseCase,
    CreateExpenseUseCase,
    UpdateExpenseUseCase,
    DeleteExpenseUseCase,
)

__all__ = [
    'ListExpensesUseCase',
    'GetExpenseUseCase',
    'CreateExpenseUseCase',
    'UpdateExpenseUseCase',
    'DeleteExpenseUseCase',
]
