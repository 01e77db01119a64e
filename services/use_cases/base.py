"""
Base use case class with common functionality.
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

from sqlalchemy.ext.asyncio import AsyncSession

from database.repositories import ExpenseRepository


ResultType = TypeVar("ResultType")


class BaseUseCase(ABC, Generic[ResultType]):
    """
    Abstract base class for use cases.
    
    A use case is one request-level operation over the expense store. It
    holds no state between calls; the session it is given is the only
    thing it touches.
    """
    
    def __init__(self, session: AsyncSession):
        """
        Initialize use case with database session.
        
        Args:
            session: Async SQLAlchemy session for database operations
        """
        self.session = session
        self.expenses = ExpenseRepository(session)
    
    @abstractmethod
    async def execute(self, *args, **kwargs) -> ResultType:
        """
        Execute the use case.
        
        Subclasses must implement this method with their specific logic.
        
        Returns:
            Result of the use case execution
        """
        pass
