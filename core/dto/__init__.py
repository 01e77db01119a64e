"""
Data Transfer Objects (DTOs) for data validation.

This package contains Pydantic models for parsing request bodies and
rendering responses.
"""

from core.dto.expenses import (
    ExpensePayload,
    ExpenseResponse,
)

__all__ = [
    'ExpensePayload',
    'ExpenseResponse',
]
