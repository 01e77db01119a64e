"""
Middlewares package initialization.

This package contains the aiohttp middlewares, outermost first:
- logging.py: Request/response logging
- error_handler.py: Centralized error handling
"""

from web.middlewares.logging import logging_middleware
from web.middlewares.error_handler import error_middleware

__all__ = [
    'logging_middleware',
    'error_middleware',
]
