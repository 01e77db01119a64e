"""
Handlers package initialization.

- expenses.py: REST endpoints for the expense collection (aiohttp)
"""

from web.handlers.expenses import setup_routes

__all__ = ['setup_routes']
