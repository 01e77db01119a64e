"""
Error handler middleware for centralized exception handling.

Turns application exceptions into HTTP responses. Not-found and
missing-id outcomes carry an empty body; anything unexpected is logged
and answered with a generic 500.
"""

import logging
from typing import Callable
from aiohttp import web

from core.exceptions import (
    ExpenseNotFoundError,
    ExpenseIdRequiredError,
    ValidationError,
)

logger = logging.getLogger(__name__)


@web.middleware
async def error_middleware(request: web.Request, handler: Callable):
    """Map exceptions raised by handlers to responses."""
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except ExpenseNotFoundError as e:
        logger.info(e.message, extra={"expense_id": e.expense_id})
        return web.Response(status=404)
    except ExpenseIdRequiredError as e:
        logger.info(e.message)
        return web.Response(status=400)
    except ValidationError as e:
        logger.info(e.message)
        return web.json_response({"error": e.message}, status=400)
    except Exception as e:
        logger.error(
            f"Unhandled error: {e}",
            exc_info=True,
            extra={"method": request.method, "path": request.path}
        )
        return web.json_response({"error": "internal server error"}, status=500)
