"""
Logging middleware for request/response tracking.

Logs all incoming requests with timing information.
"""

import logging
import time
from typing import Callable
from aiohttp import web

logger = logging.getLogger(__name__)


@web.middleware
async def logging_middleware(request: web.Request, handler: Callable):
    """Log every request with its status and execution time."""
    start_time = time.time()
    extra = {"method": request.method, "path": request.path}
    
    try:
        response = await handler(request)
    except web.HTTPException as e:
        duration = time.time() - start_time
        logger.info(
            f"{request.method} {request.path} -> {e.status} in {duration:.3f}s",
            extra={**extra, "status": e.status, "duration": duration}
        )
        raise
    except Exception as e:
        duration = time.time() - start_time
        logger.error(
            f"{request.method} {request.path} failed after {duration:.3f}s: {e}",
            exc_info=True,
            extra={**extra, "duration": duration}
        )
        raise
    
    duration = time.time() - start_time
    logger.info(
        f"{request.method} {request.path} -> {response.status} in {duration:.3f}s",
        extra={**extra, "status": response.status, "duration": duration}
    )
    return response
