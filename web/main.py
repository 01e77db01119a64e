"""API entrypoint: aiohttp application serving the expense collection."""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

import aiohttp_cors
from aiohttp import web
from sqlalchemy.ext.asyncio import async_sessionmaker

from web.config import settings
from web.handlers import setup_routes
from web.keys import SESSION_MAKER
from web.logging_config import setup_logging
from web.middlewares import logging_middleware, error_middleware

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome to Expense Tracker API! Server is running successfully"

routes = web.RouteTableDef()


@routes.get("/")
async def home(request: web.Request):
    """Root welcome page."""
    return web.Response(text=WELCOME_TEXT)


@routes.get("/health")
async def health_check(request: web.Request):
    """Health check endpoint."""
    return web.json_response({
        "status": "ok",
        "time": datetime.now(timezone.utc).isoformat()
    })


def setup_cors(app: web.Application, origins: Optional[list[str]] = None):
    """
    Allow browser clients from ``origins`` to call every registered route.
    
    Args:
        app: Application whose routes are already registered
        origins: Allowed origins, "*" for any; defaults to the configured ones
    """
    origins = origins if origins is not None else settings.allowed_origins
    options = aiohttp_cors.ResourceOptions(
        expose_headers=("Location",),
        allow_headers="*",
        allow_methods=["GET", "POST", "PUT", "DELETE"],
    )
    cors = aiohttp_cors.setup(app, defaults={origin: options for origin in origins})
    for route in list(app.router.routes()):
        cors.add(route)


def build_app(session_maker: Optional[async_sessionmaker] = None) -> web.Application:
    """
    Create the aiohttp application.
    
    Args:
        session_maker: Session factory for handlers; defaults to the one
            bound to the configured database
    """
    if session_maker is None:
        from database import async_session_maker
        session_maker = async_session_maker
    
    app = web.Application(middlewares=[
        logging_middleware,
        error_middleware,
    ])
    app[SESSION_MAKER] = session_maker
    app.add_routes(routes)
    setup_routes(app)
    setup_cors(app)
    return app


async def main():
    from database import init_db, close_db
    
    setup_logging()
    await init_db()
    
    app = build_app()
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, settings.host, settings.port)
    await site.start()
    logger.info(f"Expense Tracker API listening on {settings.host}:{settings.port}")
    
    try:
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()
        await close_db()

