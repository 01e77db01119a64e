"""Typed keys for values stored on the aiohttp application."""
from aiohttp import web
from sqlalchemy.ext.asyncio import async_sessionmaker

# Session factory used by request handlers
SESSION_MAKER = web.AppKey("session_maker", async_sessionmaker)

# Base path of the expense collection, without trailing slash
API_PREFIX = web.AppKey("api_prefix", str)
