"""
REST API endpoints for the expense collection.

Several paths map to the same operation so older clients keep working:
list is served at ``''``, ``/`` and ``/all``; create at ``''``, ``/`` and
``/add``; update at ``/update`` and ``/{id}``; delete at ``/delete/{id}``
and ``/{id}``.
"""

import logging
from typing import Optional
from aiohttp import web
from pydantic import ValidationError as PydanticValidationError

from core.dto.expenses import ExpensePayload, ExpenseResponse, MAX_ID
from core.exceptions import ExpenseNotFoundError, ValidationError
from services.use_cases import (
    ListExpensesUseCase,
    GetExpenseUseCase,
    CreateExpenseUseCase,
    UpdateExpenseUseCase,
    DeleteExpenseUseCase,
)
from web.config import settings
from web.keys import API_PREFIX, SESSION_MAKER

logger = logging.getLogger(__name__)

ID_PATTERN = r"{id:\d+}"


def setup_routes(app: web.Application, prefix: Optional[str] = None):
    """Setup all expense routes under ``prefix``."""
    prefix = (prefix if prefix is not None else settings.api_prefix).rstrip("/")
    app[API_PREFIX] = prefix
    
    # Collection root: list and create
    for path in (prefix, f"{prefix}/"):
        app.router.add_get(path, list_all)
        app.router.add_post(path, add)
    
    app.router.add_get(f"{prefix}/all", get_all)
    app.router.add_post(f"{prefix}/add", add)
    app.router.add_get(f"{prefix}/get/{ID_PATTERN}", get_by_id)
    app.router.add_put(f"{prefix}/update", update)
    app.router.add_delete(f"{prefix}/delete/{ID_PATTERN}", delete)
    
    # Item: update and delete
    app.router.add_put(f"{prefix}/{ID_PATTERN}", update)
    app.router.add_delete(f"{prefix}/{ID_PATTERN}", delete)


# ========== Helpers ==========

def _path_id(request: web.Request) -> Optional[int]:
    raw = request.match_info.get("id")
    if raw is None:
        return None
    expense_id = int(raw)
    # Nothing can be stored past the BIGINT range
    if expense_id > MAX_ID:
        raise ExpenseNotFoundError(expense_id)
    return expense_id


async def _read_payload(request: web.Request) -> ExpensePayload:
    """Parse the JSON body into an ExpensePayload."""
    try:
        data = await request.json()
    except ValueError:
        raise ValidationError("body", "invalid json")
    
    if not isinstance(data, dict):
        raise ValidationError("body", "expected a JSON object")
    
    try:
        return ExpensePayload.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "body"
        raise ValidationError(field, first["msg"])


def _session(request: web.Request):
    return request.app[SESSION_MAKER]()


# ========== List ==========

async def list_all(request: web.Request):
    """GET /api/expenses and /api/expenses/"""
    logger.info(f"Received GET on {request.app[API_PREFIX]} (listAll)")
    return await _list(request)


async def get_all(request: web.Request):
    """GET /api/expenses/all"""
    logger.info(f"Received GET on {request.app[API_PREFIX]}/all")
    return await _list(request)


async def _list(request: web.Request):
    async with _session(request) as session:
        expenses = await ListExpensesUseCase(session).execute()
        return web.json_response([ExpenseResponse.render(e) for e in expenses])


# ========== Get ==========

async def get_by_id(request: web.Request):
    """GET /api/expenses/get/{id}"""
    expense_id = _path_id(request)
    logger.info(
        f"Received GET on {request.app[API_PREFIX]}/get/{expense_id}",
        extra={"expense_id": expense_id}
    )
    
    async with _session(request) as session:
        expense = await GetExpenseUseCase(session).execute(expense_id)
        return web.json_response(ExpenseResponse.render(expense))


# ========== Create ==========

async def add(request: web.Request):
    """POST /api/expenses, /api/expenses/ and /api/expenses/add"""
    logger.info(f"Received POST on {request.app[API_PREFIX]} (add)")
    payload = await _read_payload(request)
    
    async with _session(request) as session:
        saved = await CreateExpenseUseCase(session).execute(payload)
        await session.commit()
        body = ExpenseResponse.render(saved)
    
    return web.json_response(
        body,
        status=201,
        headers={"Location": f"{request.app[API_PREFIX]}/{body['id']}"},
    )


# ========== Update ==========

async def update(request: web.Request):
    """PUT /api/expenses/update and /api/expenses/{id}"""
    path_id = _path_id(request)
    payload = await _read_payload(request)
    target_id = path_id if path_id is not None else payload.id
    logger.info(
        f"Received PUT on {request.app[API_PREFIX]} (target_id={target_id})",
        extra={"expense_id": target_id}
    )
    
    async with _session(request) as session:
        saved = await UpdateExpenseUseCase(session).execute(path_id, payload)
        await session.commit()
        return web.json_response(ExpenseResponse.render(saved))


# ========== Delete ==========

async def delete(request: web.Request):
    """DELETE /api/expenses/delete/{id} and /api/expenses/{id}"""
    expense_id = _path_id(request)
    logger.info(
        f"Received DELETE on {request.app[API_PREFIX]} (id={expense_id})",
        extra={"expense_id": expense_id}
    )
    
    async with _session(request) as session:
        await DeleteExpenseUseCase(session).execute(expense_id)
        await session.commit()
    
    return web.Response(status=204)
