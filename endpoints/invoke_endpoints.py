from __future__ import annotations

import inspect
import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from commands import ASYNC_COMMANDS, COMMANDS, CommandError
from settings import get_settings

router = APIRouter(tags=["commands"])
logger = logging.getLogger(__name__)

SETTINGS = get_settings()
DEBUG_LOG_COMMANDS = SETTINGS.debug_log_commands


def _to_json(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value


@router.post("/invoke/{command}")
async def invoke(command: str, args: dict[str, Any] = Body(default={})):
    """
    Dispatch a registered command by name with keyword arguments taken from the JSON body.
    """
    handler = ASYNC_COMMANDS.get(command) or COMMANDS.get(command)
    if handler is None:
        raise HTTPException(404, f"Unknown command: {command}")

    try:
        inspect.signature(handler).bind(**args)
    except TypeError as e:
        raise HTTPException(422, f"Invalid arguments for {command}: {e}")

    if DEBUG_LOG_COMMANDS:
        logger.debug("INVOKE %s args=%s", command, sorted(args))

    try:
        result = handler(**args)
        if inspect.isawaitable(result):
            result = await result
    except CommandError as e:
        logger.info("INVOKE %s failed: %s", command, e)
        return JSONResponse({"ok": False, "error": str(e)}, status_code=400)

    return {"ok": True, "result": _to_json(result)}
