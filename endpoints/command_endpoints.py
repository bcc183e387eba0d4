from __future__ import annotations

import logging
from typing import Any, Literal

from mcp.server.fastmcp import FastMCP
from typing_extensions import TypedDict

import commands
from commands import CommandError
from persistence import Record
from settings import get_settings

SETTINGS = get_settings()
DEBUG_LOG_COMMANDS = SETTINGS.debug_log_commands

logger = logging.getLogger(__name__)


class ToolTextContent(TypedDict):
    type: Literal["text"]
    text: str


class CommandToolResponse(TypedDict, total=False):
    content: list[ToolTextContent]
    structuredContent: dict[str, Any]
    isError: bool


def _reply(message: str | None = None, **structured: Any) -> CommandToolResponse:
    return {
        "content": ([{"type": "text", "text": message}] if message else []),
        "structuredContent": structured,
    }


def _error(command: str, err: CommandError) -> CommandToolResponse:
    logger.info("COMMAND %s failed: %s", command, err)
    reply = _reply(str(err))
    reply["isError"] = True
    return reply


mcp = FastMCP(
    SETTINGS.app_title,
    stateless_http=True,
    json_response=True,
)


@mcp.tool()
async def greet(name: str) -> CommandToolResponse:
    """
    Returns a greeting for `name`.
    """
    if DEBUG_LOG_COMMANDS:
        logger.debug("COMMAND greet name=%r", name)
    greeting = commands.greet(name)
    return _reply(greeting, greeting=greeting)


@mcp.tool()
async def save_json_file(path: str, data: Record) -> CommandToolResponse:
    """
    Writes `data` ({name, value}) as pretty-printed JSON to `path`, replacing any existing file.
    """
    if DEBUG_LOG_COMMANDS:
        logger.debug("COMMAND save_json_file path=%s", path)
    try:
        await commands.save_json_file_async(path, data)
    except CommandError as e:
        return _error("save_json_file", e)
    return _reply(f"Saved record to {path}.", path=path)


@mcp.tool()
async def load_json_file(path: str) -> CommandToolResponse:
    """
    Reads the {name, value} record stored at `path`.
    """
    if DEBUG_LOG_COMMANDS:
        logger.debug("COMMAND load_json_file path=%s", path)
    try:
        record = await commands.load_json_file_async(path)
    except CommandError as e:
        return _error("load_json_file", e)
    return _reply(f"Loaded record {record.name!r} from {path}.", record=record.model_dump(mode="json"))
