"""Tool call dispatch: validate, call, format.

Every outcome of a tool call is either exactly one text block or an
McpError whose code tells the failure classes apart:

- METHOD_NOT_FOUND: the tool name is not registered
- INVALID_REQUEST: a modifying tool was called in read-only mode
- INVALID_PARAMS: the arguments do not match the tool's input model
- INTERNAL_ERROR: anything raised while talking to Jira
"""

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    ErrorData,
    TextContent,
)
from pydantic import ValidationError

from ..jira import JiraFetcher
from ..logging_config import log_operation
from ..models.base import ApiModel
from .registry import get_tool_definition

logger = logging.getLogger("mcp-tracker.server")


def to_jsonable(value: Any) -> Any:
    """Convert models (and containers of models) to plain JSON data."""
    if isinstance(value, ApiModel):
        return value.to_simplified_dict()
    if isinstance(value, Mapping):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [to_jsonable(v) for v in value]
    return value


def format_json(value: Any) -> str:
    """Pretty-print a result the way every data tool and resource replies."""
    return json.dumps(to_jsonable(value), indent=2, ensure_ascii=False)


def format_validation_error(error: ValidationError) -> str:
    """Join every violation into one message."""
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        messages.append(f"{location}: {item['msg']}" if location else item["msg"])
    return f"Invalid parameters: {', '.join(messages)}"


async def dispatch_tool(
    jira: JiraFetcher,
    name: str,
    arguments: Mapping[str, Any] | None,
    read_only: bool = False,
) -> list[TextContent]:
    """
    Run one tool call against Jira.

    Args:
        jira: The Jira client
        name: Tool name
        arguments: Raw argument object sent by the client
        read_only: Reject tools that modify Jira

    Returns:
        A single text block: pretty JSON for data tools, a confirmation
        string for action tools

    Raises:
        McpError: On unknown tool, read-only rejection, invalid arguments
            or any failure during the call
    """
    definition = get_tool_definition(name)
    if definition is None:
        raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

    if read_only and definition.mutates:
        logger.warning(f"Attempted to call tool '{name}' in read-only mode.")
        raise McpError(
            ErrorData(
                code=INVALID_REQUEST,
                message=f"Cannot call {name} in read-only mode.",
            )
        )

    try:
        params = definition.input_model.model_validate(dict(arguments or {}))
    except ValidationError as e:
        raise McpError(
            ErrorData(code=INVALID_PARAMS, message=format_validation_error(e))
        ) from e

    try:
        with log_operation(logger, "call_tool", tool=name):
            result = await asyncio.to_thread(definition.handler, jira, params)
    except Exception as e:
        logger.debug(f"Full exception details for {name}:", exc_info=True)
        raise McpError(
            ErrorData(code=INTERNAL_ERROR, message=f"Error executing {name}: {e}")
        ) from e

    text = result if isinstance(result, str) else format_json(result)
    return [TextContent(type="text", text=text)]
