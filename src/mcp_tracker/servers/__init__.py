"""MCP-facing layer: tool registry, dispatcher and resource provider."""

from .dispatcher import dispatch_tool
from .registry import TOOL_REGISTRY, list_tool_definitions
from .resources import list_resources, read_resource

__all__ = [
    "TOOL_REGISTRY",
    "dispatch_tool",
    "list_resources",
    "list_tool_definitions",
    "read_resource",
]
