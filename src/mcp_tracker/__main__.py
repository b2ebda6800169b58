"""Entry point for running the MCP Tracker server with ``python -m mcp_tracker``."""

from . import main

main()
