"""
MCP Server entry point for cssmodules-context.

Usage:
    python -m cssmodules_context.mcp_server

Environment Variables:
    MCP_PROJECT_PATH: Project root directory (default: current directory)
    MCP_DEBUG: Enable debug logging (default: false)
    CSSMODULES_CAMEL_CASE: Override the camelCase option (true, false, dashes)
    CSSMODULES_HINT_MESSAGE: Override the completion hint message
"""

import asyncio
import sys

from cssmodules_context.mcp_server.server import main


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nMCP server shutting down...", file=sys.stderr)
        sys.exit(0)
    except Exception as e:
        print(f"MCP server error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
