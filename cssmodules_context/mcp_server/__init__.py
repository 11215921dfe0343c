"""
MCP Server package for cssmodules-context.

Exposes CSS module class name definition and completion lookups as Model
Context Protocol tools over stdio, for hosts that do not speak LSP.

Key Components:
- server.py: FastMCP-based stdio server, configured from MCP_PROJECT_PATH and MCP_DEBUG
- models.py: request/response and server configuration models
"""
