"""
MCP Server implementation for cssmodules-context.

FastMCP-based stdio server exposing CSS module class name definition and
completion lookups as tools, for hosts that speak MCP instead of LSP.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from fastmcp import FastMCP

from config.loader import ConfigurationLoader
from core.activation import SUPPORTED_LANGUAGES, TRIGGER_CHARACTERS
from core.models.config import CSSModulesConfig
from core.parser.selectors import find_all_selectors
from core.providers import CSSModulesCompletionProvider, CSSModulesDefinitionProvider, DocumentLineHost
from core.providers.base import load_text_document

from cssmodules_context import __version__
from cssmodules_context.mcp_server.models import (
    CompletionResponse,
    CursorRequest,
    DefinitionResponse,
    MCPServerConfig,
    MCPServerStatus,
    SelectorsResponse,
)

# Set up logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

# Global server instance
server_instance: Optional['MCPCSSModulesServer'] = None


class MCPCSSModulesServer:
    """
    CSS modules MCP Server.

    Answers definition and completion requests for a cursor position in a
    source file on disk, using the project's CSS modules options.
    """

    def __init__(
        self,
        config: Optional[MCPServerConfig] = None,
        modules_config: Optional[CSSModulesConfig] = None
    ) -> None:
        """Initialize MCP server with configuration"""
        self.config = config or self._load_config_from_env()
        self.status = MCPServerStatus.INITIALIZING
        self.requests_handled = 0

        if self.config.debug_mode:
            logging.getLogger().setLevel(logging.DEBUG)

        self.modules_config = modules_config or ConfigurationLoader().load_project_config(
            self.config.project_path
        )
        mode = self.modules_config.transform_mode
        self.definition_provider = CSSModulesDefinitionProvider(mode)
        self.completion_provider = CSSModulesCompletionProvider(mode)

        # Initialize FastMCP server
        self.mcp = FastMCP("cssmodules-context")
        self._register_tools()

        logger.info(f"MCP Server initialized for project: {self.config.project_path}")
        logger.info(f"camelCase: {self.modules_config.camel_case}")

    def _load_config_from_env(self) -> MCPServerConfig:
        """Load configuration from environment variables"""
        return MCPServerConfig(
            project_path=Path(os.getenv("MCP_PROJECT_PATH", ".")),
            debug_mode=os.getenv("MCP_DEBUG", "false").lower() == "true",
        )

    def _next_request_id(self, prefix: str) -> str:
        self.requests_handled += 1
        return f"{prefix}_{self.requests_handled}"

    async def find_class_definition(self, document_path: str, line: int, character: int) -> Dict[str, Any]:
        """Definition lookup shared by the tool and tests"""
        request_id = self._next_request_id("definition")
        try:
            request = CursorRequest(
                request_id=request_id,
                document_path=document_path,
                line=line,
                character=character
            )
            document = load_text_document(self.config.resolve_document(request.document_path))
            location = await self.definition_provider.provide_definition(
                document,
                request.position,
                DocumentLineHost(document, request.line)
            )
            response = DefinitionResponse(request_id=request_id, success=True, location=location)

        except ValueError as e:
            logger.error(f"Definition validation error: {e}")
            response = DefinitionResponse(
                request_id=request_id,
                success=False,
                error_message=f"Invalid request: {str(e)}"
            )
        except OSError as e:
            logger.error(f"Definition error: {e}")
            response = DefinitionResponse(request_id=request_id, success=False, error_message=str(e))

        return response.model_dump(mode='json', exclude_none=True)

    async def complete_class_names(self, document_path: str, line: int, character: int) -> Dict[str, Any]:
        """Completion lookup shared by the tool and tests"""
        request_id = self._next_request_id("completion")
        try:
            request = CursorRequest(
                request_id=request_id,
                document_path=document_path,
                line=line,
                character=character
            )
            document = load_text_document(self.config.resolve_document(request.document_path))
            candidates = await self.completion_provider.provide_completion_items(
                document,
                request.position,
                DocumentLineHost(document, request.line)
            )
            labels = [candidate.label for candidate in candidates]
            response = CompletionResponse(
                request_id=request_id,
                success=True,
                candidates=labels,
                total_found=len(labels),
                hint_message=self.modules_config.hint_message
            )

        except ValueError as e:
            logger.error(f"Completion validation error: {e}")
            response = CompletionResponse(
                request_id=request_id,
                success=False,
                error_message=f"Invalid request: {str(e)}"
            )
        except OSError as e:
            logger.error(f"Completion error: {e}")
            response = CompletionResponse(request_id=request_id, success=False, error_message=str(e))

        return response.model_dump(mode='json', exclude_none=True)

    async def list_class_selectors(self, stylesheet_path: str) -> Dict[str, Any]:
        """Selector listing shared by the tool and tests"""
        request_id = self._next_request_id("selectors")
        path = self.config.resolve_document(stylesheet_path)
        try:
            text = path.read_text(encoding='utf-8')
            selectors = find_all_selectors(text, self.modules_config.transform_mode)
            response = SelectorsResponse(request_id=request_id, success=True, selectors=selectors)

        except (OSError, ValueError) as e:
            logger.error(f"Failed to read stylesheet {path}: {e}")
            response = SelectorsResponse(request_id=request_id, success=False, error_message=str(e))

        return response.model_dump(mode='json', exclude_none=True)

    def _register_tools(self) -> None:
        """Register MCP tools with FastMCP"""

        @self.mcp.tool()
        async def find_class_definition(document_path: str, line: int, character: int) -> Dict[str, Any]:
            """
            Find where a CSS module class name is declared.

            Args:
                document_path: JavaScript/TypeScript file, absolute or relative to the project
                line: Zero-based line of the cursor
                character: Zero-based character offset of the cursor

            Returns:
                Location of the selector (or of the stylesheet when the cursor is on an import)
            """
            return await self.find_class_definition(document_path, line, character)

        @self.mcp.tool()
        async def complete_class_names(document_path: str, line: int, character: int) -> Dict[str, Any]:
            """
            List class names available after `styles.` at the cursor.

            Args:
                document_path: JavaScript/TypeScript file, absolute or relative to the project
                line: Zero-based line of the cursor
                character: Zero-based character offset of the cursor

            Returns:
                Candidate class names in stylesheet order
            """
            return await self.complete_class_names(document_path, line, character)

        @self.mcp.tool()
        async def list_class_selectors(stylesheet_path: str) -> Dict[str, Any]:
            """
            List every class selector declared in a stylesheet.

            Args:
                stylesheet_path: CSS/SCSS/LESS file, absolute or relative to the project
            """
            return await self.list_class_selectors(stylesheet_path)

        # Register a resource for server info
        @self.mcp.resource("cssmodules://server/info")
        async def get_server_info() -> Dict[str, Any]:
            """Static information about the server and its configuration."""
            return self.server_info()

    def server_info(self) -> Dict[str, Any]:
        return {
            "name": "cssmodules-context",
            "version": __version__,
            "status": self.status.value,
            "languages": list(SUPPORTED_LANGUAGES),
            "trigger_characters": list(TRIGGER_CHARACTERS),
            "configuration": {
                "project_path": str(self.config.project_path),
                **self.modules_config.to_dict()
            }
        }

    async def start(self) -> None:
        """Start the MCP server"""
        try:
            self.status = MCPServerStatus.READY
            logger.info("MCP server ready")
            await self.mcp.run_async(transport="stdio")

        except Exception as e:
            self.status = MCPServerStatus.ERROR
            logger.error(f"Server startup failed: {e}")
            raise

    async def shutdown(self) -> None:
        self.status = MCPServerStatus.SHUTDOWN
        logger.info("MCP server shutdown complete")


async def main() -> None:
    """
    Main entry point for the MCP server.

    Creates and starts the MCP server with stdio transport.
    """
    global server_instance

    try:
        server_instance = MCPCSSModulesServer()
        await server_instance.start()

    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
        if server_instance:
            await server_instance.shutdown()
    except Exception as e:
        logger.error(f"Server error: {e}")
        if server_instance:
            await server_instance.shutdown()
        raise
