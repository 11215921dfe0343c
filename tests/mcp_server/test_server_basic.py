"""
Unit tests for basic MCP server functionality.

Tests the FastMCP server tools, models, and configuration.
"""

import pytest
from pathlib import Path
from pydantic import ValidationError

from core.models.config import CSSModulesConfig
from cssmodules_context import __version__
from cssmodules_context.mcp_server.models import (
    CompletionResponse,
    CursorRequest,
    DefinitionResponse,
    MCPServerConfig,
    MCPServerStatus,
)
from cssmodules_context.mcp_server.server import MCPCSSModulesServer


STYLESHEET = """\
.panel {
  &__title {
    margin: 0;
  }
}
.panel-body {
  padding: 8px;
}
"""

SOURCE = """\
const styles = require("./Panel.module.css");

module.exports = () => `<h1 class="${styles.panelTitle}">${styles.pan}</h1>`;
"""


class TestMCPServerModels:
    """Test MCP server Pydantic models"""

    def test_mcp_server_config_defaults(self):
        config = MCPServerConfig()

        assert config.project_path == Path(".")
        assert config.debug_mode is False

    def test_mcp_server_config_resolves_project_path(self, tmp_path):
        config = MCPServerConfig(project_path=tmp_path / "sub" / "..")

        assert config.project_path == tmp_path.resolve()
        assert config.resolve_document("src/App.tsx") == tmp_path.resolve() / "src" / "App.tsx"
        assert config.resolve_document("/abs/App.tsx") == Path("/abs/App.tsx")

    def test_cursor_request_validation(self):
        request = CursorRequest(request_id="r1", document_path="src/App.tsx", line=3, character=4)

        assert request.position.line == 3
        assert request.position.character == 4

        with pytest.raises(ValidationError, match="Not a JavaScript/TypeScript source"):
            CursorRequest(request_id="r1", document_path="styles.css", line=0, character=0)

        with pytest.raises(ValidationError):
            CursorRequest(request_id="r1", document_path="App.js", line=-1, character=0)

    def test_responses(self):
        definition = DefinitionResponse(request_id="d1", success=False, error_message="boom")
        completion = CompletionResponse(request_id="c1", success=True, candidates=["a"], total_found=1)

        assert definition.location is None
        assert completion.candidates == ["a"]
        assert completion.hint_message is None


class TestMCPCSSModulesServer:
    """Test MCPCSSModulesServer tool implementations"""

    @pytest.fixture(autouse=True)
    def project(self, tmp_path):
        (tmp_path / "Panel.module.css").write_text(STYLESHEET, encoding="utf-8")
        (tmp_path / "panel.js").write_text(SOURCE, encoding="utf-8")
        self.project_path = tmp_path
        self.line = SOURCE.splitlines()[2]
        self.server = MCPCSSModulesServer(
            config=MCPServerConfig(project_path=tmp_path),
            modules_config=CSSModulesConfig(camelCase=True, hintMessage="panel class")
        )

    def test_initialization(self):
        assert self.server.status == MCPServerStatus.INITIALIZING
        assert self.server.mcp is not None
        assert self.server.definition_provider.mode == self.server.modules_config.transform_mode

    def test_loads_project_config(self):
        (self.project_path / ".cssmodules.json").write_text(
            '{"cssmodules": {"camelCase": "dashes"}}', encoding="utf-8"
        )

        server = MCPCSSModulesServer(config=MCPServerConfig(project_path=self.project_path))

        assert server.modules_config.camel_case == "dashes"

    @pytest.mark.asyncio
    async def test_find_class_definition(self):
        character = self.line.index("panelTitle") + 2

        result = await self.server.find_class_definition("panel.js", 2, character)

        assert result["success"] is True
        assert result["request_id"] == "definition_1"
        assert result["location"]["uri"] == (self.project_path / "Panel.module.css").as_uri()
        assert result["location"]["range"]["start"] == {"line": 1, "character": 2}

    @pytest.mark.asyncio
    async def test_find_class_definition_on_require(self):
        character = SOURCE.index("./Panel")

        result = await self.server.find_class_definition(str(self.project_path / "panel.js"), 0, character)

        assert result["success"] is True
        assert result["location"]["range"]["start"] == {"line": 0, "character": 0}

    @pytest.mark.asyncio
    async def test_find_class_definition_not_found(self):
        result = await self.server.find_class_definition("panel.js", 1, 0)

        assert result["success"] is True
        assert "location" not in result

    @pytest.mark.asyncio
    async def test_find_class_definition_invalid_document(self):
        result = await self.server.find_class_definition("Panel.module.css", 0, 0)

        assert result["success"] is False
        assert result["error_message"].startswith("Invalid request")

    @pytest.mark.asyncio
    async def test_find_class_definition_missing_document(self):
        result = await self.server.find_class_definition("missing.js", 0, 0)

        assert result["success"] is False
        assert "missing.js" in result["error_message"]

    @pytest.mark.asyncio
    async def test_complete_class_names(self):
        character = self.line.index("styles.pan") + len("styles.pan")

        result = await self.server.complete_class_names("panel.js", 2, character)

        assert result["success"] is True
        assert result["candidates"] == ["panel", "panelTitle", "panelBody"]
        assert result["total_found"] == 3
        assert result["hint_message"] == "panel class"

    @pytest.mark.asyncio
    async def test_complete_class_names_outside_member_access(self):
        result = await self.server.complete_class_names("panel.js", 2, 6)

        assert result["success"] is True
        assert result["candidates"] == []

    @pytest.mark.asyncio
    async def test_list_class_selectors(self):
        result = await self.server.list_class_selectors("Panel.module.css")

        assert result["success"] is True
        assert result["request_id"] == "selectors_1"
        assert [s["transformed_name"] for s in result["selectors"]] == ["panel", "panelTitle", "panelBody"]
        assert result["selectors"][1] == {
            "raw_name": "panel__title",
            "transformed_name": "panelTitle",
            "line": 1,
            "column": 2,
            "nested": True
        }

    @pytest.mark.asyncio
    async def test_list_class_selectors_not_utf8(self):
        (self.project_path / "Bad.module.css").write_bytes(b".caf\xe9 {\n}\n")

        result = await self.server.list_class_selectors("Bad.module.css")

        assert result["success"] is False
        assert "utf-8" in result["error_message"]
        assert result["selectors"] == []

    @pytest.mark.asyncio
    async def test_list_class_selectors_missing_file(self):
        result = await self.server.list_class_selectors("Missing.module.css")

        assert result["success"] is False
        assert "Missing.module.css" in result["error_message"]

    @pytest.mark.asyncio
    async def test_request_ids_increment(self):
        await self.server.complete_class_names("panel.js", 0, 0)
        result = await self.server.complete_class_names("panel.js", 0, 0)

        assert result["request_id"] == "completion_2"

    def test_server_info(self):
        info = self.server.server_info()

        assert info["name"] == "cssmodules-context"
        assert info["version"] == __version__
        assert info["status"] == "initializing"
        assert info["trigger_characters"] == ["."]
        assert info["configuration"]["camelCase"] is True
        assert info["configuration"]["hintMessage"] == "panel class"

    @pytest.mark.asyncio
    async def test_shutdown(self):
        await self.server.shutdown()

        assert self.server.status == MCPServerStatus.SHUTDOWN
