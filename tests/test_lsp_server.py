"""
Unit tests for the language server host.

Tests provider registration through activation and dispatch of definition
and completion requests to the registered providers.
"""

import pytest
from unittest.mock import patch

from lsprotocol import types

from core.models.config import CSSModulesConfig
from core.models.entities import DocumentFilter, Location, Position, Range, TextDocument
from cssmodules_context.lsp.server import (
    Registration,
    completions,
    definition,
    load_initial_config,
    server,
    to_lsp_location,
)


STYLESHEET = ".title {\n  &-main {\n  }\n}\n"

SOURCE = 'import styles from "./Title.module.css";\nconst a = styles.title;\n'


class TestRegistration:
    """Test the registrar side of the server"""

    def setup_method(self):
        server.definition_registrations.clear()
        server.completion_registrations.clear()
        server.subscriptions = []

    def teardown_method(self):
        self.setup_method()

    def test_activate_providers(self):
        server.activate_providers(CSSModulesConfig(hintMessage="hint"))

        assert len(server.definition_registrations) == 1
        assert len(server.completion_registrations) == 1
        assert server.completion_registrations[0].hint_message == "hint"
        assert [f.language for f in server.completion_registrations[0].filters] == [
            "javascript", "javascriptreact", "typescript", "typescriptreact"
        ]

    def test_reactivation_disposes_previous(self):
        server.activate_providers(CSSModulesConfig())
        first = server.definition_registrations[0]

        server.activate_providers(CSSModulesConfig(camelCase=True))

        assert len(server.definition_registrations) == 1
        assert server.definition_registrations[0] is not first

    def test_dispose_is_idempotent(self):
        server.activate_providers(CSSModulesConfig())
        registration = server.completion_registrations[0]

        registration.dispose()
        registration.dispose()

        assert server.completion_registrations == []

    def test_registration_serves(self):
        registration = Registration(provider=None, filters=[DocumentFilter(language="typescript")])

        assert registration.serves(TextDocument(uri="file:///a.ts", language_id="typescript"))
        assert not registration.serves(TextDocument(uri="file:///a.css", language_id="css"))


class TestHelpers:
    """Test conversion and configuration helpers"""

    def test_to_lsp_location(self):
        position = Position(line=4, character=2)
        location = Location(uri="file:///a.css", range=Range.empty(position))

        converted = to_lsp_location(location)

        assert converted.uri == "file:///a.css"
        assert converted.range.start == types.Position(line=4, character=2)
        assert converted.range.end == types.Position(line=4, character=2)

    def test_initialization_options(self):
        params = types.InitializeParams(
            process_id=None,
            capabilities=types.ClientCapabilities(),
            initialization_options={"cssmodules": {"camelCase": "dashes"}}
        )

        assert load_initial_config(params).camel_case == "dashes"

    def test_workspace_config(self, tmp_path):
        (tmp_path / ".cssmodules.json").write_text('{"cssmodules": {"hintMessage": "ws"}}', encoding="utf-8")
        params = types.InitializeParams(
            process_id=None,
            capabilities=types.ClientCapabilities(),
            root_uri=tmp_path.as_uri()
        )

        assert load_initial_config(params).hint_message == "ws"


class TestRequestDispatch:
    """Test definition and completion handlers"""

    @pytest.fixture(autouse=True)
    def project(self, tmp_path):
        (tmp_path / "Title.module.css").write_text(STYLESHEET, encoding="utf-8")
        self.stylesheet_uri = (tmp_path / "Title.module.css").as_uri()
        self.document = TextDocument(
            uri=(tmp_path / "Title.jsx").as_uri(),
            text=SOURCE,
            language_id="javascriptreact"
        )
        server.subscriptions = []
        server.definition_registrations.clear()
        server.completion_registrations.clear()
        server.activate_providers(CSSModulesConfig(camelCase=True, hintMessage="hint"))
        with patch.object(server, 'get_document', return_value=self.document):
            yield
        server.activate_providers(CSSModulesConfig())

    def text_document(self):
        return types.TextDocumentIdentifier(uri=self.document.uri)

    @pytest.mark.asyncio
    async def test_definition(self):
        params = types.DefinitionParams(
            text_document=self.text_document(),
            position=types.Position(line=1, character=len("const a = styles.ti"))
        )

        result = await definition(server, params)

        assert result is not None
        assert result.uri == self.stylesheet_uri
        assert result.range.start == types.Position(line=0, character=1)

    @pytest.mark.asyncio
    async def test_definition_for_unsupported_language(self):
        css_document = self.document.model_copy(update={"language_id": "css"})
        params = types.DefinitionParams(
            text_document=self.text_document(),
            position=types.Position(line=1, character=len("const a = styles.ti"))
        )

        with patch.object(server, 'get_document', return_value=css_document):
            assert await definition(server, params) is None

    @pytest.mark.asyncio
    async def test_completion(self):
        params = types.CompletionParams(
            text_document=self.text_document(),
            position=types.Position(line=1, character=len("const a = styles."))
        )

        result = await completions(server, params)

        assert result.is_incomplete is False
        assert [item.label for item in result.items] == ["title", "titleMain"]
        assert all(item.detail == "hint" for item in result.items)
