"""
Unit tests for provider activation.
"""

from unittest.mock import Mock

from core.activation import (
    PROVIDER_ID,
    SUPPORTED_LANGUAGES,
    TRIGGER_CHARACTERS,
    activate,
    document_filters,
)
from core.models.config import CSSModulesConfig, NameTransformMode
from core.providers import CSSModulesCompletionProvider, CSSModulesDefinitionProvider


class TestActivation:
    """Test activate() against a mock registrar"""

    def setup_method(self):
        self.registrar = Mock()
        self.registrar.register_definition_provider.return_value = "definition-disposable"
        self.registrar.register_completion_item_provider.return_value = "completion-disposable"

    def test_registers_both_providers(self):
        subscriptions = activate(self.registrar, CSSModulesConfig())

        assert subscriptions == ["definition-disposable", "completion-disposable"]
        self.registrar.register_definition_provider.assert_called_once()
        self.registrar.register_completion_item_provider.assert_called_once()

    def test_definition_registration(self):
        activate(self.registrar, CSSModulesConfig(camelCase=True))

        filters, provider = self.registrar.register_definition_provider.call_args.args

        assert [f.language for f in filters] == SUPPORTED_LANGUAGES
        assert all(f.scheme == "file" for f in filters)
        assert isinstance(provider, CSSModulesDefinitionProvider)
        assert provider.mode is NameTransformMode.CAMEL_CASE

    def test_completion_registration(self):
        activate(self.registrar, CSSModulesConfig(camelCase="dashes", hintMessage="class"))

        provider_id, hint, languages, provider, triggers = (
            self.registrar.register_completion_item_provider.call_args.args
        )

        assert provider_id == PROVIDER_ID == "cssmodules"
        assert hint == "class"
        assert languages == ["javascript", "javascriptreact", "typescript", "typescriptreact"]
        assert isinstance(provider, CSSModulesCompletionProvider)
        assert provider.mode is NameTransformMode.DASHES
        assert triggers == TRIGGER_CHARACTERS == ["."]

    def test_default_hint_message(self):
        activate(self.registrar, CSSModulesConfig())

        assert self.registrar.register_completion_item_provider.call_args.args[1] == "string (cssmodule)"

    def test_document_filters(self):
        filters = document_filters()

        assert len(filters) == 4
        assert filters[0].matches("javascript", "file:///src/index.js")
