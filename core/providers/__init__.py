"""
Editor providers for CSS module class names.

Key Components:
- CSSModulesDefinitionProvider: go-to-definition for imports and `styles.x` accesses
- CSSModulesCompletionProvider: class name completion after `styles.`
"""

from .base import DocumentLineHost, EditorHost, ProviderRegistrar, cursor_context
from .completion import CSSModulesCompletionProvider
from .definition import CSSModulesDefinitionProvider

__all__ = [
    "CSSModulesCompletionProvider",
    "CSSModulesDefinitionProvider",
    "DocumentLineHost",
    "EditorHost",
    "ProviderRegistrar",
    "cursor_context",
]
