"""
cssmodules-context - CSS module class name navigation for editors.

Go-to-definition and completion for class names used through CSS-Modules
imports (`import styles from "./X.module.scss"` then `styles.someClass`),
served over the Language Server Protocol, MCP, or the `cssmodules` CLI.
"""

__version__ = "1.0.0"

# Package imports for convenient access
from core.models.entities import ClassSelector, ImportBinding, Location, CompletionCandidate
from core.models.config import CSSModulesConfig, NameTransformMode
from core.providers import CSSModulesCompletionProvider, CSSModulesDefinitionProvider

__all__ = [
    "ClassSelector",
    "ImportBinding",
    "Location",
    "CompletionCandidate",
    "CSSModulesConfig",
    "NameTransformMode",
    "CSSModulesCompletionProvider",
    "CSSModulesDefinitionProvider",
    "__version__",
]
