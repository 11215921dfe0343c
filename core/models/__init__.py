"""
Core data models for cssmodules-context

Pydantic models for import bindings, selectors, editor locations and configuration.
"""

from .entities import (
    ImportBinding,
    ClassSelector,
    CursorContext,
    Position,
    Range,
    Location,
    CompletionCandidate,
    TextDocument,
    DocumentFilter,
)
from .config import CSSModulesConfig, GlobalSettings, NameTransformMode

__all__ = [
    # Entities
    "ImportBinding",
    "ClassSelector",
    "CursorContext",
    "Position",
    "Range",
    "Location",
    "CompletionCandidate",
    "TextDocument",
    "DocumentFilter",

    # Configuration
    "CSSModulesConfig",
    "GlobalSettings",
    "NameTransformMode",
]
