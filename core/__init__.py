"""
cssmodules-context core package

Class name resolution for CSS modules imported into JavaScript/TypeScript.
"""

__version__ = "1.0.0"

from .models import ClassSelector, CSSModulesConfig, ImportBinding, Location, NameTransformMode

__all__ = [
    "ClassSelector",
    "CSSModulesConfig",
    "ImportBinding",
    "Location",
    "NameTransformMode",
]
