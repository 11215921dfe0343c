"""
Pattern-based scanners for CSS module imports and stylesheet selectors.

No CSS AST is built: imports are matched with a regular expression over the
source document and selectors are found by scanning the stylesheet line by
line.

Key Components:
- transform: class name -> identifier transforms (identity, camelCase, dashes)
- imports: stylesheet import detection and path resolution
- selectors: class selector declarations, including nested `&-child` rules

Example:
    from core.parser import find_import, find_selector
    from core.models import NameTransformMode

    binding = find_import(source_text, "styles")
    if binding:
        selector = find_selector(stylesheet_text, "btnPrimary", NameTransformMode.CAMEL_CASE)
"""

from .imports import (
    document_directory,
    find_import,
    find_import_on_line,
    import_pattern,
    resolve_path,
    to_file_uri,
    uri_to_path,
)
from .selectors import find_all_selectors, find_selector, is_selector_line
from .transform import TRANSFORMERS, get_transformer, transform

__all__ = [
    "document_directory",
    "find_import",
    "find_import_on_line",
    "import_pattern",
    "resolve_path",
    "to_file_uri",
    "uri_to_path",
    "find_all_selectors",
    "find_selector",
    "is_selector_line",
    "TRANSFORMERS",
    "get_transformer",
    "transform",
]
