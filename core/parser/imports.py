"""
Stylesheet import resolution for JavaScript/TypeScript sources.

Recognises ES module imports and CommonJS requires of CSS-module files:

    import styles from "./Button.module.scss"
    const styles = require("./Button.module.css")
    const styles = require<any>('./Button.module.less')
"""

import logging
import os
import re
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from ..models.entities import ImportBinding

logger = logging.getLogger(__name__)

# Path literal with a css/scss/less-like extension (1-2 characters before "ss")
_STYLESHEET_PATH = r'["\']([^"\'\n]*?\.[^"\'\s]{1,2}ss)["\']'
_FROM_OR_REQUIRE = r'(?:from\s+|=\s*require(?:<any>)?\(\s*)'
_REQUIRE_END_OPTIONAL = r'\)?'

_ANY_IDENTIFIER = r'([A-Za-z_$][\w$]*)'


def import_pattern(identifier: Optional[str] = None) -> 're.Pattern[str]':
    """
    Build the import-statement pattern for an identifier.

    Group 1 is the bound identifier, group 2 the stylesheet path as written.
    Without an identifier the pattern captures whichever identifier is bound.
    """
    if identifier is None:
        key = _ANY_IDENTIFIER
    else:
        key = rf'(?<![\w$])({re.escape(identifier)})'

    return re.compile(
        rf'{key}\s+{_FROM_OR_REQUIRE}{_STYLESHEET_PATH}\s*{_REQUIRE_END_OPTIONAL}'
    )


def find_import(document_text: str, identifier_name: str) -> Optional[ImportBinding]:
    """
    Find the import binding `identifier_name` to a stylesheet.

    The first occurrence in the whole document wins; the search is not
    line-based so that imports sharing a line are still found.
    """
    if not identifier_name:
        return None

    match = import_pattern(identifier_name).search(document_text)
    if not match:
        logger.debug(f"No stylesheet import found for '{identifier_name}'")
        return None

    return ImportBinding(identifier_name=match.group(1), stylesheet_path=match.group(2))


def find_import_on_line(line: str) -> Optional[ImportBinding]:
    """Find the first stylesheet import statement on a single line"""
    match = import_pattern().search(line)
    if not match:
        return None

    return ImportBinding(identifier_name=match.group(1), stylesheet_path=match.group(2))


def resolve_path(document_directory: str, raw_path: str) -> str:
    """Join a raw import path onto the importing document's directory"""
    return os.path.normpath(os.path.join(document_directory, raw_path))


def uri_to_path(uri_or_path: str) -> str:
    """Filesystem path of a file:// URI; plain paths pass through"""
    if uri_or_path.startswith("file://"):
        return unquote(urlparse(uri_or_path).path)
    return uri_or_path


def document_directory(document_uri: str) -> str:
    """Directory containing the document"""
    return os.path.dirname(uri_to_path(document_uri))


def to_file_uri(path: str) -> str:
    return Path(os.path.abspath(path)).as_uri()
