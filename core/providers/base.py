"""
Shared pieces of the definition and completion providers.

Defines the host-editor protocols, cursor context extraction and stylesheet
resolution used by both providers.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, List, Optional, Protocol, runtime_checkable

from ..models.config import NameTransformMode
from ..models.entities import CursorContext, DocumentFilter, TextDocument
from ..parser.imports import document_directory, find_import, resolve_path

logger = logging.getLogger(__name__)

# Member-access run ending at the cursor, e.g. "styles.cont"
_RUN_BEFORE_CURSOR = re.compile(r'[A-Za-z0-9._]*$')
_RUN_FORWARD = re.compile(r'[A-Za-z0-9._]*')


@runtime_checkable
class EditorHost(Protocol):
    """Host editor access needed while answering a request"""

    async def get_current_line_text(self) -> str:
        """Text of the line under the cursor"""
        ...


@runtime_checkable
class ProviderRegistrar(Protocol):
    """Host editor registration points"""

    def register_definition_provider(
        self,
        filters: List[DocumentFilter],
        provider: Any
    ) -> Any:
        ...

    def register_completion_item_provider(
        self,
        provider_id: str,
        hint_message: str,
        languages: List[str],
        provider: Any,
        trigger_characters: List[str]
    ) -> Any:
        ...


class DocumentLineHost:
    """EditorHost answering from a document's own text"""

    def __init__(self, document: TextDocument, line: int):
        self.document = document
        self.line = line

    async def get_current_line_text(self) -> str:
        return self.document.line_at(self.line)


LANGUAGE_IDS = {
    '.js': 'javascript',
    '.mjs': 'javascript',
    '.cjs': 'javascript',
    '.jsx': 'javascriptreact',
    '.ts': 'typescript',
    '.mts': 'typescript',
    '.cts': 'typescript',
    '.tsx': 'typescriptreact',
}


def load_text_document(path: Path) -> TextDocument:
    """Read a source document from disk the way an editor would hold it"""
    path = Path(path).resolve()
    return TextDocument(
        uri=path.as_uri(),
        text=path.read_text(encoding='utf-8'),
        language_id=LANGUAGE_IDS.get(path.suffix.lower())
    )


def cursor_context(line: str, character: int, extend_forward: bool = False) -> CursorContext:
    """
    Split the member-access run at the cursor into (import name, class name).

    The run starts at the last contiguous `[A-Za-z0-9._]` sequence before the
    cursor. With `extend_forward` it continues past the cursor to the end of
    the token, so a cursor anywhere on `styles.container` resolves the whole
    access. A run without a dot gives an empty context.
    """
    text = line[:character]
    start = _RUN_BEFORE_CURSOR.search(text).start()

    if extend_forward:
        run = _RUN_FORWARD.match(line, start).group(0)
    else:
        run = text[start:]

    if '.' not in run:
        return CursorContext()

    import_name, class_name = run.split('.')[:2]
    return CursorContext(import_name=import_name, class_name=class_name)


class StylesheetProvider:
    """Base for providers that resolve a styles object to its stylesheet"""

    def __init__(self, mode: NameTransformMode = NameTransformMode.IDENTITY):
        self.mode = mode

    def resolve_stylesheet(self, document: TextDocument, import_name: str) -> Optional[str]:
        """Absolute path of the stylesheet bound to `import_name`, if it exists"""
        binding = find_import(document.text, import_name)
        if binding is None:
            return None

        path = resolve_path(document_directory(document.uri), binding.stylesheet_path)
        if not os.path.exists(path):
            logger.debug(f"Stylesheet for '{import_name}' does not exist: {path}")
            return None

        return path

    def read_stylesheet(self, path: str) -> str:
        return Path(path).read_text(encoding='utf-8')
