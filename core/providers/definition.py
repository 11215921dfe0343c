"""
Go-to-definition for CSS module class names.

Resolves the cursor either to the top of an imported stylesheet (cursor on the
import statement) or to the selector declaring a `styles.className` access.
"""

import logging
import os
from typing import Any, Optional

from ..models.entities import Location, Position, Range, TextDocument
from ..parser.imports import document_directory, import_pattern, resolve_path, to_file_uri
from ..parser.selectors import find_selector
from .base import EditorHost, StylesheetProvider, cursor_context

logger = logging.getLogger(__name__)


class CSSModulesDefinitionProvider(StylesheetProvider):
    """Definition provider for `styles.className` accesses and stylesheet imports"""

    def import_location(self, document: TextDocument, line: str, character: int) -> Optional[Location]:
        """
        Location of the stylesheet when the cursor is on an import statement.

        The cursor must be on the bound identifier or inside the path literal
        (bounds inclusive):

            import styles from "./Something.module.scss"
                   ^^^^^^       ^^^^^^^^^^^^^^^^^^^^^^^^
        """
        match = import_pattern().search(line)
        if not match:
            return None

        on_identifier = match.start(1) <= character <= match.end(1)
        on_path = match.start(2) <= character <= match.end(2)
        if not (on_identifier or on_path):
            return None

        path = resolve_path(document_directory(document.uri), match.group(2))
        if not os.path.exists(path):
            logger.debug(f"Imported stylesheet does not exist: {path}")
            return None

        return Location(uri=to_file_uri(path), range=Range.empty(Position(line=0, character=0)))

    def definition_at(
        self,
        document: TextDocument,
        line: str,
        position: Position
    ) -> Optional[Location]:
        """Resolve a definition from the current line text"""
        location = self.import_location(document, line, position.character)
        if location is not None:
            return location

        context = cursor_context(line, position.character, extend_forward=True)
        if not context.is_relevant:
            return None

        stylesheet_path = self.resolve_stylesheet(document, context.import_name)
        if stylesheet_path is None:
            return None

        selector = find_selector(
            self.read_stylesheet(stylesheet_path),
            context.class_name,
            self.mode
        )
        if selector is None:
            return None

        target = Position(line=selector.line, character=selector.column)
        return Location(uri=to_file_uri(stylesheet_path), range=Range.empty(target))

    async def provide_definition(
        self,
        document: TextDocument,
        position: Position,
        host: EditorHost,
        token: Any = None
    ) -> Optional[Location]:
        """Host entry point; the cancellation token is accepted but not checked"""
        line = await host.get_current_line_text()
        if not isinstance(line, str):
            return None

        return self.definition_at(document, line, position)
