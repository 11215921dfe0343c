"""
Completion of CSS module class names after `styles.`.
"""

import logging
import re
from typing import Any, List

from ..models.entities import CompletionCandidate, Position, TextDocument
from ..parser.selectors import find_all_selectors
from .base import EditorHost, StylesheetProvider, cursor_context

logger = logging.getLogger(__name__)

# Cursor inside the name segment right after a member-access dot
_AFTER_MEMBER_ACCESS = re.compile(r'\.[A-Za-z0-9_]*$')


class CSSModulesCompletionProvider(StylesheetProvider):
    """Completion provider listing the class names of an imported stylesheet"""

    def is_completion_trigger(self, line: str, position: Position) -> bool:
        """
        Check if the cursor follows a member-access dot.

            styles.      styles.c      styles.cont
                   ^             ^                ^
        """
        return bool(_AFTER_MEMBER_ACCESS.search(line[:position.character]))

    def completions_at(
        self,
        document: TextDocument,
        line: str,
        position: Position
    ) -> List[CompletionCandidate]:
        if not self.is_completion_trigger(line, position):
            return []

        context = cursor_context(line, position.character)
        if not context.import_name:
            return []

        stylesheet_path = self.resolve_stylesheet(document, context.import_name)
        if stylesheet_path is None:
            return []

        selectors = find_all_selectors(self.read_stylesheet(stylesheet_path), self.mode)
        names = dict.fromkeys(
            selector.transformed_name
            for selector in selectors
            if context.class_name in selector.transformed_name
        )

        logger.debug(f"{len(names)} completions for '{context.import_name}.{context.class_name}'")
        return [CompletionCandidate(label=name) for name in names]

    async def provide_completion_items(
        self,
        document: TextDocument,
        position: Position,
        host: EditorHost,
        token: Any = None
    ) -> List[CompletionCandidate]:
        """Host entry point"""
        line = await host.get_current_line_text()
        if not isinstance(line, str):
            return []

        return self.completions_at(document, line, position)
