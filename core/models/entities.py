"""
Core entity models for CSS module navigation.

Defines import bindings, class selectors, cursor context and the
editor-facing position/location shapes built for each request.
"""

import re
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


# Stylesheet-like extension: 1-2 characters before a final "ss"
STYLESHEET_EXTENSION = re.compile(r'\.\S{1,2}ss$')


class ImportBinding(BaseModel):
    """Import statement binding an identifier to a stylesheet path"""
    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True
    )

    identifier_name: str = Field(..., min_length=1)
    stylesheet_path: str = Field(..., min_length=1)  # Raw, as written in source

    @field_validator('identifier_name')
    @classmethod
    def validate_identifier_name(cls, v: str) -> str:
        """Identifier must be a bare word token"""
        if re.search(r'\s', v):
            raise ValueError('Identifier name must be a single token')
        return v

    @field_validator('stylesheet_path')
    @classmethod
    def validate_stylesheet_path(cls, v: str) -> str:
        """Path must point at a css/scss/less-like file"""
        if not STYLESHEET_EXTENSION.search(v):
            raise ValueError(f'Not a stylesheet path: {v}')
        return v


class ClassSelector(BaseModel):
    """Class selector declaration found in a stylesheet"""
    model_config = ConfigDict(frozen=True)

    raw_name: str = Field(..., min_length=1)
    transformed_name: str = Field(..., min_length=1)

    # Zero-based location of the selector in the stylesheet
    line: int = Field(..., ge=0)
    column: int = Field(..., ge=0)

    # Declared through the parent-selector placeholder (&-child, &__elem, ...)
    nested: bool = False


class CursorContext(BaseModel):
    """The two tokens around the cursor, split on the member-access dot"""
    model_config = ConfigDict(frozen=True)

    import_name: str = ""
    class_name: str = ""

    @property
    def is_relevant(self) -> bool:
        return bool(self.import_name and self.class_name)


class Position(BaseModel):
    """Zero-based line/character position"""
    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=0)
    character: int = Field(..., ge=0)


class Range(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    @classmethod
    def empty(cls, position: Position) -> 'Range':
        """Zero-width range at a position"""
        return cls(start=position, end=position)


class Location(BaseModel):
    """Location inside a file, addressed by file:// URI"""
    model_config = ConfigDict(frozen=True)

    uri: str = Field(..., min_length=1)
    range: Range


class CompletionCandidate(BaseModel):
    """Plain-text completion item"""
    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1)


class TextDocument(BaseModel):
    """Source document as seen by the host editor"""
    model_config = ConfigDict(frozen=True)

    uri: str = Field(..., min_length=1)  # file:// URI or plain path
    text: str = ""
    language_id: Optional[str] = None

    @property
    def lines(self) -> List[str]:
        return self.text.splitlines()

    def line_at(self, line: int) -> str:
        """Text of a zero-based line, empty past the end of the document"""
        lines = self.lines
        if 0 <= line < len(lines):
            return lines[line]
        return ""


class DocumentFilter(BaseModel):
    """Host filter selecting which documents a provider serves"""
    model_config = ConfigDict(frozen=True)

    language: str
    scheme: str = "file"

    def matches(self, language_id: Optional[str], uri: str) -> bool:
        if language_id != self.language:
            return False
        if self.scheme == "file":
            return uri.startswith("file://") or "://" not in uri
        return uri.startswith(f"{self.scheme}:")
