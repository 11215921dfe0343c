"""
MCP Server models for cssmodules-context.

Defines Pydantic models for tool requests/responses and server configuration.
Follows the same patterns as core.models.
"""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from core.models.entities import ClassSelector, Location, Position

SOURCE_EXTENSIONS = {'.js', '.jsx', '.mjs', '.cjs', '.ts', '.tsx', '.mts', '.cts'}


class MCPServerStatus(Enum):
    """MCP server status states"""
    INITIALIZING = "initializing"
    READY = "ready"
    ERROR = "error"
    SHUTDOWN = "shutdown"


class MCPServerConfig(BaseModel):
    """MCP server configuration model"""
    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True
    )

    # Project settings; relative document paths resolve against it
    project_path: Path = Field(default=Path("."))
    debug_mode: bool = Field(default=False)

    @field_validator('project_path')
    @classmethod
    def validate_project_path(cls, v: Path) -> Path:
        """Ensure project path is absolute"""
        return v.resolve()

    def resolve_document(self, document_path: str) -> Path:
        path = Path(document_path)
        if not path.is_absolute():
            path = self.project_path / path
        return path


class CursorRequest(BaseModel):
    """Cursor position inside a source document"""
    model_config = ConfigDict(str_strip_whitespace=True)

    request_id: str = Field(..., min_length=1, max_length=100)
    document_path: str = Field(..., min_length=1)
    line: int = Field(..., ge=0)
    character: int = Field(..., ge=0)

    @field_validator('document_path')
    @classmethod
    def validate_document_path(cls, v: str) -> str:
        """Only script sources carry styles imports"""
        if Path(v).suffix.lower() not in SOURCE_EXTENSIONS:
            raise ValueError(f'Not a JavaScript/TypeScript source: {v}')
        return v

    @property
    def position(self) -> Position:
        return Position(line=self.line, character=self.character)


class DefinitionResponse(BaseModel):
    """Result of a definition lookup"""
    request_id: str = Field(..., min_length=1)
    success: bool = Field(...)
    location: Optional[Location] = Field(default=None)
    error_message: Optional[str] = Field(default=None)
    timestamp: datetime = Field(default_factory=datetime.now)


class CompletionResponse(BaseModel):
    """Result of a completion request"""
    request_id: str = Field(..., min_length=1)
    success: bool = Field(...)
    candidates: List[str] = Field(default_factory=list)
    total_found: int = Field(default=0, ge=0)
    hint_message: Optional[str] = Field(default=None)
    error_message: Optional[str] = Field(default=None)
    timestamp: datetime = Field(default_factory=datetime.now)


class SelectorsResponse(BaseModel):
    """Response model for list_class_selectors tool"""
    request_id: str = Field(..., min_length=1)
    success: bool = Field(...)
    selectors: List[ClassSelector] = Field(default_factory=list)
    error_message: Optional[str] = Field(default=None)
    timestamp: datetime = Field(default_factory=datetime.now)
