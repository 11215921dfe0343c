"""
Configuration models for cssmodules-context.

Handles the editor-facing options (camelCase, hintMessage) and global
settings read from the environment.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union
from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


CamelCaseSetting = Union[bool, Literal["dashes"]]


class NameTransformMode(Enum):
    """How a CSS class name is exposed as a JS identifier"""
    IDENTITY = "identity"
    CAMEL_CASE = "camelCase"
    DASHES = "dashes"

    @classmethod
    def from_setting(cls, value: CamelCaseSetting) -> 'NameTransformMode':
        """Map the `camelCase` option (false | true | "dashes") to a mode"""
        if value == "dashes":
            return cls.DASHES
        if value is True:
            return cls.CAMEL_CASE
        if value is False or value is None:
            return cls.IDENTITY
        raise ValueError(f'camelCase must be true, false or "dashes", got {value!r}')

    @property
    def is_camel_case(self) -> bool:
        return self is not NameTransformMode.IDENTITY


class CSSModulesConfig(BaseModel):
    """Options consumed at activation"""
    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        populate_by_name=True
    )

    camel_case: CamelCaseSetting = Field(default=False, alias="camelCase")
    hint_message: str = Field(default="string (cssmodule)", alias="hintMessage")

    @field_validator('camel_case', mode='before')
    @classmethod
    def validate_camel_case(cls, v: Any) -> Any:
        """Accept the string forms env vars and JSON editors produce"""
        if isinstance(v, str):
            lowered = v.strip().lower()
            if lowered in ('true', 'yes', '1', 'on'):
                return True
            if lowered in ('false', 'no', '0', 'off', ''):
                return False
            if lowered == 'dashes':
                return 'dashes'
            raise ValueError(f'camelCase must be true, false or "dashes", got {v!r}')
        return v

    @property
    def transform_mode(self) -> NameTransformMode:
        return NameTransformMode.from_setting(self.camel_case)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the editor-style JSON shape"""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CSSModulesConfig':
        return cls(**data)


class GlobalSettings(BaseSettings):
    """Global application settings with environment variable support"""
    model_config = SettingsConfigDict(
        env_prefix="CSSMODULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Project config file names, searched in order
    config_file_name: str = ".cssmodules.json"

    # Logging
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_file: Optional[Path] = None

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v
