"""
Configuration loading and management.

Finds the editor options for a project, applies environment overrides and
writes project config files.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

from pydantic import ValidationError

from core.models.config import CSSModulesConfig, GlobalSettings
from .defaults import CONFIG_FILE_NAMES, ENV_VAR_MAPPING, SETTINGS_SECTION, get_default_project_config

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """Load and manage CSS modules options per project"""

    def __init__(self, global_settings: Optional[GlobalSettings] = None):
        self.global_settings = global_settings or GlobalSettings()
        self.config_cache: Dict[str, CSSModulesConfig] = {}

    def load_project_config(self, project_path: Union[str, Path]) -> CSSModulesConfig:
        """Load configuration for a project, falling back to defaults"""
        project_path = Path(project_path).resolve()

        # Check cache first
        cache_key = str(project_path)
        if cache_key in self.config_cache:
            return self.config_cache[cache_key]

        config_data = get_default_project_config()

        config_file = self.find_config_file(project_path)
        if config_file is not None:
            config_data.update(self._load_config_file(config_file))

        config_data = self._apply_env_overrides(config_data)
        config = self._build_config(config_data)

        self.config_cache[cache_key] = config
        return config

    def load_from_dict(self, data: Dict[str, Any]) -> CSSModulesConfig:
        """Build configuration from editor-supplied settings"""
        config_data = get_default_project_config()
        config_data.update(self._extract_section(data))
        return self._build_config(self._apply_env_overrides(config_data))

    def find_config_file(self, project_path: Path) -> Optional[Path]:
        """First existing config file in the project"""
        names = [self.global_settings.config_file_name] + [
            name for name in CONFIG_FILE_NAMES
            if name != self.global_settings.config_file_name
        ]
        for name in names:
            candidate = project_path / name
            if candidate.is_file():
                return candidate
        return None

    def _load_config_file(self, config_file: Path) -> Dict[str, Any]:
        """Read options from a config file, ignoring unreadable files"""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load config from {config_file}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Config file {config_file} does not contain an object")
            return {}

        logger.debug(f"Loaded configuration from {config_file}")
        return self._extract_section(data)

    def _extract_section(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Pick the CSS modules options out of a settings object.

        Accepts a nested section ({"cssmodules": {"camelCase": true}}), flat
        editor keys ({"cssmodules.camelCase": true}) or bare options.
        """
        options: Dict[str, Any] = {}
        prefix = f"{SETTINGS_SECTION}."

        for key, value in data.items():
            if key.startswith(prefix):
                options[key[len(prefix):]] = value
            elif key in ('camelCase', 'hintMessage'):
                options[key] = value

        section = data.get(SETTINGS_SECTION)
        if isinstance(section, dict):
            options.update(section)

        return options

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration"""
        for env_var, option in ENV_VAR_MAPPING.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                config_data[option] = env_value

        return config_data

    def _build_config(self, config_data: Dict[str, Any]) -> CSSModulesConfig:
        """Validate options, replacing only the invalid ones with defaults"""
        try:
            return CSSModulesConfig(**config_data)
        except ValidationError as e:
            invalid = {str(error["loc"][0]) for error in e.errors() if error["loc"]}
            logger.error(f"Invalid CSS modules options {sorted(invalid)}, using defaults for them: {e}")

        valid_data = {key: value for key, value in config_data.items() if key not in invalid}
        try:
            return CSSModulesConfig(**valid_data)
        except ValidationError as e:
            logger.error(f"Invalid CSS modules configuration, using defaults: {e}")
            return CSSModulesConfig()

    def save_project_config(self, project_path: Union[str, Path], config: CSSModulesConfig) -> Path:
        """Write the options to the project's config file"""
        project_path = Path(project_path).resolve()
        config_file = project_path / self.global_settings.config_file_name

        with open(config_file, 'w', encoding='utf-8') as f:
            json.dump({SETTINGS_SECTION: config.to_dict()}, f, indent=2, ensure_ascii=False)

        logger.info(f"Saved configuration to {config_file}")

        self.config_cache[str(project_path)] = config
        return config_file

    def clear_cache(self) -> None:
        """Clear configuration cache"""
        self.config_cache.clear()
        logger.info("Configuration cache cleared")
