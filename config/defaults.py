"""
Default configuration values for cssmodules-context.

Centralized defaults that can be overridden by environment variables or config files.
"""

from typing import Any, Dict

# Global default settings
DEFAULT_SETTINGS = {
    # Editor-facing options, keyed the way editors spell them
    "cssmodules": {
        "camelCase": False,
        "hintMessage": "string (cssmodule)"
    }
}

# Section name used by editor settings files ("cssmodules.camelCase")
SETTINGS_SECTION = "cssmodules"

# Project config files, searched in order
CONFIG_FILE_NAMES = [
    ".cssmodules.json",
    ".vim/coc-settings.json",
    "coc-settings.json",
]

# Environment variable mappings
ENV_VAR_MAPPING = {
    'CSSMODULES_CAMEL_CASE': 'camelCase',
    'CSSMODULES_HINT_MESSAGE': 'hintMessage',
}


def get_default_project_config() -> Dict[str, Any]:
    """Get default editor options"""
    return dict(DEFAULT_SETTINGS[SETTINGS_SECTION])
