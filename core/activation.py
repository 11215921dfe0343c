"""
Provider activation.

Builds both providers from the configuration and hands them to the host's
registration points, once per host session.
"""

import logging
from typing import Any, List

from .models.config import CSSModulesConfig
from .models.entities import DocumentFilter
from .providers.base import ProviderRegistrar
from .providers.completion import CSSModulesCompletionProvider
from .providers.definition import CSSModulesDefinitionProvider

logger = logging.getLogger(__name__)

PROVIDER_ID = "cssmodules"

SUPPORTED_LANGUAGES = [
    "javascript",
    "javascriptreact",
    "typescript",
    "typescriptreact",
]

TRIGGER_CHARACTERS = ["."]


def document_filters() -> List[DocumentFilter]:
    return [DocumentFilter(language=language, scheme="file") for language in SUPPORTED_LANGUAGES]


def activate(registrar: ProviderRegistrar, config: CSSModulesConfig) -> List[Any]:
    """
    Register the definition and completion providers with a host.

    Returns whatever the registrar hands back for each registration
    (disposables), in registration order.
    """
    mode = config.transform_mode
    logger.info(f"Activating CSS modules providers (camelCase: {config.camel_case})")

    subscriptions = [
        registrar.register_definition_provider(
            document_filters(),
            CSSModulesDefinitionProvider(mode)
        ),
        registrar.register_completion_item_provider(
            PROVIDER_ID,
            config.hint_message,
            list(SUPPORTED_LANGUAGES),
            CSSModulesCompletionProvider(mode),
            list(TRIGGER_CHARACTERS)
        ),
    ]
    return subscriptions
