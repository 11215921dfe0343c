"""
Language Server Protocol host for cssmodules-context.

A pygls server that acts as the host editor's registrar: `core.activation`
registers the providers with it, and its definition/completion handlers
dispatch to whichever registered provider serves the document's language.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional, Union

from lsprotocol import types
from pygls.server import LanguageServer

from config.loader import ConfigurationLoader
from core.activation import TRIGGER_CHARACTERS, activate
from core.models.config import CSSModulesConfig, GlobalSettings
from core.models.entities import DocumentFilter, Location, Position, TextDocument
from core.parser.imports import uri_to_path
from core.providers import CSSModulesCompletionProvider, CSSModulesDefinitionProvider, DocumentLineHost

from cssmodules_context import __version__

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Registration:
    """Disposable handle returned by the registration calls"""
    provider: Any
    filters: List[DocumentFilter] = field(default_factory=list)
    hint_message: Optional[str] = None
    on_dispose: Optional[Callable[['Registration'], None]] = None

    def serves(self, document: TextDocument) -> bool:
        return any(f.matches(document.language_id, document.uri) for f in self.filters)

    def dispose(self) -> None:
        if self.on_dispose is not None:
            self.on_dispose(self)
            self.on_dispose = None


class CSSModulesLanguageServer(LanguageServer):
    def __init__(self):
        super().__init__("cssmodules-ls", __version__)
        self.definition_registrations: List[Registration] = []
        self.completion_registrations: List[Registration] = []
        self.subscriptions: List[Registration] = []

    def register_definition_provider(
        self,
        filters: List[DocumentFilter],
        provider: CSSModulesDefinitionProvider
    ) -> Registration:
        registration = Registration(
            provider=provider,
            filters=list(filters),
            on_dispose=self.definition_registrations.remove
        )
        self.definition_registrations.append(registration)
        return registration

    def register_completion_item_provider(
        self,
        provider_id: str,
        hint_message: str,
        languages: List[str],
        provider: CSSModulesCompletionProvider,
        trigger_characters: List[str]
    ) -> Registration:
        # Trigger characters are advertised statically on the completion feature
        if set(trigger_characters) - set(TRIGGER_CHARACTERS):
            logger.warning(f"Unsupported trigger characters for {provider_id}: {trigger_characters}")

        registration = Registration(
            provider=provider,
            filters=[DocumentFilter(language=language) for language in languages],
            hint_message=hint_message,
            on_dispose=self.completion_registrations.remove
        )
        self.completion_registrations.append(registration)
        return registration

    def activate_providers(self, config: CSSModulesConfig) -> None:
        """(Re)register the providers for a configuration"""
        for subscription in self.subscriptions:
            subscription.dispose()
        self.subscriptions = activate(self, config)

    def get_document(self, uri: str) -> TextDocument:
        document = self.workspace.get_text_document(uri)
        return TextDocument(uri=document.uri, text=document.source, language_id=document.language_id)


server = CSSModulesLanguageServer()


def to_lsp_location(location: Location) -> types.Location:
    start = types.Position(line=location.range.start.line, character=location.range.start.character)
    end = types.Position(line=location.range.end.line, character=location.range.end.character)
    return types.Location(uri=location.uri, range=types.Range(start=start, end=end))


def load_initial_config(params: types.InitializeParams) -> CSSModulesConfig:
    """Options from initializationOptions, else from the workspace's config files"""
    loader = ConfigurationLoader()
    if isinstance(params.initialization_options, dict):
        return loader.load_from_dict(params.initialization_options)

    root = params.root_uri or params.root_path
    if root:
        return loader.load_project_config(uri_to_path(root))
    return loader.load_project_config(Path.cwd())


@server.feature(types.INITIALIZE)
def initialize(ls: CSSModulesLanguageServer, params: types.InitializeParams) -> None:
    ls.activate_providers(load_initial_config(params))


@server.feature(types.TEXT_DOCUMENT_DEFINITION)
async def definition(
    ls: CSSModulesLanguageServer,
    params: types.DefinitionParams
) -> Optional[types.Location]:
    """Go to the selector (or stylesheet) referenced at the cursor"""
    document = ls.get_document(params.text_document.uri)
    position = Position(line=params.position.line, character=params.position.character)
    host = DocumentLineHost(document, position.line)

    for registration in ls.definition_registrations:
        if not registration.serves(document):
            continue
        location = await registration.provider.provide_definition(document, position, host)
        if location is not None:
            return to_lsp_location(location)

    return None


@server.feature(
    types.TEXT_DOCUMENT_COMPLETION,
    types.CompletionOptions(trigger_characters=list(TRIGGER_CHARACTERS))
)
async def completions(
    ls: CSSModulesLanguageServer,
    params: types.CompletionParams
) -> types.CompletionList:
    """Class names of the stylesheet bound to the object before the cursor"""
    document = ls.get_document(params.text_document.uri)
    position = Position(line=params.position.line, character=params.position.character)
    host = DocumentLineHost(document, position.line)

    items: List[types.CompletionItem] = []
    for registration in ls.completion_registrations:
        if not registration.serves(document):
            continue
        candidates = await registration.provider.provide_completion_items(document, position, host)
        items.extend(
            types.CompletionItem(label=candidate.label, detail=registration.hint_message)
            for candidate in candidates
        )

    return types.CompletionList(is_incomplete=False, items=items)


def start_lsp(log_file: Optional[Union[str, Path]] = None) -> None:
    """Start the language server over stdio"""
    settings = GlobalSettings()
    log_file = log_file or settings.log_file
    if log_file:
        logging.basicConfig(level=settings.log_level, filename=str(log_file))
    else:
        # stdout carries the protocol
        logging.basicConfig(level=settings.log_level)

    logger.info(f"Starting cssmodules-ls {__version__}")
    server.start_io()
