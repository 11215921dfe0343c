"""
Language Server Protocol host for cssmodules-context.

Usage:
    cssmodules lsp
    python -m cssmodules_context.lsp
"""

from .server import CSSModulesLanguageServer, server, start_lsp

__all__ = ["CSSModulesLanguageServer", "server", "start_lsp"]
