"""Language server entry point: python -m cssmodules_context.lsp"""

from cssmodules_context.lsp.server import start_lsp


if __name__ == "__main__":
    start_lsp()
