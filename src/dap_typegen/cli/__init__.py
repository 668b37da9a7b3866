"""Command-line handlers for ``dap-typegen``."""
