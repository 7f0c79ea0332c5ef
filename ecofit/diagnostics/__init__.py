"""Environment diagnostics."""
