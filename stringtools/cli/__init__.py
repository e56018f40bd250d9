"""Command-line interface for stringtools."""
