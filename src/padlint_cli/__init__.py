"""Command line interface for padlint."""
