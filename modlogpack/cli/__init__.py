"""Command-line interface for ModlogKit."""
