"""Command-line interface for pyutils."""
