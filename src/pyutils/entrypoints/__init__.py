"""Entry points for pyutils (command-line interface)."""
