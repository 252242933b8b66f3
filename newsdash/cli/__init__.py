"""Command-line interface for newsdash."""
