"""newsdash - personal RSS news dashboard."""

__version__ = "0.1.0"
