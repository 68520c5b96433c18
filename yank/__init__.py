"""yank: a key-value clipboard manager for short text snippets."""

__version__ = "0.1.0"
