"""Preamble parsing, diagnostic snippets, reporters and tree visitors for linting Markdown documents."""

__version__ = "0.1.0"
__all__ = ["preamble", "reporters", "snippet", "tree"]