"""Lexer, parser and interpreter for a tiny 8-bit assembly language."""

__version__ = "0.1.0"

__all__ = ["tokens", "lexer", "machine", "runner", "parser", "cli"]