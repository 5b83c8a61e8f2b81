"""Tokenizer and block structure checker for plain text digital logic circuit specifications."""

__version__ = "0.1.0"
__all__ = ["parser", "project", "tokenizer"]