"""Tokenizer, flat AST builder and automaton data types for a small regex dialect."""

__version__ = "0.1.0"
__all__ = ["astnode", "engine", "nfa", "tokens"]