"""Toy language front end: lexer, parser, syntax tree, IR emitter, and a language detector."""

__version__ = "0.1.0"