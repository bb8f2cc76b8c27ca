"""Interpreter for branching interactive-fiction scene scripts."""

__version__ = "0.1.0"
