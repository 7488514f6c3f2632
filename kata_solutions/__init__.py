"""Worked solutions to classic coding-interview problems, with timing and printing helpers."""

__version__ = "0.1.0"