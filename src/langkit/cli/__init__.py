"""
Langkit Command-Line Interface
==============================

This package provides command-line tools for the toolkit:

- **lkscan**: prints the token stream of a source file or expression

Each tool is implemented as a Click-based CLI application with
help text and uniform exit codes.
"""

__all__ = ["lkscan"]
