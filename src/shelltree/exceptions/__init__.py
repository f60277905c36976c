"""
shelltree exception classes.

This package provides all exception types used throughout shelltree
for consistent error handling and reporting.
"""

from shelltree.exceptions.core import (
    ArityError,
    DuplicateNameError,
    InvalidNameError,
    NotFoundError,
    ShellError,
    ShellTreeError,
    TokenizeError,
    UnrecognizedCommandError,
)

__all__ = [
    "ShellTreeError",
    "InvalidNameError",
    "DuplicateNameError",
    "NotFoundError",
    "UnrecognizedCommandError",
    "ArityError",
    "TokenizeError",
    "ShellError",
]
