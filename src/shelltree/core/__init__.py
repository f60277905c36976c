"""
Core shelltree components.

This package provides the path/token utilities and the shared type
definitions used by the command tree and the session.
"""

from shelltree.core.path_utils import (
    PARENT_SEGMENT,
    PATH_SEPARATOR,
    PathExpression,
    format_path,
    has_invalid_chars,
    normalize_name,
    split_tokens,
)
from shelltree.core.types import (
    Action,
    CompletionCallback,
    SessionPath,
    Tokens,
)

__all__ = [
    "PARENT_SEGMENT",
    "PATH_SEPARATOR",
    "PathExpression",
    "format_path",
    "has_invalid_chars",
    "normalize_name",
    "split_tokens",
    "Action",
    "CompletionCallback",
    "SessionPath",
    "Tokens",
]
