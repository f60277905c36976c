"""
Core type definitions for shelltree.

This module contains the callable signatures and aliases shared by the
command tree, the dispatcher and the session.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from shelltree.shell import Shell
    from shelltree.structure.context import Context

Tokens = list[str]

SessionPath = list[str]

# action(session, context, tokens)
Action = Callable[["Shell", "Context", Tokens], Any]

# completion(session, context, tokens, text) -> candidates or None
CompletionCallback = Callable[
    ["Shell", "Context", Tokens, str], Sequence[str] | None
]
