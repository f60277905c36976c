"""
Command tree structure.

This package holds the Context namespace node together with the dispatcher
that resolves input lines against the tree.
"""

from shelltree.structure.context import Context, ContextOptions

__all__ = [
    "Context",
    "ContextOptions",
]
