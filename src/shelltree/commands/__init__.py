"""
shelltree command model and completion.

This package contains the Command leaf type, its registration options and
parameter parsing, and the completion resolver used by the line editor.
"""

from shelltree.commands.command import Command, CommandOptions, Param, parse_params
from shelltree.commands.completion import CompletionResolver

__all__ = [
    "Command",
    "CommandOptions",
    "CompletionResolver",
    "Param",
    "parse_params",
]
