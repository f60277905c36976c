"""
shelltree - An embeddable interactive command shell

shelltree lets a host application register a tree of contexts and commands,
then drives a read-eval loop that resolves typed lines against the current
position in the tree, with relative/absolute paths and tab completion.
"""

from importlib.metadata import version

from shelltree.commands import Command, CompletionResolver
from shelltree.config import ShellConfig
from shelltree.shell import Shell
from shelltree.structure import Context

__version__ = version("shelltree")

__all__ = [
    "__version__",
    "Command",
    "CompletionResolver",
    "Context",
    "Shell",
    "ShellConfig",
]
