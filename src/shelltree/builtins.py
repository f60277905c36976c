"""
Built-in global commands registered on the root context of every Shell.
"""

from typing import TYPE_CHECKING

from shelltree.commands.command import Command
from shelltree.core.types import Tokens
from shelltree.structure.context import Context

if TYPE_CHECKING:
    from shelltree.shell import Shell

HELP_ROW = " {name:<25} {description}"


def _help(session: "Shell", context: Context, tokens: Tokens) -> None:
    commands: list[Command] = []
    if session.path:
        commands += session.root.global_commands()
    commands += context.commands
    commands.sort(key=lambda c: c.name)
    contexts = sorted(context.contexts, key=lambda c: c.name)

    if len(tokens) > 1:
        command = next((c for c in commands if c.match(tokens[1])), None)
        if command is None:
            session.puts(f"Unknown command {tokens[1]}")
            return
        if command.description is not None:
            session.puts(command.description)
        session.print(" ")
        command.print_usage(session)
        return

    for child in contexts:
        session.puts(
            HELP_ROW.format(name=f"[{child.name}]", description=child.description or "")
        )
    for command in commands:
        session.puts(
            HELP_ROW.format(
                name=" ".join([command.name, *command.params]),
                description=command.description or "",
            )
        )


def _quit(session: "Shell", context: Context, tokens: Tokens) -> None:
    session.stop()


def _path(session: "Shell", context: Context, tokens: Tokens) -> None:
    session.puts(session.formatted_path)


def register_builtins(session: "Shell") -> None:
    """Add the built-in commands enabled in the session config to its root."""
    config = session.config
    root = session.root
    if config.builtin_help:
        root.add_command(
            "help",
            _help,
            aliases=["?"],
            description="This help",
            params=["[command]"],
            global_=True,
        )
    if config.builtin_quit:
        root.add_command(
            "quit", _quit, aliases=["exit"], description="Quit", global_=True
        )
    if config.builtin_path:
        root.add_command("path", _path, description="Show path", global_=True)
