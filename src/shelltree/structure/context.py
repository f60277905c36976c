"""
Context tree and dispatcher for shelltree.

A Context is a namespace node holding ordered child contexts and ordered
child commands. The root context of a session owns the whole tree; the
session only keeps the list of context names leading to its current
position.

``Context.exec`` is the dispatcher: it resolves the first token of an input
line against the tree and the session path, then either moves the session
into a context (the only path change that persists) or invokes a command
with the path restored to its pre-dispatch value.
"""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from shelltree.commands.command import Command, CommandOptions
from shelltree.core.path_utils import (
    PARENT_SEGMENT,
    PathExpression,
    has_invalid_chars,
    normalize_name,
)
from shelltree.core.types import Action, Tokens
from shelltree.exceptions import (
    DuplicateNameError,
    InvalidNameError,
    NotFoundError,
    UnrecognizedCommandError,
)

if TYPE_CHECKING:
    from shelltree.shell import Shell

logger = logging.getLogger(__name__)


class ContextOptions(BaseModel):
    """Registration options accepted by ``Context.add_context``."""

    model_config = ConfigDict(extra="forbid")

    description: str | None = None


class Context:
    """
    A namespace node in the command tree.

    Attributes:
        name: Lower-cased identifier, unique among siblings
        description: Free text shown by ``help``
        contexts: Child contexts in registration order
        commands: Child commands in registration order
    """

    def __init__(self, name: str, description: str | None = None):
        self.name = normalize_name(name)
        self.description = description
        self.contexts: list[Context] = []
        self.commands: list[Command] = []

    # Registration

    def add_context(self, name: str, **options: Any) -> "Context":
        """
        Create and append an empty child context.

        Params:
            name: Identifier of the new context
            **options: ContextOptions fields (``description``)

        Returns:
            The created Context

        Raises:
            InvalidNameError: If the name contains ``/``, ``.`` or whitespace
            DuplicateNameError: If a sibling context or command uses the name
        """
        self._check_name("Context", name)
        name = normalize_name(name)
        self._check_collision(name)

        opts = ContextOptions.model_validate(options)
        context = Context(name, description=opts.description)
        self.contexts.append(context)
        logger.debug("Added context %s to %s", name, self.name)
        return context

    def remove_context(self, name: str) -> None:
        """
        Remove a child context together with its subtree.

        Raises:
            NotFoundError: If no child context has this name
        """
        name = normalize_name(name)
        if self._find_context(name) is None:
            raise NotFoundError("Context", name, self.name)

        self.contexts = [c for c in self.contexts if c.name != name]
        logger.debug("Removed context %s from %s", name, self.name)

    def add_command(
        self, name: str, action: Action | None = None, **options: Any
    ) -> Command:
        """
        Create and append a command.

        Params:
            name: Identifier of the new command
            action: Callable invoked as ``action(session, context, tokens)``
            **options: CommandOptions fields (``description``, ``aliases``,
                ``params``, ``global``/``global_``)

        Returns:
            The created Command

        Raises:
            InvalidNameError: If the name or an alias contains a disallowed character
            DuplicateNameError: If the name or an alias is already used in this context
        """
        self._check_name("Command", name)
        opts = CommandOptions.model_validate(options)
        for alias in opts.aliases:
            self._check_name("Command", alias)

        command = Command(name, action, opts)
        for identifier in command.identifiers:
            self._check_collision(identifier)

        self.commands.append(command)
        logger.debug(
            "Added command %s to %s (aliases=%s, global=%s)",
            command.name,
            self.name,
            command.aliases,
            command.global_,
        )
        return command

    def handler(self, name: str, **options: Any) -> Callable[[Action], Action]:
        """
        Decorator form of ``add_command``.

        Example:
            @root.handler("echo", params=["[text]"], global_=True)
            def echo(session, context, tokens):
                session.puts(" ".join(tokens[1:]))
        """

        def decorator(action: Action) -> Action:
            self.add_command(name, action, **options)
            return action

        return decorator

    def remove_command(self, name: str) -> None:
        """
        Remove the first command whose name or alias matches.

        Raises:
            NotFoundError: If no command matches
        """
        name = normalize_name(name)
        for index, command in enumerate(self.commands):
            if command.match(name):
                del self.commands[index]
                logger.debug("Removed command %s from %s", command.name, self.name)
                return
        raise NotFoundError("Command", name, self.name)

    # Lookup

    def context(self, *path: str) -> "Context | None":
        """
        Walk child contexts along a path.

        Params:
            *path: Context identifiers, relative to this context

        Returns:
            The final Context, self for an empty path, or None as soon as a
            segment does not resolve
        """
        current = self
        for segment in path:
            found = current._find_context(normalize_name(segment))
            if found is None:
                return None
            current = found
        return current

    def command(self, *path: str) -> Command | None:
        """
        Find a command by path; the last segment is matched by name or alias.

        Returns:
            The Command, or None when the path or the command does not resolve
        """
        if not path:
            return None

        owner = self.context(*path[:-1])
        if owner is None:
            return None
        return owner._find_command(path[-1])

    def global_commands(self) -> list[Command]:
        """Commands of this context flagged as global."""
        return [c for c in self.commands if c.is_global()]

    # Dispatch

    def exec(self, session: "Shell", tokens: Tokens) -> Any:
        """
        Resolve and run one tokenized input line.

        Navigation into a context (or ``..``) moves the session path and the
        move is kept. Command invocation never changes the session's resting
        position: the path is restored after the command returns or raises.
        Resolution failures print ``Unrecognized command: <expr>`` and leave
        the path as it was before the call.

        Params:
            session: Session holding the root context and the mutable path
            tokens: Non-empty token list, ``tokens[0]`` already lower-cased

        Returns:
            The command's result, or None for navigation and failures
        """
        expression = PathExpression.parse(tokens[0])
        if expression.is_root:
            session.path.clear()
            logger.debug("Moved to root")
            return None

        previous_path = list(session.path)
        if expression.absolute:
            session.path.clear()

        for segment in expression.parents:
            if segment == PARENT_SEGMENT:
                if session.path:
                    session.path.pop()
            elif segment:
                session.path.append(segment)

        last = expression.last
        if last == PARENT_SEGMENT:
            if session.path:
                session.path.pop()
            if session.root.context(*session.path) is None:
                return self._unrecognized(session, expression, previous_path)
            logger.debug("Moved to %s", session.formatted_path)
            return None

        current = session.root.context(*session.path)
        if current is None:
            return self._unrecognized(session, expression, previous_path)

        child = current._find_context(last)
        if child is not None:
            session.path.append(child.name)
            logger.debug("Moved to %s", session.formatted_path)
            return None

        candidates = current.commands + session.root.global_commands()
        for command in candidates:
            if not command.match(last):
                continue
            try:
                return command.exec(session, current, tokens)
            finally:
                session.path = previous_path

        return self._unrecognized(session, expression, previous_path)

    # Helpers

    def _unrecognized(
        self, session: "Shell", expression: PathExpression, previous_path: list[str]
    ) -> None:
        error = UnrecognizedCommandError(expression.original)
        logger.debug("%s; restoring path %s", error, previous_path)
        session.puts(str(error))
        session.path = previous_path
        return None

    def _find_context(self, name: str) -> "Context | None":
        for context in self.contexts:
            if context.name == name:
                return context
        return None

    def _find_command(self, identifier: str) -> Command | None:
        for command in self.commands:
            if command.match(identifier):
                return command
        return None

    def _check_name(self, kind: str, name: str) -> None:
        if not name or has_invalid_chars(name):
            raise InvalidNameError(kind, name)

    def _check_collision(self, name: str) -> None:
        if self._find_context(name) is not None:
            raise DuplicateNameError("Context", name, self.name)
        if self._find_command(name) is not None:
            raise DuplicateNameError("Command", name, self.name)

    def __repr__(self) -> str:
        return (
            f"Context({self.name!r}, contexts={len(self.contexts)}, "
            f"commands={len(self.commands)})"
        )

    def __str__(self) -> str:
        return self.name
