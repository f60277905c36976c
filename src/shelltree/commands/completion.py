"""
Tab completion for shelltree sessions.

The resolver is called by the line editor while a line is being typed. It
only reads the tree and the session path, so it is safe to call at any
moment, including re-entrantly before a line is dispatched.
"""

import logging
from typing import TYPE_CHECKING

from shelltree.commands.command import Command
from shelltree.core.path_utils import split_tokens
from shelltree.exceptions import TokenizeError

if TYPE_CHECKING:
    from shelltree.shell import Shell
    from shelltree.structure.context import Context

logger = logging.getLogger(__name__)


class CompletionResolver:
    """Produces completion candidates for the current position of a session."""

    def __init__(self, session: "Shell"):
        self.session = session

    def candidates(self, text: str, line_buffer: str | None = None) -> list[str]:
        """
        Compute the completion candidates for an in-progress line.

        Params:
            text: The text being completed; candidates must start with it
            line_buffer: The whole line typed so far, defaults to ``text``

        Returns:
            Candidate strings starting with ``text``
        """
        if line_buffer is None:
            line_buffer = text

        context = self.session.current_context
        if context is None:
            return []

        tokens = self._tokens(line_buffer)
        entries = self._entries(context)

        first = tokens[0] if tokens else None
        command = next(
            (
                e
                for e in entries
                if isinstance(e, Command)
                and e.completion_callback is not None
                and e.match(first)
            ),
            None,
        )

        if command is not None:
            logger.debug("Delegating completion to command %s", command.name)
            listed = command.completion_callback(self.session, context, tokens, text)
            if listed is None:
                return []
        else:
            listed = [e.name for e in entries]

        return [str(c) for c in listed if str(c).startswith(text)]

    def _entries(self, context: "Context") -> list["Context | Command"]:
        entries: list[Context | Command] = []
        entries += context.contexts
        entries += context.commands
        if self.session.path:
            entries += self.session.root.global_commands()
        return entries

    @staticmethod
    def _tokens(line_buffer: str) -> list[str]:
        try:
            return split_tokens(line_buffer)
        except TokenizeError:
            # An open quote is normal while typing
            tokens = line_buffer.split()
            if tokens:
                tokens[0] = tokens[0].lower()
            return tokens
