"""
Interactive session driving a shelltree command tree.

The Shell owns the root context and the mutable path describing the current
position in the tree. It exposes the registration API of the root context,
dispatches input lines, answers completion requests and runs the read loop.
"""

import logging
import sys
from collections.abc import Callable
from typing import Any, TextIO

from shelltree.builtins import register_builtins
from shelltree.commands.command import Command
from shelltree.commands.completion import CompletionResolver
from shelltree.config import ShellConfig
from shelltree.core.path_utils import format_path, split_tokens
from shelltree.core.types import Action, SessionPath
from shelltree.exceptions import ShellError, TokenizeError
from shelltree.structure.context import Context

logger = logging.getLogger(__name__)

ROOT_CONTEXT_NAME = "root"

# Move to column 0 and clear to the end of the screen
CLEAR_LINE = "\x1b[0G\x1b[J"

LineReader = Callable[[str], str]


class Shell:
    """
    A command shell session over a tree of contexts and commands.

    Params:
        output: Stream receiving everything the session prints, ``sys.stdout`` by default
        config: Session settings; keyword ``options`` override individual fields
        reader: Callable reading one line for a prompt and raising EOFError at
            end of input; defaults to ``input`` with readline completion
    """

    def __init__(
        self,
        output: TextIO | None = None,
        config: ShellConfig | None = None,
        reader: LineReader | None = None,
        **options: Any,
    ):
        config = config or ShellConfig()
        if options:
            config = ShellConfig.model_validate({**config.model_dump(), **options})
        self.config = config
        self.output = output if output is not None else sys.stdout
        self.root: Context | None = Context(ROOT_CONTEXT_NAME)
        self.path: SessionPath = []
        self.running = False
        self._reader = reader
        self._completion = CompletionResolver(self)

        register_builtins(self)

    # Registration passthrough to the root context

    def add_context(self, name: str, **options: Any) -> Context:
        return self._root().add_context(name, **options)

    def remove_context(self, name: str) -> None:
        self._root().remove_context(name)

    def add_command(
        self, name: str, action: Action | None = None, **options: Any
    ) -> Command:
        return self._root().add_command(name, action, **options)

    def remove_command(self, name: str) -> None:
        self._root().remove_command(name)

    def handler(self, name: str, **options: Any) -> Callable[[Action], Action]:
        return self._root().handler(name, **options)

    def context(self, *path: str) -> Context | None:
        return self._root().context(*path)

    def command(self, *path: str) -> Command | None:
        return self._root().command(*path)

    # Session state

    @property
    def current_context(self) -> Context | None:
        return self._root().context(*self.path)

    @property
    def formatted_path(self) -> str:
        return format_path(self.path)

    def stop(self) -> None:
        self.running = False

    def print(self, data: str) -> None:
        self.output.write(str(data))

    def puts(self, data: str = "") -> None:
        self.output.write(f"{data}\n")

    # Dispatch and completion

    def execute(self, line: str) -> Any:
        """
        Tokenize one input line and dispatch it from the current context.

        Blank lines are ignored. A line that cannot be tokenized is reported
        on the output and not dispatched.

        Returns:
            The invoked command's result, otherwise None
        """
        line = line.strip()
        if not line:
            return None

        try:
            tokens = split_tokens(line)
        except TokenizeError as e:
            self.puts(str(e))
            return None

        current = self.current_context
        if current is None:
            raise ShellError(f"Path {self.formatted_path} doesn't resolve")

        logger.debug("Dispatching %s from %s", tokens, self.formatted_path)
        return current.exec(self, tokens)

    def complete(self, text: str, line_buffer: str | None = None) -> list[str]:
        """Return the completion candidates for ``text``; see CompletionResolver."""
        return self._completion.candidates(text, line_buffer)

    # Read loop

    def run(self) -> None:
        """
        Run the read loop until end of input or until a command calls ``stop``.

        Ctrl-C clears the current line and keeps the loop going. Exceptions
        raised by command actions propagate to the caller.
        """
        self.puts(self.config.banner)
        reader = self._reader
        if reader is None:
            self._install_readline()
            reader = self._read_line

        self.running = True
        while self.running:
            if self.root is None:
                raise ShellError("Root context doesn't exist")

            try:
                try:
                    line = reader(f"{self.formatted_path}{self.config.prompt}")
                except EOFError:
                    self.puts()
                    break
                self.execute(line)
            except KeyboardInterrupt:
                self.print(CLEAR_LINE)

        self.running = False

    def _read_line(self, prompt: str) -> str:
        import readline

        line = input(prompt)
        length = readline.get_current_history_length()
        # Empty lines never reach the history
        if not length or readline.get_history_item(length) != line:
            return line

        duplicate = length >= 2 and readline.get_history_item(length - 1) == line
        if not self.config.history or not line.strip() or duplicate:
            readline.remove_history_item(length - 1)
        return line

    def _install_readline(self) -> None:
        import readline

        matches: list[str] = []

        def completer(text: str, state: int) -> str | None:
            if state == 0:
                matches[:] = self.complete(text, readline.get_line_buffer())
            return matches[state] if state < len(matches) else None

        readline.set_completer(completer)
        readline.parse_and_bind("tab: complete")

    def _root(self) -> Context:
        if self.root is None:
            raise ShellError("Root context doesn't exist")
        return self.root
