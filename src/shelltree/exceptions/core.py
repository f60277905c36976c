"""
Exception classes for the shelltree command tree.

This module defines the error taxonomy used by context/command registration,
dispatch and session management. Registration errors are raised to the
embedding application; dispatch errors are rendered through the session
output and never escape the dispatcher.
"""


class ShellTreeError(Exception):
    """Base exception for all shelltree errors."""

    pass


class InvalidNameError(ShellTreeError):
    """Raised when a context or command name contains a disallowed character."""

    def __init__(self, kind: str, name: str):
        """
        Initialize the exception.

        Params:
            kind: What was being registered ("Context" or "Command")
            name: The rejected name
        """
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} {name} contains invalid characters")


class DuplicateNameError(ShellTreeError):
    """Raised when a name collides with an existing sibling context or command."""

    def __init__(self, kind: str, name: str, owner: str):
        """
        Initialize the exception.

        Params:
            kind: Kind of the existing entry ("Context" or "Command")
            name: The colliding name
            owner: Name of the context that already holds the entry
        """
        self.kind = kind
        self.name = name
        self.owner = owner
        super().__init__(f"{kind} {name} already exists in context {owner}")


class NotFoundError(ShellTreeError):
    """Raised when removing a context or command that does not exist."""

    def __init__(self, kind: str, name: str, owner: str):
        """
        Initialize the exception.

        Params:
            kind: Kind of the missing entry ("Context" or "Command")
            name: The requested name
            owner: Name of the context that was searched
        """
        self.kind = kind
        self.name = name
        self.owner = owner
        super().__init__(f"{kind} {name} doesn't exist in context {owner}")


class UnrecognizedCommandError(ShellTreeError):
    """Dispatch could not resolve a path or find a matching command.

    Rendered as a user-visible message by the dispatcher, not raised.
    """

    def __init__(self, expression: str):
        self.expression = expression
        super().__init__(f"Unrecognized command: {expression}")


class ArityError(ShellTreeError):
    """A command was invoked with fewer arguments than it declares mandatory.

    Rendered as the command usage line, not raised.
    """

    def __init__(self, command_name: str, usage: str, supplied: int, required: int):
        self.command_name = command_name
        self.usage = usage
        self.supplied = supplied
        self.required = required
        super().__init__(f"Usage: {usage}")


class TokenizeError(ShellTreeError):
    """Raised when an input line cannot be split into shell words."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Cannot parse line: {reason}")


class ShellError(ShellTreeError):
    """Raised when the session itself is misconfigured."""

    pass
