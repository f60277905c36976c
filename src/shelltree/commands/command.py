"""
Command model for shelltree.

A Command is a named leaf of the command tree. It carries its declared
parameters (used for usage display and argument-count validation only),
optional aliases, a global visibility flag and the bound action.
"""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from attrs import frozen
from pydantic import BaseModel, ConfigDict, Field, field_validator

from shelltree.core.path_utils import normalize_name
from shelltree.core.types import Action, CompletionCallback, Tokens
from shelltree.exceptions import ArityError

if TYPE_CHECKING:
    from shelltree.shell import Shell
    from shelltree.structure.context import Context

logger = logging.getLogger(__name__)


@frozen
class Param:
    """A declared command parameter such as ``<n>`` or ``[text]``."""

    token: str
    mandatory: bool

    @classmethod
    def parse(cls, token: str) -> "Param | None":
        """
        Parse a parameter declaration token.

        Params:
            token: Display token, ``<name>`` for mandatory or ``[name]`` for optional

        Returns:
            Param instance, or None when the token uses neither form
        """
        if len(token) > 2 and token.startswith("<") and token.endswith(">"):
            return cls(token=token, mandatory=True)
        if len(token) > 2 and token.startswith("[") and token.endswith("]"):
            return cls(token=token, mandatory=False)
        return None


def parse_params(tokens: Iterable[str]) -> dict[str, bool]:
    """
    Build the ordered parameter mapping of a command.

    Params:
        tokens: Declared parameter tokens in display order

    Returns:
        Mapping of token to mandatory flag; unrecognized forms are dropped
    """
    params: dict[str, bool] = {}
    for token in tokens:
        param = Param.parse(token)
        if param is None:
            logger.debug("Ignoring parameter declaration %r", token)
            continue
        params[param.token] = param.mandatory
    return params


class CommandOptions(BaseModel):
    """Registration options accepted by ``Context.add_command``."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    description: str | None = None
    aliases: list[str] = Field(default_factory=list)
    params: list[str] = Field(default_factory=list)
    global_: bool = Field(default=False, alias="global")

    @field_validator("aliases")
    @classmethod
    def _normalize_aliases(cls, aliases: list[str]) -> list[str]:
        normalized: list[str] = []
        for alias in aliases:
            alias = normalize_name(alias)
            if alias not in normalized:
                normalized.append(alias)
        return normalized


class Command:
    """
    A leaf action in the command tree.

    Attributes:
        name: Lower-cased identifier, unique within the owning context
        aliases: Additional lower-cased identifiers resolving to this command
        params: Ordered mapping of parameter token to mandatory flag
        global_: Whether the command is visible from every context
        description: Free text shown by ``help``
        action: Callable invoked as ``action(session, context, tokens)``
        completion_callback: Optional callable producing completion candidates
    """

    def __init__(
        self,
        name: str,
        action: Action | None = None,
        options: CommandOptions | None = None,
    ):
        options = options or CommandOptions()
        self.name = normalize_name(name)
        self.action = action
        self.description = options.description
        self.aliases: list[str] = list(options.aliases)
        self.params = parse_params(options.params)
        self.global_ = options.global_
        self.completion_callback: CompletionCallback | None = None

    @property
    def identifiers(self) -> list[str]:
        """Name followed by every alias."""
        return [self.name, *self.aliases]

    @property
    def mandatory_count(self) -> int:
        """Number of parameters declared as ``<mandatory>``."""
        return sum(1 for mandatory in self.params.values() if mandatory)

    @property
    def usage(self) -> str:
        """Name followed by every declared parameter token."""
        return " ".join([self.name, *self.params])

    def is_global(self) -> bool:
        """Whether the command is invocable from every context."""
        return self.global_

    def match(self, identifier: str | None) -> bool:
        """Check whether an identifier equals the name or one of the aliases."""
        if identifier is None:
            return False
        identifier = normalize_name(identifier)
        return identifier == self.name or identifier in self.aliases

    def completion(self, callback: CompletionCallback) -> CompletionCallback:
        """
        Attach a completion callback.

        Returns the callback unchanged so the method can be used as a decorator.
        """
        self.completion_callback = callback
        return callback

    def print_usage(self, session: "Shell") -> None:
        session.puts(f"Usage: {self.usage}")

    def exec(self, session: "Shell", context: "Context", tokens: Tokens) -> Any:
        """
        Validate the argument count and invoke the bound action.

        When fewer arguments than mandatory parameters are supplied, the usage
        line is written to the session output and the action is not invoked.
        Exceptions raised by the action propagate to the caller.

        Params:
            session: The session dispatching the command
            context: The context the command was resolved from
            tokens: Full token list, ``tokens[0]`` being the command expression

        Returns:
            The action result, or None when validation fails
        """
        supplied = len(tokens) - 1
        if self.mandatory_count > supplied:
            error = ArityError(self.name, self.usage, supplied, self.mandatory_count)
            logger.debug(
                "Command %s needs %d arguments, got %d",
                self.name,
                error.required,
                error.supplied,
            )
            session.puts(str(error))
            return None

        if self.action is None:
            return None

        logger.debug("Executing command %s with %d arguments", self.name, supplied)
        return self.action(session, context, tokens)

    def __repr__(self) -> str:
        return f"Command({self.name!r}, aliases={self.aliases!r}, global={self.global_})"

    def __str__(self) -> str:
        return self.name
