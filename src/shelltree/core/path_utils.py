"""
Path and token utilities for shelltree.

This module provides the tokenizer that turns a raw input line into shell
words, the parser for slash separated path expressions, and the name rules
shared by contexts and commands.
"""

import re
import shlex

from attrs import frozen

from shelltree.exceptions import TokenizeError

PATH_SEPARATOR = "/"
PARENT_SEGMENT = ".."

# Names may not contain the separator, a dot or whitespace
_INVALID_NAME_CHARS = re.compile(r"[/.\s]")


def has_invalid_chars(name: str) -> bool:
    """Check whether a context or command name contains a disallowed character."""
    return bool(_INVALID_NAME_CHARS.search(name))


def normalize_name(name: str) -> str:
    """Return the canonical (lower case) form of an identifier."""
    return str(name).lower()


def split_tokens(line: str) -> list[str]:
    """
    Split an input line into shell words.

    Quoting and escaping follow POSIX shell word splitting. The first token
    is lower-cased so that path and command matching are case-insensitive;
    arguments keep their original casing.

    Params:
        line: Raw input line

    Returns:
        List of tokens, empty for a blank line

    Raises:
        TokenizeError: If the line has an unterminated quote or escape
    """
    try:
        tokens = shlex.split(line)
    except ValueError as e:
        raise TokenizeError(line, str(e)) from e

    if tokens:
        tokens[0] = tokens[0].lower()
    return tokens


def format_path(path: list[str]) -> str:
    """Render a session path as ``/a/b``."""
    return PATH_SEPARATOR + PATH_SEPARATOR.join(path)


@frozen
class PathExpression:
    """
    A parsed ``tokens[0]`` path expression.

    ``segments`` keeps empty segments produced by collapsed slashes in the
    middle of the expression; leading and trailing empties are dropped.
    An expression without any segment (``/`` or ``""``) denotes the root.
    """

    original: str
    segments: tuple[str, ...]
    absolute: bool

    @classmethod
    def parse(cls, expression: str) -> "PathExpression":
        """
        Parse a slash separated path expression.

        Params:
            expression: The first input token, already lower-cased

        Returns:
            PathExpression with its segments and absolute flag

        Examples:
            "/fruit/apple" -> segments ("fruit", "apple"), absolute
            "a//b/" -> segments ("a", "", "b"), relative
            "/" -> segments (), absolute
        """
        absolute = expression.startswith(PATH_SEPARATOR)
        segments = expression.split(PATH_SEPARATOR)
        if absolute:
            segments = segments[1:]
        while segments and not segments[-1]:
            segments.pop()

        return cls(original=expression, segments=tuple(segments), absolute=absolute)

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def parents(self) -> tuple[str, ...]:
        """Every segment except the last."""
        return self.segments[:-1]

    @property
    def last(self) -> str | None:
        return self.segments[-1] if self.segments else None
