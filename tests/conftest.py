"""
Shared test fixtures and utilities for the shelltree test suite.
"""

import io

import pytest

from shelltree import Shell


@pytest.fixture
def output():
    """In-memory stream used as the session output sink."""
    return io.StringIO()


@pytest.fixture
def shell(output):
    """Shell with built-in commands, writing to the ``output`` fixture."""
    return Shell(output=output)


@pytest.fixture
def fruit_shell(shell):
    """Shell populated with the example tree used across dispatch tests.

    Tree:
        /            echo [text] (global), counter <n>
        /fruit       apple, orange (alias tangerine)
        /vegetable/tasty  potato

    Every action records ``(command, context, tokens)`` in ``shell.calls``.
    """
    shell.calls = []

    def recorder(name):
        def action(session, context, tokens):
            session.calls.append((name, context.name, list(tokens)))
            return name

        return action

    def echo(session, context, tokens):
        session.calls.append(("echo", context.name, list(tokens)))
        session.puts(" ".join(tokens[1:]))

    shell.add_command(
        "echo", echo, description="Echo", params=["[text]"], global_=True
    )
    shell.add_command(
        "counter", recorder("counter"), description="Counter", params=["<n>"]
    )

    fruit = shell.add_context("fruit", description="Fruits")
    fruit.add_command("apple", recorder("apple"), description="Apple")
    fruit.add_command(
        "orange",
        recorder("orange"),
        description="Orange or tangerine",
        aliases=["tangerine"],
    )

    vegetable = shell.add_context("vegetable", description="Vegetables")
    tasty = vegetable.add_context("tasty")
    tasty.add_command("potato", recorder("potato"))
    return shell
