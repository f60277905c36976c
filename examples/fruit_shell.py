"""
Example shell with a few contexts and commands.

Run with ``python examples/fruit_shell.py`` and try ``help``, ``fruit``,
``..``, ``/vegetable/tasty/potato`` and tab completion.
"""

import logging

from shelltree import Shell

logging.basicConfig(level=logging.WARNING)

shell = Shell(prompt=" CLI> ", banner="Example banner")


@shell.handler("counter", description="Counter", params=["<n>"])
def counter(session, context, tokens):
    n = int(tokens[1])
    for i in range(n):
        session.print(f"{i} ")
    session.puts()


@shell.command("counter").completion
def counter_completion(session, context, tokens, text):
    return [str(i) for i in range(1, 11)]


# Commands registered on the root can be visible in every context
shell.add_command(
    "echo",
    lambda session, context, tokens: session.puts(" ".join(tokens[1:])),
    description="Echo",
    params=["[text]"],
    global_=True,
)

fruit = shell.add_context("fruit", description="Fruits")
fruit.add_command(
    "apple",
    lambda session, context, tokens: session.puts("I'm an apple!"),
    description="Apple",
)
fruit.add_command(
    "orange",
    lambda session, context, tokens: session.puts("Sometimes I'm an orange or a tangerine"),
    description="Orange or tangerine",
    aliases=["tangerine"],
)

shell.add_context("vegetable", description="Vegetables")
shell.context("vegetable").add_context("tasty")
shell.context("vegetable", "tasty").add_command(
    "potato", lambda session, context, tokens: session.puts("Yummy!")
)
shell.command("vegetable", "tasty", "potato").completion(
    lambda session, context, tokens, text: ["one", "two"]
)

# Contexts and commands can be removed at any time
shell.add_context("useless")
shell.context("useless").add_command("test")
shell.context("useless").remove_command("test")
shell.remove_context("useless")

if __name__ == "__main__":
    shell.run()
