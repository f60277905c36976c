"""
Tests for the completion resolver.
"""

import pytest


class TestCandidateSet:
    """Names listed when no command callback takes over."""

    def test_root_lists_contexts_then_commands(self, fruit_shell):
        assert fruit_shell.complete("") == [
            "fruit",
            "vegetable",
            "help",
            "quit",
            "path",
            "echo",
            "counter",
        ]

    def test_prefix_filter(self, fruit_shell):
        assert fruit_shell.complete("ve") == ["vegetable"]
        assert fruit_shell.complete("c") == ["counter"]

    def test_nested_includes_globals(self, fruit_shell):
        fruit_shell.path = ["fruit"]
        assert fruit_shell.complete("") == [
            "apple",
            "orange",
            "help",
            "quit",
            "path",
            "echo",
        ]

    def test_aliases_not_listed(self, fruit_shell):
        fruit_shell.path = ["fruit"]
        assert fruit_shell.complete("t") == []

    def test_root_globals_listed_once(self, fruit_shell):
        assert fruit_shell.complete("echo") == ["echo"]

    def test_no_match(self, fruit_shell):
        assert fruit_shell.complete("zzz") == []


class TestCallbackDelegation:
    """A matching command with a completion callback supplies the candidates."""

    def test_callback_candidates(self, fruit_shell):
        seen = []

        @fruit_shell.command("counter").completion
        def numbers(session, context, tokens, text):
            seen.append((session, context.name, tokens, text))
            return [str(i) for i in range(1, 11)]

        assert fruit_shell.complete("", "counter ") == [str(i) for i in range(1, 11)]
        assert fruit_shell.complete("1", "COUNTER 1") == ["1", "10"]
        assert seen[0] == (fruit_shell, "root", ["counter"], "")
        assert seen[1][2] == ["counter", "1"]

    def test_callback_via_alias(self, fruit_shell):
        fruit_shell.command("fruit", "orange").completion(
            lambda session, context, tokens, text: ["peeled", "whole"]
        )
        fruit_shell.path = ["fruit"]
        assert fruit_shell.complete("p", "tangerine p") == ["peeled"]

    def test_callback_returning_none(self, fruit_shell):
        fruit_shell.command("counter").completion(lambda *args: None)
        assert fruit_shell.complete("", "counter ") == []

    def test_command_without_callback_lists_names(self, fruit_shell):
        fruit_shell.path = ["fruit"]
        assert fruit_shell.complete("o", "apple o") == ["orange"]

    def test_global_callback_from_nested_context(self, fruit_shell):
        fruit_shell.command("echo").completion(lambda *args: ["hello", "world"])
        fruit_shell.path = ["vegetable", "tasty"]
        assert fruit_shell.complete("w", "echo w") == ["world"]

    def test_callback_not_used_outside_visibility(self, fruit_shell):
        fruit_shell.command("counter").completion(lambda *args: ["1"])
        fruit_shell.path = ["fruit"]
        assert fruit_shell.complete("", "counter ") == [
            "apple",
            "orange",
            "help",
            "quit",
            "path",
            "echo",
        ]


class TestReadOnly:
    """Completion never changes the session."""

    @pytest.mark.parametrize("line", ["", "fruit", "/vegetable/tas", "..", "counter 1"])
    def test_path_untouched(self, fruit_shell, output, line):
        fruit_shell.path = ["vegetable"]
        fruit_shell.complete(line.split(" ")[-1], line)
        assert fruit_shell.path == ["vegetable"]
        assert output.getvalue() == ""

    def test_unterminated_quote(self, fruit_shell):
        fruit_shell.command("echo").completion(lambda *args: ["'quoted"])
        assert fruit_shell.complete("'q", "echo 'q") == ["'quoted"]
