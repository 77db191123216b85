import pytest

from devenv_predictor.classifier import NoArgumentYet, NotMatched, PartialArgument, classify
from devenv_predictor.syntax import CommandLineContext, StringLiteral, build_context


@pytest.mark.parametrize(
    "line",
    ["dotnet build", "devenvx A", "msbuild App.sln", "dev env", "", "   ", "Get-ChildItem | "],
)
def test_other_commands_are_not_matched(line: str) -> None:
    assert classify(build_context(line)) == NotMatched()


@pytest.mark.parametrize("line", ["devenv ", "DEVENV ", "DevEnv ", "devenv", "'devenv' "])
def test_bare_command_name_has_no_argument_yet(line: str) -> None:
    assert classify(build_context(line)) == NoArgumentYet()


def test_single_argument_is_partial() -> None:
    assert classify(build_context("devenv foo")) == PartialArgument(prefix="foo", command_prefix_text="devenv ")


def test_partial_argument_keeps_leading_statements() -> None:
    result = classify(build_context("cd src; DevEnv Ap"))

    assert result == PartialArgument(prefix="Ap", command_prefix_text="cd src; DevEnv ")


def test_cursor_inside_argument_uses_whole_token() -> None:
    result = classify(build_context("devenv Apple", cursor=9))

    assert result == PartialArgument(prefix="Apple", command_prefix_text="devenv ")


def test_second_argument_is_not_matched() -> None:
    assert classify(build_context("devenv App.sln /Build")) == NotMatched()
    assert classify(build_context("devenv App.sln /Build", cursor=9)) == NotMatched()


def test_past_first_argument_is_not_matched() -> None:
    assert classify(build_context("devenv App.sln ")) == NotMatched()


def test_cursor_on_command_word_with_argument_is_not_matched() -> None:
    assert classify(build_context("devenv App.sln", cursor=3)) == NotMatched()


def test_expression_command_name_is_not_matched() -> None:
    assert classify(build_context("$devenv A")) == NotMatched()
    assert classify(build_context('"$name" ')) == NotMatched()


def test_node_without_invocation_parent_is_not_matched() -> None:
    orphan = StringLiteral(text="devenv", value="devenv", start=0, end=6)
    context = CommandLineContext(input_text="devenv", cursor=6, token_at_cursor=None, related_asts=(orphan,))

    assert classify(context) == NotMatched()


def test_empty_related_asts_is_not_matched() -> None:
    context = CommandLineContext(input_text="devenv", cursor=6, token_at_cursor=None)

    assert classify(context) == NotMatched()
