"""Decide whether a command line is a `devenv` invocation worth completing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from devenv_predictor.syntax import CommandInvocation, CommandLineContext, StringLiteral

TRAPPED_COMMAND_NAME = "devenv"


@dataclass(frozen=True)
class NotMatched:
    """The line is not a `devenv` call this predictor can complete."""


@dataclass(frozen=True)
class NoArgumentYet:
    """Only the command name has been typed."""


@dataclass(frozen=True)
class PartialArgument:
    """One argument is being typed.

    `command_prefix_text` is the input line up to, but not including, the
    argument, so a suggestion is `command_prefix_text + file_name`.
    """

    prefix: str
    command_prefix_text: str


ClassificationResult: TypeAlias = NotMatched | NoArgumentYet | PartialArgument

NOT_MATCHED = NotMatched()
NO_ARGUMENT_YET = NoArgumentYet()


def classify(context: CommandLineContext) -> ClassificationResult:
    """Classify the command invocation under the cursor. Never raises."""

    if not context.related_asts:
        return NOT_MATCHED

    match context.related_asts[-1].parent:
        case CommandInvocation(elements=[StringLiteral(value=name), *arguments]) if _is_trapped(name):
            pass
        case _:
            return NOT_MATCHED

    if context.token_at_cursor is None:
        return NO_ARGUMENT_YET if not arguments else NOT_MATCHED

    match arguments:
        case [argument]:
            return PartialArgument(
                prefix=argument.text,
                command_prefix_text=context.input_text[: argument.start],
            )
        case _:
            return NOT_MATCHED


def _is_trapped(name: str) -> bool:
    return name.casefold() == TRAPPED_COMMAND_NAME
