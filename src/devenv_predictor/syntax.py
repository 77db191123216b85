"""Syntax view of a partially typed command line."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TypeAlias

WORD_RE = re.compile(r"""(?:'[^']*'?|"(?:[^"`]|`.)*"?|[^\s|;&'"]+|&(?!&))+""")
OPERATOR_RE = re.compile(r"&&|\|\||[|;]")
PIECE_RE = re.compile(r"""'[^']*'?|"(?:[^"`]|`.)*"?|[^'"]+""")
EXPRESSION_OPENERS = ("$", "(", "{", "@(", "@{")


@dataclass(frozen=True)
class Token:
    """One lexical word of the input line."""

    text: str
    start: int
    end: int


@dataclass(eq=False)
class StringLiteral:
    """Constant command element such as `devenv` or `'My App'`."""

    text: str
    value: str
    start: int
    end: int
    parent: CommandInvocation | None = field(default=None, repr=False)


@dataclass(eq=False)
class ExpressionElement:
    """Command element whose value is only known at run time."""

    text: str
    start: int
    end: int
    parent: CommandInvocation | None = field(default=None, repr=False)


CommandElement: TypeAlias = StringLiteral | ExpressionElement


@dataclass(eq=False)
class CommandInvocation:
    """One simple command: a name followed by its arguments."""

    elements: tuple[CommandElement, ...]
    start: int
    end: int
    parent: ScriptInput | None = field(default=None, repr=False)


@dataclass(eq=False)
class ScriptInput:
    """The whole input line split into statements."""

    text: str
    statements: tuple[CommandInvocation, ...]
    parent: None = field(default=None, repr=False)


SyntaxNode: TypeAlias = ScriptInput | CommandInvocation | CommandElement


@dataclass(frozen=True)
class CommandLineContext:
    """Everything a predictor knows about the line at request time."""

    input_text: str
    cursor: int
    token_at_cursor: Token | None
    related_asts: tuple[SyntaxNode, ...] = ()


def build_context(text: str, cursor: int | None = None) -> CommandLineContext:
    """Build the syntax view of `text` around `cursor` (defaults to end of line).

    `related_asts` runs from the script node down to the command element
    nearest the cursor. `token_at_cursor` is the argument the cursor is in or
    directly after; the command word itself never counts as one.
    """

    if cursor is None or cursor > len(text):
        cursor = len(text)
    cursor = max(cursor, 0)

    script, regions = _parse(text)
    invocation = None
    for region_start, region_end, statement in regions:
        if region_start <= cursor <= region_end:
            invocation = statement
            break

    if invocation is None:
        return CommandLineContext(input_text=text, cursor=cursor, token_at_cursor=None, related_asts=(script,))

    element = _element_near(invocation, cursor)
    token_at_cursor = None
    for argument in invocation.elements[1:]:
        if argument.start <= cursor <= argument.end:
            token_at_cursor = Token(text=argument.text, start=argument.start, end=argument.end)
            break

    return CommandLineContext(
        input_text=text,
        cursor=cursor,
        token_at_cursor=token_at_cursor,
        related_asts=(script, invocation, element),
    )


def parse_script(text: str) -> ScriptInput:
    """Split `text` into command invocations."""

    script, _ = _parse(text)
    return script


def _parse(text: str) -> tuple[ScriptInput, list[tuple[int, int, CommandInvocation | None]]]:
    statements: list[CommandInvocation] = []
    regions: list[tuple[int, int, CommandInvocation | None]] = []
    region_start = 0
    for operator in [*OPERATOR_RE.finditer(_mask_words(text)), None]:
        region_end = operator.start() if operator is not None else len(text)
        invocation = _invocation(text, region_start, region_end)
        if invocation is not None:
            statements.append(invocation)
        regions.append((region_start, region_end, invocation))
        if operator is not None:
            region_start = operator.end()

    script = ScriptInput(text=text, statements=tuple(statements))
    for statement in statements:
        statement.parent = script
    return script, regions


def _mask_words(text: str) -> str:
    # Blank out words so operators inside quotes are not seen as separators.
    return WORD_RE.sub(lambda match: " " * len(match.group(0)), text)


def _invocation(text: str, start: int, end: int) -> CommandInvocation | None:
    elements = [_element(match.group(0), match.start(), match.end()) for match in WORD_RE.finditer(text, start, end)]
    if not elements:
        return None
    invocation = CommandInvocation(elements=tuple(elements), start=elements[0].start, end=elements[-1].end)
    for element in elements:
        element.parent = invocation
    return invocation


def _element(text: str, start: int, end: int) -> CommandElement:
    if text.startswith(EXPRESSION_OPENERS):
        return ExpressionElement(text=text, start=start, end=end)

    value: list[str] = []
    for piece in PIECE_RE.findall(text):
        if piece.startswith("'"):
            value.append(piece[1:-1] if len(piece) > 1 and piece.endswith("'") else piece[1:])
            continue
        if "$" in piece:
            return ExpressionElement(text=text, start=start, end=end)
        if piece.startswith('"'):
            body = piece[1:-1] if len(piece) > 1 and piece.endswith('"') else piece[1:]
            value.append(re.sub(r"`(.)", r"\1", body))
            continue
        value.append(piece)
    return StringLiteral(text=text, value="".join(value), start=start, end=end)


def _element_near(invocation: CommandInvocation, cursor: int) -> CommandElement:
    nearest = invocation.elements[0]
    for element in invocation.elements:
        if element.start > cursor:
            break
        nearest = element
    return nearest
