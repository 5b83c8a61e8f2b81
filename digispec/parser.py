"""Structural validation of a tokenised digispec description."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum, auto

from digispec.tokenizer import Token, TokenType


class ArgumentType(Enum):
    """What kind of token a command argument expects."""

    VALUE = auto()
    KEYWORD = auto()
    IDENTIFIER = auto()
    NONE = auto()


class ArgumentOption(Enum):
    """Flags qualifying a command argument."""

    REQUIRED = auto()
    OPTIONAL = auto()
    MULTIPLE = auto()
    DECLARATIVE = auto()
    CAPTURING = auto()


@dataclass(frozen=True)
class Argument:
    """One argument of a registered command."""

    name: str
    type: ArgumentType
    configs: tuple[ArgumentOption, ...] | None = None
    values: tuple[str, ...] | None = None
    default: str | None = None


@dataclass(frozen=True)
class Command:
    """A registered command and the arguments it takes."""

    name: str
    arguments: tuple[Argument, ...] = ()


class ParseError(ValueError):
    """Raised when a token stream is not a valid description."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


_REQ = ArgumentOption.REQUIRED
_MULTI = ArgumentOption.MULTIPLE
_DECL = ArgumentOption.DECLARATIVE
_CAPT = ArgumentOption.CAPTURING

REGISTERED_COMMANDS: tuple[Command, ...] = (
    Command(
        "begin",
        (
            Argument("type", ArgumentType.KEYWORD, (_REQ,), ("mod", "definition")),
            Argument("name", ArgumentType.IDENTIFIER, (_REQ, _DECL, _CAPT)),
        ),
    ),
    Command("end", (Argument("name", ArgumentType.IDENTIFIER, (_REQ,)),)),
    Command("display", (Argument("value", ArgumentType.VALUE, (_REQ,)),)),
    Command(
        "input",
        (Argument("variable", ArgumentType.IDENTIFIER, (_REQ, _MULTI, _DECL)),),
    ),
    Command("output", (Argument("value", ArgumentType.VALUE, (_REQ, _MULTI)),)),
    Command(
        "alias",
        (
            Argument("type", ArgumentType.IDENTIFIER, (_REQ,)),
            Argument("name", ArgumentType.IDENTIFIER, (_REQ,)),
        ),
    ),
    Command(
        "line",
        (
            Argument("start", ArgumentType.IDENTIFIER, (_REQ,)),
            Argument("end", ArgumentType.IDENTIFIER, (_REQ,)),
        ),
    ),
    Command(
        "compare",
        (
            Argument("left", ArgumentType.IDENTIFIER, (_REQ,)),
            Argument("right", ArgumentType.IDENTIFIER, (_REQ,)),
        ),
    ),
    Command("include", (Argument("module", ArgumentType.IDENTIFIER, (_REQ,)),)),
    Command("return"),
    Command(
        "export",
        (Argument("variable", ArgumentType.IDENTIFIER, (_REQ, _MULTI, _DECL)),),
    ),
)

_COMMANDS_BY_NAME = {command.name: command for command in REGISTERED_COMMANDS}


def find_command(name: str) -> Command:
    """Return the registered command with this exact name; KeyError if none."""
    return _COMMANDS_BY_NAME[name]


class Parser:
    """Checks the order and content of a token stream."""

    def parse(self, tokens: Sequence[Token]) -> list[tuple[str, int, int]]:
        """Validate the tokens, stopping at the first error.

        Returns the matched blocks as ``(name, begin_index, end_index)``
        in the order they were closed. Raises :class:`ParseError`.
        """
        return self._validate_nesting(tokens)

    def _validate_nesting(self, tokens: Sequence[Token]) -> list[tuple[str, int, int]]:
        open_blocks: list[tuple[int, str]] = []
        closed: list[tuple[str, int, int]] = []
        count = len(tokens)
        i = 0
        while i < count:
            token = tokens[i]
            if token.type is TokenType.COMMAND and token.value == "begin":
                if i + 2 >= count:
                    raise ParseError(
                        f"Missing identifier for 'begin' command at token index {i}"
                    )
                if tokens[i + 2].type is not TokenType.IDENTIFIER:
                    raise ParseError(
                        "Expected identifier after 'begin' command at token index "
                        f"{i + 2}"
                    )
                open_blocks.append((i, tokens[i + 2].value))
                i += 1
            elif token.type is TokenType.COMMAND and token.value == "end":
                if i + 1 >= count:
                    raise ParseError(
                        f"Missing identifier for 'end' command at token index {i}"
                    )
                name_token = tokens[i + 1]
                if name_token.type is not TokenType.IDENTIFIER:
                    raise ParseError(
                        "Expected identifier after 'end' command at token index "
                        f"{i + 1} instead found '{name_token.value}'"
                    )
                match = next(
                    (block for block in open_blocks if block[1] == name_token.value),
                    None,
                )
                if match is None:
                    raise ParseError(
                        f"Unmatched 'end' command for identifier '{name_token.value}'"
                        f" at token index {i}"
                    )
                open_blocks.remove(match)
                closed.append((match[1], match[0], i))
                i += 1
            i += 1
        if open_blocks:
            entries = ",".join(
                f"\n\t'{name}' at token index {index}" for index, name in open_blocks
            )
            raise ParseError("Unmatched 'begin' command(s):" + entries)
        return closed

    def validate_command(
        self,
        command: Command,
        tokens: Sequence[Token],
        index: int,
        declared: Iterable[Token],
    ) -> int:
        """Check the arguments following the command token at ``index``.

        Returns the index just past the command's arguments. Raises
        :class:`ParseError` when an argument is missing or an identifier
        is used before it is declared.
        """
        declared_names = {token.value for token in declared}
        index += 1
        for argument in command.arguments:
            if index >= len(tokens):
                raise ParseError(
                    f"Missing argument '{argument.name}' for command '{command.name}'"
                )
            current = tokens[index]
            if (
                current.type is TokenType.IDENTIFIER
                and argument.type in (ArgumentType.IDENTIFIER, ArgumentType.VALUE)
                and current.value not in declared_names
                and argument.configs is not None
                and ArgumentOption.DECLARATIVE not in argument.configs
            ):
                raise ParseError(
                    f"Undeclared identifier '{current.value}' for command "
                    f"'{command.name}'"
                )
            index += 1
        return index