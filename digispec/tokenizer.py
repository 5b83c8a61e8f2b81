"""Split digispec source text into classified tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

VALID_KEYWORDS: frozenset[str] = frozenset({"mod", "definition", "set"})
VALID_COMMANDS: frozenset[str] = frozenset(
    {
        "begin",
        "end",
        "display",
        "input",
        "output",
        "alias",
        "line",
        "compare",
        "include",
        "return",
    }
)
VALID_SYMBOLS: frozenset[str] = frozenset({"runnable", "library"})

_WHITESPACE = frozenset(" \t\n")
_IDENTIFIER_EXTRA = frozenset("_-.:")
_COMMENT_MARKER = "--"


class TokenType(Enum):
    """Kinds of token produced by :func:`tokenize`."""

    IDENTIFIER = auto()
    COMMAND = auto()
    COMMENT = auto()
    KEYWORD = auto()
    SYMBOL = auto()
    NONE = auto()


@dataclass(frozen=True)
class Token:
    """A single classified word of the source text."""

    type: TokenType
    value: str


def is_valid_identifier(word: str) -> bool:
    """Return True if every character may appear in an identifier."""
    return all(
        (ch.isascii() and ch.isalnum()) or ch in _IDENTIFIER_EXTRA for ch in word
    )


def is_valid_command(word: str) -> bool:
    """Return True if the word names a command, ignoring case."""
    return word.lower() in VALID_COMMANDS


def is_valid_keyword(word: str) -> bool:
    """Return True if the word is a reserved keyword, ignoring case."""
    return word.lower() in VALID_KEYWORDS


def is_valid_symbol(word: str) -> bool:
    """Return True if the word is a recognised ``%...%`` symbol.

    The lookup uses everything after the leading ``%``, trailing ``%``
    included.
    """
    return (
        len(word) > 1
        and word.startswith("%")
        and word.endswith("%")
        and word[1:] in VALID_SYMBOLS
    )


def _classify(word: str) -> Token:
    if is_valid_keyword(word):
        kind = TokenType.KEYWORD
    elif is_valid_command(word):
        kind = TokenType.COMMAND
    elif is_valid_identifier(word):
        kind = TokenType.IDENTIFIER
    elif is_valid_symbol(word):
        kind = TokenType.SYMBOL
    else:
        kind = TokenType.NONE
    return Token(kind, word)


def tokenize(text: str) -> list[Token]:
    """Split text into tokens.

    Words are separated by spaces, tabs and newlines; a word is only
    emitted once whitespace follows it. A ``--`` word starts a comment
    that runs up to the next newline.
    """
    tokens: list[Token] = []
    current = ""
    in_comment = False
    for ch in text:
        if ch not in _WHITESPACE:
            current += ch
            continue
        if not current:
            continue
        if current == _COMMENT_MARKER:
            in_comment = True
        if in_comment:
            if ch == "\n":
                tokens.append(Token(TokenType.COMMENT, current))
                current = ""
                in_comment = False
            else:
                current += ch
        else:
            tokens.append(_classify(current))
            current = ""
    return tokens