# digispec

A small library for reading *digispec* text, a plain text way to describe a
digital logic circuit. It splits text into classified tokens and checks that
every `begin` block is closed by an `end` naming the same block.

## Installation

```
pip install .
```

## A short example of the language

```
begin mod half_adder
    input a b
    output sum carry
end half_adder
-- everything after a double dash word is a comment
```

## Tokenizing

```python
from digispec.tokenizer import tokenize, TokenType

tokens = tokenize("begin mod adder\nend adder\n")
for token in tokens:
    print(token.type, token.value)
```

`tokenize(text)` returns a list of frozen `Token` objects, each with a `type`
(a `TokenType`) and the `value` text. The rules are:

* Words are separated by spaces, tabs and newlines. A word is only emitted
  once whitespace follows it, so a last word with nothing after it is dropped;
  end your text with a newline.
* A word that is exactly `--` starts a comment. The comment runs to the next
  newline and becomes one `TokenType.COMMENT` token whose value holds the `--`
  and the rest of the line, spaces and tabs included. A comment with no
  newline after it is dropped. A word such as `--x` is not a comment.
* Every other word is classified, first match wins:
  * `TokenType.KEYWORD`: `mod`, `definition`, `set`, in any case;
  * `TokenType.COMMAND`: `begin`, `end`, `display`, `input`, `output`,
    `alias`, `line`, `compare`, `include`, `return`, in any case;
  * `TokenType.IDENTIFIER`: only ASCII letters, digits and `_ - . :`;
  * `TokenType.SYMBOL`: a word accepted by `is_valid_symbol`;
  * `TokenType.NONE`: anything else.

The same checks are available for a single word: `is_valid_keyword`,
`is_valid_command`, `is_valid_identifier` and `is_valid_symbol`.
`is_valid_symbol` requires a word that starts and ends with `%` and compares
everything after the leading `%` (the trailing `%` included) with `runnable`
and `library`; a word such as `%runnable%` therefore does not pass, and comes
out of `tokenize` as `TokenType.NONE`.

## Checking block structure

```python
from digispec.parser import Parser, ParseError
from digispec.tokenizer import tokenize

try:
    blocks = Parser().parse(tokenize(source_text))
except ParseError as error:
    print("invalid specification:", error.detail)
else:
    for name, begin_index, end_index in blocks:
        print(name, begin_index, end_index)
```

`Parser.parse(tokens)` stops at the first problem and raises `ParseError` (a
`ValueError` with the message also in `detail`) when:

* a `begin` command has no third token, or its third token (the one after the
  block type) is not an identifier;
* an `end` command has no following token, or it is not an identifier;
* an `end` names no open block;
* blocks are still open at the end; the message lists each one with its token
  index.

An `end` closes the earliest open block with the same name, so blocks need
not close in reverse order. On success `parse` returns the matched blocks as
`(name, begin_index, end_index)` tuples in the order they were closed. Only
commands spelled exactly `begin` and `end` in lower case are recognised here,
even though the tokenizer accepts commands in any case.

### Commands and their arguments

`find_command(name)` returns the registered `Command` with that exact name
(raising `KeyError` for an unknown one). A `Command` has a `name` and a tuple
of `Argument` entries, each with a `name`, an `ArgumentType`, optional
`ArgumentOption` flags in `configs`, optional allowed `values` and an optional
`default`. The registered commands are `begin`, `end`, `display`, `input`,
`output`, `alias`, `line`, `compare`, `include`, `return` and `export`.

`Parser.validate_command(command, tokens, index, declared)` checks the tokens
after the command token at `index`: it raises `ParseError` if an argument is
missing, or if an identifier is given to an identifier or value argument
without being among the `declared` tokens and the argument is not marked
`ArgumentOption.DECLARATIVE`. It returns the index just past the arguments.
`parse` does not call it.

## Project information

`digispec.project.DigiSpec` is a frozen dataclass with `name` (default
`"digispec"`) and `testing` (default `False`).

## What this package does not do

There is no command-line program: the package is used as a library. It does
not simulate or evaluate circuits, and `parse` checks only that `begin` and
`end` blocks match, not the arguments of each command.