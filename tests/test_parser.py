import pytest

from digispec.parser import (
    REGISTERED_COMMANDS,
    ArgumentOption,
    ArgumentType,
    ParseError,
    Parser,
    find_command,
)
from digispec.tokenizer import Token, TokenType, tokenize

SAMPLE = """-- a half adder
begin mod half_adder
  input a b
  output sum carry
  line a sum
end half_adder
"""


def _ident(name):
    return Token(TokenType.IDENTIFIER, name)


def test_parse_sample_succeeds():
    tokens = tokenize(SAMPLE)
    assert tokens
    assert Parser().parse(tokens) == [("half_adder", 1, 13)]


def test_parse_interleaved_blocks():
    tokens = tokenize("begin mod a begin mod b end a end b ")
    assert Parser().parse(tokens) == [("a", 0, 6), ("b", 3, 8)]


def test_parse_without_blocks():
    assert Parser().parse(tokenize("input x y\n")) == []


def _detail(text):
    with pytest.raises(ParseError) as info:
        Parser().parse(tokenize(text))
    assert str(info.value) == info.value.detail
    return info.value.detail


def test_begin_missing_identifier():
    assert _detail("begin mod\n") == (
        "Missing identifier for 'begin' command at token index 0"
    )


def test_begin_followed_by_non_identifier():
    assert _detail("begin mod set\n") == (
        "Expected identifier after 'begin' command at token index 2"
    )


def test_end_missing_identifier():
    assert _detail("end\n") == "Missing identifier for 'end' command at token index 0"


def test_end_followed_by_non_identifier():
    assert _detail("end mod\n") == (
        "Expected identifier after 'end' command at token index 1 instead found 'mod'"
    )


def test_unmatched_end():
    assert _detail("end foo\n") == (
        "Unmatched 'end' command for identifier 'foo' at token index 0"
    )


def test_unmatched_begins_listed():
    assert _detail("begin mod a\nbegin definition b\n") == (
        "Unmatched 'begin' command(s):\n\t'a' at token index 0,\n\t'b' at token index 3"
    )


def test_validate_command_with_declared_identifiers():
    tokens = tokenize("line a b ")
    index = Parser().validate_command(
        find_command("line"), tokens, 0, [_ident("a"), _ident("b")]
    )
    assert index == 3


def test_validate_command_undeclared_identifier():
    tokens = tokenize("line a b ")
    with pytest.raises(ParseError, match="Undeclared identifier 'b' for command 'line'"):
        Parser().validate_command(find_command("line"), tokens, 0, [_ident("a")])


def test_validate_command_missing_argument():
    tokens = tokenize("line a ")
    with pytest.raises(ParseError, match="Missing argument 'end' for command 'line'"):
        Parser().validate_command(find_command("line"), tokens, 0, [_ident("a")])


def test_validate_command_declarative_argument_needs_no_declaration():
    tokens = tokenize("input x ")
    assert Parser().validate_command(find_command("input"), tokens, 0, []) == 2


def test_validate_command_without_arguments():
    tokens = tokenize("return ")
    assert Parser().validate_command(find_command("return"), tokens, 0, []) == 1


def test_find_command_begin():
    begin = find_command("begin")
    assert begin.arguments[0].type is ArgumentType.KEYWORD
    assert begin.arguments[0].values == ("mod", "definition")
    assert ArgumentOption.CAPTURING in begin.arguments[1].configs


def test_find_command_unknown():
    with pytest.raises(KeyError):
        find_command("nope")


def test_registered_command_names_are_unique():
    names = [command.name for command in REGISTERED_COMMANDS]
    assert len(names) == len(set(names)) == 11
    assert all(find_command(name).name == name for name in names)