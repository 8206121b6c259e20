import pytest

from flagparser.early import early_parse
from flagparser.option import Option, OptionType
from flagparser.tokens import (
    OptionsArgumentsSeparatorToken,
    OptionToken,
    PositionalArgumentToken,
)
from flagparser.value import OptionValue

SHORT_HELP = Option(prefix="-", name="h", type=OptionType.EARLY_ARGUMENT_NONE)
LONG_HELP = Option(prefix="--", name="help", type=OptionType.EARLY_ARGUMENT_NONE)
SHORT = Option(prefix="+", name="short", type=OptionType.STANDALONE_ARGUMENT_NONE)
OPTIONS = [SHORT_HELP, LONG_HELP, SHORT]


def test_early_parse_finds_long_help():
    token = OptionToken(index=2, prefix="--", name="help")
    tokens = [
        OptionToken(index=0, prefix="-", name="x"),
        PositionalArgumentToken(index=1, value="file1.txt"),
        token,
    ]
    assert early_parse(OPTIONS, tokens, False) == OptionValue(
        option=LONG_HELP, token=token, value=""
    )


def test_early_parse_finds_short_help():
    token = OptionToken(index=2, prefix="-", name="h")
    tokens = [
        OptionToken(index=0, prefix="-", name="x"),
        PositionalArgumentToken(index=1, value="file1.txt"),
        token,
    ]
    value = early_parse(OPTIONS, tokens, False)
    assert value is not None
    assert value.option is SHORT_HELP
    assert value.token is token
    assert value.strings() == ["-h"]


def test_early_parse_returns_first_match():
    first = OptionToken(index=0, prefix="--", name="help")
    tokens = [first, OptionToken(index=1, prefix="-", name="h")]
    value = early_parse(OPTIONS, tokens, False)
    assert value is not None
    assert value.token is first


def test_early_parse_without_early_options():
    tokens = [
        OptionToken(index=0, prefix="-", name="x"),
        PositionalArgumentToken(index=1, value="file1.txt"),
    ]
    assert early_parse(OPTIONS, tokens, False) is None
    assert early_parse([SHORT], [OptionToken(index=0, prefix="+", name="short")], False) is None


def test_early_parse_requires_exact_match():
    tokens = [
        OptionToken(index=0, prefix="--", name="h"),
        OptionToken(index=1, prefix="-", name="help"),
        OptionToken(index=2, prefix="--", name="help=yes"),
        OptionToken(index=3, prefix="-", name="hx"),
    ]
    assert early_parse(OPTIONS, tokens, False) is None


@pytest.mark.parametrize("literal", ["--help", "-h"])
def test_early_parse_ignores_arguments_after_separator(literal):
    tokens = [
        OptionToken(index=0, prefix="-", name="x"),
        PositionalArgumentToken(index=1, value="file1.txt"),
        OptionsArgumentsSeparatorToken(index=2, separator="--"),
        PositionalArgumentToken(index=3, value=literal),
    ]
    assert early_parse(OPTIONS, tokens, False) is None


def test_early_parse_stops_at_positional_without_permutation():
    tokens = [
        PositionalArgumentToken(index=0, value="file1.txt"),
        OptionToken(index=1, prefix="--", name="help"),
    ]
    assert early_parse(OPTIONS, tokens, True) is None
    assert early_parse(OPTIONS, tokens, False) is not None


def test_early_parse_before_positional_without_permutation():
    token = OptionToken(index=0, prefix="-", name="h")
    tokens = [token, PositionalArgumentToken(index=1, value="file1.txt")]
    value = early_parse(OPTIONS, tokens, True)
    assert value is not None
    assert value.token is token
