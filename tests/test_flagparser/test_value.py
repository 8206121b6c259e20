from dataclasses import replace

import pytest

from flagparser.exceptions import InvariantViolation
from flagparser.option import Option, OptionType
from flagparser.tokens import (
    OptionsArgumentsSeparatorToken,
    OptionToken,
    PositionalArgumentToken,
)
from flagparser.value import (
    OptionsArgumentsSeparatorValue,
    OptionValue,
    PositionalArgumentValue,
    sort_values,
    values_to_args,
)


@pytest.mark.parametrize(
    "option_type, value, expected",
    [
        (OptionType.EARLY_ARGUMENT_NONE, "", ["--name"]),
        (OptionType.STANDALONE_ARGUMENT_NONE, "", ["--name"]),
        (OptionType.GROUPABLE_ARGUMENT_NONE, "", ["--name"]),
        (OptionType.STANDALONE_ARGUMENT_OPTIONAL, "1.1", ["--name=1.1"]),
        (OptionType.STANDALONE_ARGUMENT_REQUIRED, "FILE", ["--name", "FILE"]),
        (OptionType.GROUPABLE_ARGUMENT_REQUIRED, "-", ["--name", "-"]),
    ],
)
def test_option_value_strings(option_type, value, expected):
    option = Option(prefix="--", name="name", type=option_type)
    token = OptionToken(index=0, prefix="--", name="name")
    assert OptionValue(option=option, token=token, value=value).strings() == expected


def test_option_value_with_unhandled_type():
    option = replace(
        Option(prefix="--", name="name", type=OptionType.STANDALONE_ARGUMENT_NONE),
        type="bogus",
    )
    value = OptionValue(option=option, token=OptionToken(index=0, prefix="--", name="name"))
    with pytest.raises(InvariantViolation):
        value.strings()


def test_positional_and_separator_strings():
    positional = PositionalArgumentValue(
        token=PositionalArgumentToken(index=3, value="file.txt"), value="file.txt"
    )
    separator = OptionsArgumentsSeparatorValue(
        token=OptionsArgumentsSeparatorToken(index=4, separator="--"), separator="--"
    )
    assert positional.strings() == ["file.txt"]
    assert separator.strings() == ["--"]
    assert positional.token.index == 3
    assert separator.token.index == 4


def test_values_to_args():
    option = Option(prefix="-", name="o", type=OptionType.GROUPABLE_ARGUMENT_REQUIRED)
    values = [
        OptionValue(
            option=option, token=OptionToken(index=0, prefix="-", name="o"), value="out"
        ),
        PositionalArgumentValue(token=PositionalArgumentToken(index=2, value="in"), value="in"),
    ]
    assert values_to_args(values) == ["-o", "out", "in"]
    assert values_to_args([]) == []


def test_sort_values_is_stable():
    first = PositionalArgumentValue(token=PositionalArgumentToken(index=1, value="a"), value="a")
    second = PositionalArgumentValue(token=PositionalArgumentToken(index=1, value="b"), value="b")
    zero = PositionalArgumentValue(token=PositionalArgumentToken(index=0, value="c"), value="c")
    assert sort_values([first, second, zero]) == [zero, first, second]
