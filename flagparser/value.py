# flagparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the values returned by `Parser.parse()`.

A parse produces an ordered list of values, each one of:

- `OptionValue`: an `Option` matched by a token, plus its argument, if any.
- `PositionalArgumentValue`: a positional argument.
- `OptionsArgumentsSeparatorValue`: the options-arguments separator (e.g. `--`).

Every value keeps the token it originated from, so the original ordering can be
restored, and exposes `strings()`, the list of arguments needed to reconstruct
a command line fragment for that value alone. Joining the `strings()` of every
value in order yields a command line that parses back to the same values.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from flagparser.exceptions import InvariantViolation
from flagparser.option import Option, OptionType
from flagparser.tokens import Token


@dataclass(frozen=True)
class OptionValue:
    """
    A parsed `Option`.

    Attributes:
        option (Option): The matched option.
        token (Token): The token the option was parsed from.
        value (str): The option argument. Empty for options taking no argument,
            the parsed argument for required arguments and the parsed argument
            or the option default for optional arguments.
    """

    option: Option
    token: Token
    value: str = ""

    def strings(self) -> list[str]:
        flag = self.option.flag()
        match self.option.type:
            case (
                OptionType.EARLY_ARGUMENT_NONE
                | OptionType.GROUPABLE_ARGUMENT_NONE
                | OptionType.STANDALONE_ARGUMENT_NONE
            ):
                return [flag]
            case OptionType.STANDALONE_ARGUMENT_OPTIONAL:
                return [f"{flag}={self.value}"]
            case (
                OptionType.STANDALONE_ARGUMENT_REQUIRED
                | OptionType.GROUPABLE_ARGUMENT_REQUIRED
            ):
                return [flag, self.value]
            case _:
                raise InvariantViolation(f"unhandled option type: {self.option.type!r}")


@dataclass(frozen=True)
class PositionalArgumentValue:
    """A parsed positional argument."""

    token: Token
    value: str

    def strings(self) -> list[str]:
        return [self.value]


@dataclass(frozen=True)
class OptionsArgumentsSeparatorValue:
    """The parsed options-arguments separator."""

    token: Token
    separator: str

    def strings(self) -> list[str]:
        return [self.separator]


Value = Union[OptionValue, PositionalArgumentValue, OptionsArgumentsSeparatorValue]


def sort_values(values: Iterable[Value]) -> list[Value]:
    """Return the values stably sorted by the index of their token."""
    return sorted(values, key=lambda value: value.token.index)


def values_to_args(values: Iterable[Value]) -> list[str]:
    """Flatten values back into a command line argument list."""
    args: list[str] = []
    for value in values:
        args.extend(value.strings())
    return args
