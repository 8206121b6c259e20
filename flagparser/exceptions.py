# flagparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by flagparser.

Configuration errors are detected once, before any token is consumed, when the
option list is validated. Parse errors are detected while consuming tokens or
right after. In both cases the first error aborts the whole `parse()` call and
no partial result is returned.

Every error keeps the structured data needed to render a precise message
(options, names, prefixes, counts, originating tokens) as attributes.

Exception Hierarchy:
- FlagParserError
    ├── ConfigurationError
    │   ├── EmptyOptionNameError
    │   ├── EmptyOptionPrefixError
    │   ├── TooLongGroupableOptionNameError
    │   ├── MultipleOptionsWithSameNameError
    │   └── AmbiguousPrefixError
    ├── ParseError
    │   ├── UnknownOptionError
    │   ├── OptionRequiresArgumentError
    │   ├── OptionRequiresNoArgumentError
    │   ├── TooFewPositionalArgumentsError
    │   └── TooManyPositionalArgumentsError
    └── LoaderError

`InvariantViolation` sits outside this hierarchy: it derives from
`BaseException` and signals a broken internal contract, not bad user input.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from flagparser.option import Option
    from flagparser.tokens import Token


class FlagParserError(Exception):
    """Base exception for flagparser."""


class ConfigurationError(FlagParserError):
    """Exception raised when the declared options are invalid."""


class EmptyOptionNameError(ConfigurationError):
    """Exception raised when an option has an empty name."""

    def __init__(self, option: Option):
        self.option = option
        super().__init__(f"option name cannot be empty: {option!r}")


class EmptyOptionPrefixError(ConfigurationError):
    """Exception raised when an option has an empty prefix."""

    def __init__(self, option: Option):
        self.option = option
        super().__init__(f"option prefix cannot be empty: {option!r}")


class TooLongGroupableOptionNameError(ConfigurationError):
    """Exception raised when a groupable option name is longer than one character."""

    def __init__(self, option: Option):
        self.option = option
        super().__init__(
            f"groupable option names should be a single character, found: {option!r}"
        )


class MultipleOptionsWithSameNameError(ConfigurationError):
    """Exception raised when two or more options share the same name."""

    def __init__(self, name: str, options: Sequence[Option]):
        self.name = name
        self.options = list(options)
        super().__init__(f"multiple options with {name!r} name")


class AmbiguousPrefixError(ConfigurationError):
    """Exception raised when a prefix is used by standalone and groupable options."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(
            f"prefix {prefix!r} is used for both standalone and groupable options"
        )


class ParseError(FlagParserError):
    """Exception raised when the command line does not match the declared options."""


class UnknownOptionError(ParseError):
    """Exception raised when an option is not declared for the token's prefix and family."""

    def __init__(self, name: str, prefix: str, token: Token):
        self.name = name
        self.prefix = prefix
        self.token = token
        super().__init__(f"unknown option: {prefix}{name}")


class OptionRequiresArgumentError(ParseError):
    """Exception raised when an option requiring an argument has none."""

    def __init__(self, option: Option, token: Token):
        self.option = option
        self.token = token
        super().__init__(f"option requires an argument: {option.prefix}{option.name}")


class OptionRequiresNoArgumentError(ParseError):
    """Exception raised when an argument is passed to an option taking none."""

    def __init__(self, option: Option, token: Token):
        self.option = option
        self.token = token
        super().__init__(f"option requires no argument: {option.prefix}{option.name}")


class TooFewPositionalArgumentsError(ParseError):
    """Exception raised when fewer positional arguments than the minimum are given."""

    def __init__(self, min: int, have: int):
        self.min = min
        self.have = have
        super().__init__(
            f"too few positional arguments: expected at least {min}, got {have}"
        )


class TooManyPositionalArgumentsError(ParseError):
    """Exception raised when more positional arguments than the maximum are given."""

    def __init__(self, max: int, have: int):
        self.max = max
        self.have = have
        super().__init__(
            f"too many positional arguments: expected at most {max}, got {have}"
        )


class LoaderError(FlagParserError):
    """Exception raised when a parser definition file does not match the schema."""


class InvariantViolation(BaseException):
    """Raised when an internal invariant is broken.

    Reaching this means the configuration validator or the tokenizer contract
    was violated. It derives from `BaseException` so that `except Exception`
    blocks do not mistake it for a recoverable error.
    """

    def __init__(self, message: str = "Internal invariant violated."):
        super().__init__(message)
