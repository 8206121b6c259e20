"""
flagparser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    AmbiguousPrefixError,
    ConfigurationError,
    EmptyOptionNameError,
    EmptyOptionPrefixError,
    FlagParserError,
    InvariantViolation,
    LoaderError,
    MultipleOptionsWithSameNameError,
    OptionRequiresArgumentError,
    OptionRequiresNoArgumentError,
    ParseError,
    TooFewPositionalArgumentsError,
    TooLongGroupableOptionNameError,
    TooManyPositionalArgumentsError,
    UnknownOptionError,
)
from .logger import logger
from .option import (
    Option,
    OptionKind,
    OptionType,
    new_early_option,
    new_long_option_with_argument_optional,
    new_option_with_argument_none,
    new_option_with_argument_required,
)
from .parser import Parser, new_parser
from .scanner import Scanner
from .tokens import (
    OptionsArgumentsSeparatorToken,
    OptionToken,
    PositionalArgumentToken,
    Token,
)
from .value import (
    OptionsArgumentsSeparatorValue,
    OptionValue,
    PositionalArgumentValue,
    Value,
    values_to_args,
)

__all__ = [
    "AmbiguousPrefixError",
    "ConfigurationError",
    "EmptyOptionNameError",
    "EmptyOptionPrefixError",
    "FlagParserError",
    "InvariantViolation",
    "LoaderError",
    "MultipleOptionsWithSameNameError",
    "Option",
    "OptionKind",
    "OptionRequiresArgumentError",
    "OptionRequiresNoArgumentError",
    "OptionToken",
    "OptionType",
    "OptionValue",
    "OptionsArgumentsSeparatorToken",
    "OptionsArgumentsSeparatorValue",
    "ParseError",
    "Parser",
    "PositionalArgumentToken",
    "PositionalArgumentValue",
    "Scanner",
    "Token",
    "TooFewPositionalArgumentsError",
    "TooLongGroupableOptionNameError",
    "TooManyPositionalArgumentsError",
    "UnknownOptionError",
    "Value",
    "logger",
    "new_early_option",
    "new_long_option_with_argument_optional",
    "new_option_with_argument_none",
    "new_option_with_argument_required",
    "new_parser",
    "values_to_args",
]
