# flagparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Parser`, the entry point of flagparser.

A `Parser` is an immutable declaration: the options it recognizes, the
positional argument bounds, the options-arguments separator and whether
options are permuted ahead of positional arguments. Builder methods return a
new `Parser`, so a declaration can be shared and reused freely.

Each call to `parse()` then:

1. validates the options and builds a fresh `ParserConfig`
2. tokenizes the arguments with a `Scanner` using the declared prefixes
3. short-circuits on early options such as `--help`
4. runs the parsing state machine
5. enforces the positional argument bounds
6. permutes the values into their final order

Example Usage:
    parser = (
        Parser.gnu()
        .set_min_max_positional_arguments(1, None)
        .add_option_with_argument_none("f", "fail")
        .add_option_with_argument_required("o", "output")
    )
    values = parser.parse(["https://example.com/", "-fo", "index.html"])
    # values_to_args(values) == ["-f", "-o", "index.html", "https://example.com/"]

Permutation:
By default options are moved ahead of positional arguments, so
`https://example.com/ -H 'Host: example.com'` becomes
`-H 'Host: example.com' https://example.com/`. With `disable_permute=True` the
original order is kept and the first positional argument ends option parsing,
which suits commands wrapping another command (`foreach -k git status -v`).
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Sequence

from flagparser.config import ParserConfig, new_config
from flagparser.deque import Deque
from flagparser.early import early_parse
from flagparser.engine import do_parse
from flagparser.exceptions import (
    InvariantViolation,
    TooFewPositionalArgumentsError,
    TooManyPositionalArgumentsError,
)
from flagparser.logger import logger
from flagparser.option import (
    Option,
    new_early_option,
    new_long_option_with_argument_optional,
    new_option_with_argument_none,
    new_option_with_argument_required,
)
from flagparser.permute import permute
from flagparser.scanner import Scanner
from flagparser.tokens import Token
from flagparser.value import Value

GNU_SEPARATOR = "--"


@dataclass(frozen=True)
class Parser:
    """
    Command line parser declaration.

    Attributes:
        disable_permute (bool): Keep the original order of options and positional
            arguments instead of moving options first.
        min_positional_arguments (int): Minimum number of positional arguments.
        max_positional_arguments (int | None): Maximum number of positional
            arguments, or None for no limit. Defaults to zero.
        options_arguments_separator (str): Argument after which every argument is
            positional. Empty disables the separator.
        options (tuple[Option, ...]): The recognized options. Validated when
            parsing, not when added.
    """

    disable_permute: bool = False
    min_positional_arguments: int = 0
    max_positional_arguments: int | None = 0
    options_arguments_separator: str = ""
    options: tuple[Option, ...] = field(default_factory=tuple)

    @classmethod
    def gnu(cls) -> Parser:
        """
        Return a parser following the GNU conventions.

        Permutation is enabled, no positional arguments are allowed, the
        separator is `--` and no options are defined yet.
        """
        return cls(options_arguments_separator=GNU_SEPARATOR)

    def add_option(self, *options: Option | None) -> Parser:
        """Return a copy of this parser with `options` appended, skipping None."""
        added = tuple(option for option in options if option is not None)
        return replace(self, options=self.options + added)

    def add_option_with_argument_none(self, short_name: str, long_name: str) -> Parser:
        return self.add_option(*new_option_with_argument_none(short_name, long_name))

    def add_early_option(self, short_name: str, long_name: str) -> Parser:
        return self.add_option(*new_early_option(short_name, long_name))

    def add_option_with_argument_required(
        self, short_name: str, long_name: str
    ) -> Parser:
        return self.add_option(*new_option_with_argument_required(short_name, long_name))

    def add_long_option_with_argument_optional(
        self, long_name: str, default_value: str
    ) -> Parser:
        return self.add_option(
            *new_long_option_with_argument_optional(long_name, default_value)
        )

    def set_min_max_positional_arguments(
        self, min_args: int, max_args: int | None
    ) -> Parser:
        return replace(
            self, min_positional_arguments=min_args, max_positional_arguments=max_args
        )

    def with_disable_permute(self, disable_permute: bool = True) -> Parser:
        return replace(self, disable_permute=disable_permute)

    def with_separator(self, separator: str) -> Parser:
        return replace(self, options_arguments_separator=separator)

    def parse(self, args: Sequence[str]) -> list[Value]:
        """
        Parse command line arguments into values.

        Args:
            args (Sequence[str]): The arguments, excluding the program name.

        Returns:
            list[Value]: The parsed values, permuted unless `disable_permute`.

        Raises:
            ConfigurationError: If the declared options are invalid.
            ParseError: If the arguments do not match the declared options.
        """
        config = new_config(self)
        scanner = Scanner(config.prefixes, self.options_arguments_separator)
        return self._parse(config, scanner.scan(args))

    def parse_tokens(self, tokens: Sequence[Token]) -> list[Value]:
        """
        Parse tokens produced by an external tokenizer.

        The tokenizer is expected to recognize `prefixes()` and the separator.
        """
        return self._parse(new_config(self), tokens)

    def prefixes(self) -> list[str]:
        """Return the prefixes a tokenizer must recognize for this parser."""
        return list(new_config(self).prefixes)

    def _parse(self, config: ParserConfig, tokens: Sequence[Token]) -> list[Value]:
        early = early_parse(self.options, tokens, self.disable_permute)
        if early is not None:
            logger.debug("Early option %s short-circuits parsing", early.option)
            return [early]

        pending: Deque[Token] = Deque(tokens)
        options: Deque[Value] = Deque()
        positionals: Deque[Value] = Deque()
        do_parse(config, pending, options, positionals)
        if not pending.empty():
            raise InvariantViolation(f"unconsumed tokens after parsing: {pending!r}")

        have = len(positionals)
        if have < self.min_positional_arguments:
            raise TooFewPositionalArgumentsError(
                min=self.min_positional_arguments, have=have
            )
        if self.max_positional_arguments is not None and have > self.max_positional_arguments:
            raise TooManyPositionalArgumentsError(
                max=self.max_positional_arguments, have=have
            )

        logger.debug("Parsed %d option(s) and %d positional(s)", len(options), have)
        return permute(self.disable_permute, options.values, positionals.values)


def new_parser() -> Parser:
    """Return a GNU-style `Parser`. See `Parser.gnu()`."""
    return Parser.gnu()
