# flagparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token types consumed by the parsing engine.

Tokens are produced by a tokenizer (see `flagparser.scanner.Scanner`) and
carry the zero-based index of the argument they were created from. The index
defines a strict total order used to restore or check the original ordering
after parsing.

Calling `str()` on a token returns its literal textual form, which is what the
engine stores when a token is consumed as an option argument or treated as a
positional argument.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """Base class for all tokens."""

    index: int


@dataclass(frozen=True)
class OptionToken(Token):
    """An argument starting with a configured prefix (e.g. `--output=FILE`)."""

    prefix: str
    name: str

    def __str__(self) -> str:
        return f"{self.prefix}{self.name}"


@dataclass(frozen=True)
class PositionalArgumentToken(Token):
    """An argument that is not an option."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OptionsArgumentsSeparatorToken(Token):
    """The separator after which every argument is positional (usually `--`)."""

    separator: str

    def __str__(self) -> str:
        return self.separator
