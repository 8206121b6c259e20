# flagparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Reference tokenizer turning an argument vector into `Token`s.

The `Parser` configures a `Scanner` with every prefix declared by its options
and with the options-arguments separator, then hands the resulting tokens to
the parsing engine. Callers with their own tokenizer can skip this module and
use `Parser.parse_tokens()` directly.

Rules:
- Once the separator is seen, every later argument is positional.
- An argument starting with a prefix and longer than it is an option,
  using the longest matching prefix (`--output` is `--` + `output`).
- Anything else is positional, including a bare `-`.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from flagparser.logger import logger
from flagparser.tokens import (
    OptionsArgumentsSeparatorToken,
    OptionToken,
    PositionalArgumentToken,
    Token,
)


class Scanner:
    """Split command line arguments into option, positional and separator tokens."""

    def __init__(self, prefixes: Iterable[str], separator: str = "") -> None:
        self.prefixes: list[str] = sorted(set(prefixes), key=len, reverse=True)
        self.separator: str = separator

    def _match_prefix(self, arg: str) -> str | None:
        for prefix in self.prefixes:
            if prefix and arg.startswith(prefix) and len(arg) > len(prefix):
                return prefix
        return None

    def scan(self, args: Sequence[str]) -> list[Token]:
        """
        Tokenize the given arguments.

        Args:
            args (Sequence[str]): The arguments, excluding the program name.

        Returns:
            list[Token]: One token per argument, indexed by position.
        """
        tokens: list[Token] = []
        seen_separator = False
        for index, arg in enumerate(args):
            if seen_separator:
                tokens.append(PositionalArgumentToken(index=index, value=arg))
                continue
            if self.separator and arg == self.separator:
                tokens.append(
                    OptionsArgumentsSeparatorToken(index=index, separator=arg)
                )
                seen_separator = True
                continue
            prefix = self._match_prefix(arg)
            if prefix is not None:
                tokens.append(
                    OptionToken(index=index, prefix=prefix, name=arg[len(prefix) :])
                )
            else:
                tokens.append(PositionalArgumentToken(index=index, value=arg))
        logger.debug("Scanned %d argument(s) into tokens: %s", len(args), tokens)
        return tokens
