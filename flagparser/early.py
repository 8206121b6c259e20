# flagparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""early.py

Detects "early" options, such as `--help`, that must be honored even when the
rest of the command line is wrong. Showing the help text beats showing a parse
error, so this scan runs before the full parse and never raises.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from flagparser.logger import logger
from flagparser.option import Option
from flagparser.tokens import OptionToken, PositionalArgumentToken, Token
from flagparser.value import OptionValue


def early_parse(
    options: Iterable[Option], tokens: Sequence[Token], disable_permute: bool
) -> OptionValue | None:
    """
    Return the first early option found in `tokens`, or None.

    When `disable_permute` is True the scan stops at the first positional
    argument, since everything after it belongs to someone else.
    """
    early_options = [option for option in options if option.type.is_early()]
    for token in tokens:
        if isinstance(token, OptionToken):
            for option in early_options:
                if token.prefix == option.prefix and token.name == option.name:
                    logger.debug("Found early option %s at index %d", option, token.index)
                    return OptionValue(option=option, token=token, value="")
        elif isinstance(token, PositionalArgumentToken) and disable_permute:
            return None
    return None
