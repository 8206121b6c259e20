# flagparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""permute.py

Merges the option and positional buffers into the final value sequence."""
from __future__ import annotations

from typing import Sequence

from flagparser.value import Value, sort_values


def permute(
    disable_permute: bool, options: Sequence[Value], positionals: Sequence[Value]
) -> list[Value]:
    """
    Return the parsed values in output order.

    With `disable_permute` the original token order is restored. Otherwise
    options come first and positionals after, each in their original relative
    order (GNU getopt behavior). Both sorts are stable.
    """
    if disable_permute:
        return sort_values([*options, *positionals])
    return [*sort_values(options), *sort_values(positionals)]
