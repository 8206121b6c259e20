# flagparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Configuration builder for the parsing engine.

`new_config()` validates the options declared on a `Parser` and builds the
lookup tables the engine needs:

- `options`: option name → `Option`
- `prefixes`: prefix → families (standalone and/or groupable) declared under it

Validation runs in a fixed order and stops at the first violation:

1. groupable option names must be a single character
2. names, then prefixes, must not be empty
3. names must be unique
4. a prefix cannot serve both standalone and groupable options

Early options are pattern matched ahead of parsing, so their prefixes do not
take part in the prefix table. When no prefix ends up in the table, the GNU
scheme is assumed: `-` for groupable options and `--` for standalone ones.
"""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from flagparser.exceptions import (
    AmbiguousPrefixError,
    EmptyOptionNameError,
    EmptyOptionPrefixError,
    MultipleOptionsWithSameNameError,
    TooLongGroupableOptionNameError,
    UnknownOptionError,
)
from flagparser.logger import logger
from flagparser.option import LONG_PREFIX, SHORT_PREFIX, Option, OptionKind
from flagparser.tokens import OptionToken

if TYPE_CHECKING:
    from flagparser.parser import Parser

AMBIGUOUS_KINDS = frozenset({OptionKind.STANDALONE, OptionKind.GROUPABLE})


@dataclass(frozen=True)
class ParserConfig:
    """Read-only lookup context built once per `parse()` call."""

    options: Mapping[str, Option]
    prefixes: Mapping[str, frozenset[OptionKind]]
    disable_permute: bool = False

    def prefix_kinds(self, prefix: str) -> frozenset[OptionKind]:
        """Return the families declared under `prefix` (empty if unknown)."""
        return self.prefixes.get(prefix, frozenset())

    def find_option(self, token: OptionToken, name: str, kind: OptionKind) -> Option:
        """
        Return the option called `name` for the token prefix and family.

        Raises:
            UnknownOptionError: If no option matches the name, the token prefix
                and the requested family.
        """
        option = self.options.get(name)
        if option is None or option.prefix != token.prefix or option.type.kind is not kind:
            raise UnknownOptionError(name=name, prefix=token.prefix, token=token)
        return option


def _validate(options: tuple[Option, ...]) -> None:
    for option in options:
        if len(option.name) > 1 and option.type.is_groupable():
            raise TooLongGroupableOptionNameError(option)

    names: dict[str, list[Option]] = defaultdict(list)
    for option in options:
        if not option.name:
            raise EmptyOptionNameError(option)
        if not option.prefix:
            raise EmptyOptionPrefixError(option)
        names[option.name].append(option)
    for name, same_name in names.items():
        if len(same_name) != 1:
            raise MultipleOptionsWithSameNameError(name=name, options=same_name)


def _build_prefixes(options: tuple[Option, ...]) -> dict[str, frozenset[OptionKind]]:
    prefixes: dict[str, set[OptionKind]] = defaultdict(set)
    for option in options:
        if option.type.is_groupable() or option.type.is_standalone():
            prefixes[option.prefix].add(option.type.kind)
    for prefix, kinds in prefixes.items():
        if AMBIGUOUS_KINDS <= kinds:
            raise AmbiguousPrefixError(prefix)

    if not prefixes:
        logger.debug("No prefixes declared, assuming GNU-style prefixes.")
        return {
            SHORT_PREFIX: frozenset({OptionKind.GROUPABLE}),
            LONG_PREFIX: frozenset({OptionKind.STANDALONE}),
        }
    return {prefix: frozenset(kinds) for prefix, kinds in prefixes.items()}


def new_config(parser: Parser) -> ParserConfig:
    """
    Validate the options declared on `parser` and build a `ParserConfig`.

    Raises:
        ConfigurationError: The first configuration violation found.
    """
    options = tuple(parser.options)
    _validate(options)
    prefixes = _build_prefixes(options)
    config = ParserConfig(
        options=MappingProxyType({option.name: option for option in options}),
        prefixes=MappingProxyType(prefixes),
        disable_permute=parser.disable_permute,
    )
    logger.debug(
        "Built parser config with %d option(s) and prefixes %s",
        len(options),
        {prefix: sorted(str(kind) for kind in kinds) for prefix, kinds in prefixes.items()},
    )
    return config
