# flagparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Option` and `OptionType`, the declarative description of one flag
recognized by the `Parser`.

Each `Option` carries the prefix it is written with (e.g. `-`, `--`, `+`), its
name without the prefix, its behavior class and, for options taking an
optional argument, the default value used when the argument is omitted.

`OptionType` is a closed enum of the six legal behavior classes:

    EARLY_ARGUMENT_NONE           `-h`, `--help`: matched before parsing proper
    STANDALONE_ARGUMENT_NONE      `--verbose`
    STANDALONE_ARGUMENT_REQUIRED  `--output FILE` or `--output=FILE`
    STANDALONE_ARGUMENT_OPTIONAL  `--http=1.1` or `--http` for the default
    GROUPABLE_ARGUMENT_NONE       `-v`, groupable as in `-xvz`
    GROUPABLE_ARGUMENT_REQUIRED   `-d DIR` or `-dDIR`, groupable as in `-xvd DIR`

Invalid options (empty names, duplicate names, ambiguous prefixes) are not
rejected here. They surface as `ConfigurationError`s when parsing.

Exports:
    - Option
    - OptionKind
    - OptionType
    - new_option_with_argument_none
    - new_early_option
    - new_option_with_argument_required
    - new_long_option_with_argument_optional
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SHORT_PREFIX = "-"
LONG_PREFIX = "--"


class OptionKind(Enum):
    """The option family, deciding how a token is matched and scanned."""

    EARLY = "early"
    STANDALONE = "standalone"
    GROUPABLE = "groupable"

    def __str__(self) -> str:
        return self.value


class OptionType(Enum):
    """
    Behavior class of an `Option`.

    Aliases:
        - "early" → "early_argument_none"
        - "flag" → "standalone_argument_none"
        - "short_flag" → "groupable_argument_none"

    Example:
        OptionType("standalone_argument_required")
        OptionType("Early") → OptionType.EARLY_ARGUMENT_NONE
    """

    EARLY_ARGUMENT_NONE = "early_argument_none"
    STANDALONE_ARGUMENT_NONE = "standalone_argument_none"
    STANDALONE_ARGUMENT_REQUIRED = "standalone_argument_required"
    STANDALONE_ARGUMENT_OPTIONAL = "standalone_argument_optional"
    GROUPABLE_ARGUMENT_NONE = "groupable_argument_none"
    GROUPABLE_ARGUMENT_REQUIRED = "groupable_argument_required"

    @classmethod
    def choices(cls) -> list[OptionType]:
        """Return a list of all option types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "early": "early_argument_none",
            "flag": "standalone_argument_none",
            "short_flag": "groupable_argument_none",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def kind(self) -> OptionKind:
        """Return the family this behavior class belongs to."""
        match self:
            case OptionType.EARLY_ARGUMENT_NONE:
                return OptionKind.EARLY
            case (
                OptionType.STANDALONE_ARGUMENT_NONE
                | OptionType.STANDALONE_ARGUMENT_REQUIRED
                | OptionType.STANDALONE_ARGUMENT_OPTIONAL
            ):
                return OptionKind.STANDALONE
            case OptionType.GROUPABLE_ARGUMENT_NONE | OptionType.GROUPABLE_ARGUMENT_REQUIRED:
                return OptionKind.GROUPABLE

    def is_early(self) -> bool:
        return self.kind is OptionKind.EARLY

    def is_standalone(self) -> bool:
        return self.kind is OptionKind.STANDALONE

    def is_groupable(self) -> bool:
        return self.kind is OptionKind.GROUPABLE

    def __str__(self) -> str:
        """Return the string representation of the option type."""
        return self.value


@dataclass(frozen=True)
class Option:
    """
    Represents one recognized command-line flag.

    Attributes:
        prefix (str): Prefix used to write the option (e.g. `-`).
        name (str): Option name without the prefix (e.g. `f`).
        type (OptionType): Behavior class of the option.
        default_value (str): Value assigned when an optional argument is omitted.
    """

    prefix: str
    name: str
    type: OptionType
    default_value: str = ""

    def flag(self) -> str:
        """Return the option as written on the command line."""
        return f"{self.prefix}{self.name}"

    def __str__(self) -> str:
        return self.flag()


def _new_short_option(short_name: str, option_type: OptionType) -> Option | None:
    if not short_name:
        return None
    return Option(prefix=SHORT_PREFIX, name=short_name, type=option_type)


def _new_long_option(long_name: str, option_type: OptionType) -> Option | None:
    if not long_name:
        return None
    return Option(prefix=LONG_PREFIX, name=long_name, type=option_type)


def _new_option_list(*options: Option | None) -> list[Option]:
    return [option for option in options if option is not None]


def new_option_with_argument_none(short_name: str, long_name: str) -> list[Option]:
    """
    Create GNU-style options taking no argument.

    The short option uses `-` and is groupable, the long option uses `--`
    and is standalone. An empty name skips the corresponding option.
    """
    return _new_option_list(
        _new_short_option(short_name, OptionType.GROUPABLE_ARGUMENT_NONE),
        _new_long_option(long_name, OptionType.STANDALONE_ARGUMENT_NONE),
    )


def new_early_option(short_name: str, long_name: str) -> list[Option]:
    """
    Create GNU-style early options.

    Typically used for `-h` and `--help` so that the help text is shown
    regardless of whether the rest of the command line is correct.
    """
    return _new_option_list(
        _new_short_option(short_name, OptionType.EARLY_ARGUMENT_NONE),
        _new_long_option(long_name, OptionType.EARLY_ARGUMENT_NONE),
    )


def new_option_with_argument_required(short_name: str, long_name: str) -> list[Option]:
    """Create GNU-style options requiring an argument."""
    return _new_option_list(
        _new_short_option(short_name, OptionType.GROUPABLE_ARGUMENT_REQUIRED),
        _new_long_option(long_name, OptionType.STANDALONE_ARGUMENT_REQUIRED),
    )


def new_long_option_with_argument_optional(
    long_name: str, default_value: str
) -> list[Option]:
    """Create a `--long` option whose argument defaults to `default_value`."""
    if not long_name:
        return []
    return [
        Option(
            prefix=LONG_PREFIX,
            name=long_name,
            type=OptionType.STANDALONE_ARGUMENT_OPTIONAL,
            default_value=default_value,
        )
    ]
