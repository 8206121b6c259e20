# flagparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""loader.py
Load `Parser` declarations from YAML or TOML files.

`max_positional_arguments` accepts null, `-1`, `"inf"` or `"unbounded"` for
no upper bound. TOML has no null, so use one of the others there.

Example (YAML):

    min_positional_arguments: 1
    max_positional_arguments: null
    separator: "--"
    early:
      - {short: h, long: help}
    flags:
      - {short: f, long: fail}
    required:
      - {short: o, long: output}
    optional:
      - {long: http, default: "1.1"}
    options:
      - {prefix: "+", name: short, type: standalone_argument_none}

Only the file layout is checked here. Option invariants (duplicate names,
ambiguous prefixes, ...) are still reported by `Parser.parse()`.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from flagparser.exceptions import LoaderError
from flagparser.logger import logger
from flagparser.option import (
    Option,
    OptionType,
    new_early_option,
    new_long_option_with_argument_optional,
    new_option_with_argument_none,
    new_option_with_argument_required,
)
from flagparser.parser import Parser

UNBOUNDED = -1
UNBOUNDED_NAMES = frozenset({"inf", "unbounded", "none"})


class RawOption(BaseModel):
    """A fully specified option."""

    prefix: str
    name: str
    type: OptionType
    default_value: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> OptionType:
        if isinstance(value, OptionType):
            return value
        return OptionType(value)

    def to_option(self) -> Option:
        return Option(
            prefix=self.prefix,
            name=self.name,
            type=self.type,
            default_value=self.default_value,
        )


class ShortLongOption(BaseModel):
    """A GNU-style short and/or long option pair."""

    short: str = ""
    long: str = ""


class OptionalArgumentOption(BaseModel):
    """A GNU-style long option with an optional argument."""

    long: str
    default: str = ""


class ParserDefinition(BaseModel):
    """Declarative `Parser` configuration model."""

    disable_permute: bool = False
    min_positional_arguments: int = Field(default=0, ge=0)
    max_positional_arguments: int | None = Field(default=0, ge=0)
    separator: str = "--"
    early: list[ShortLongOption] = Field(default_factory=list)
    flags: list[ShortLongOption] = Field(default_factory=list)
    required: list[ShortLongOption] = Field(default_factory=list)
    optional: list[OptionalArgumentOption] = Field(default_factory=list)
    options: list[RawOption] = Field(default_factory=list)

    @field_validator("max_positional_arguments", mode="before")
    @classmethod
    def validate_unbounded(cls, value: Any) -> Any:
        """Map `-1`, `"inf"` and `"unbounded"` to None, since TOML has no null."""
        if value == UNBOUNDED or (
            isinstance(value, str) and value.strip().lower() in UNBOUNDED_NAMES
        ):
            return None
        return value

    @model_validator(mode="after")
    def validate_positional_bounds(self) -> ParserDefinition:
        if (
            self.max_positional_arguments is not None
            and self.min_positional_arguments > self.max_positional_arguments
        ):
            raise ValueError(
                "min_positional_arguments cannot exceed max_positional_arguments,"
                " set max_positional_arguments = -1 for no upper bound"
            )
        return self

    def to_parser(self) -> Parser:
        parser = Parser(
            disable_permute=self.disable_permute,
            min_positional_arguments=self.min_positional_arguments,
            max_positional_arguments=self.max_positional_arguments,
            options_arguments_separator=self.separator,
        )
        for entry in self.early:
            parser = parser.add_option(*new_early_option(entry.short, entry.long))
        for entry in self.flags:
            parser = parser.add_option(
                *new_option_with_argument_none(entry.short, entry.long)
            )
        for entry in self.required:
            parser = parser.add_option(
                *new_option_with_argument_required(entry.short, entry.long)
            )
        for entry in self.optional:
            parser = parser.add_option(
                *new_long_option_with_argument_optional(entry.long, entry.default)
            )
        return parser.add_option(*(raw.to_option() for raw in self.options))


def loader(file_path: Path | str) -> Parser:
    """
    Load a `Parser` declaration from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the `.yaml`, `.yml` or `.toml` file.

    Returns:
        Parser: The declared parser.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the file is not a mapping.
        LoaderError: If the file does not match the `ParserDefinition` schema.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping.\n"
            "Example:\n"
            "min_positional_arguments: 1\n"
            "flags:\n"
            "  - short: 'v'\n"
            "    long: 'verbose'"
        )

    try:
        definition = ParserDefinition.model_validate(raw_config)
    except ValidationError as error:
        logger.error("Invalid parser definition in '%s': %s", path, error)
        raise LoaderError(f"Invalid parser definition in '{path}': {error}") from error

    parser = definition.to_parser()
    logger.debug("Loaded parser with %d option(s) from '%s'", len(parser.options), path)
    return parser
