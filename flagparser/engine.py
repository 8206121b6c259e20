# flagparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The token-consuming state machine at the heart of flagparser.

`do_parse()` pops tokens from the front of the pending deque until it is empty
and appends one or more values per token to either the `options` or the
`positionals` deque, never both.

States:
- normal: classify each token by kind and, for options, by the families
  declared under its prefix.
- positionals-only: entered after the separator or, when permutation is
  disabled, after the first positional argument. Every remaining token is
  appended verbatim as a positional argument.

Standalone options occupy a whole token (`--output=FILE`, `--output FILE`).
Groupable options are single characters sharing one prefix (`-xvzf FILE`,
`-xvzfFILE`). A required argument given as the next token is consumed whole,
whatever it looks like.
"""
from __future__ import annotations

from flagparser.config import ParserConfig
from flagparser.deque import Deque
from flagparser.exceptions import (
    InvariantViolation,
    OptionRequiresArgumentError,
    OptionRequiresNoArgumentError,
)
from flagparser.logger import logger
from flagparser.option import OptionKind, OptionType
from flagparser.tokens import (
    OptionsArgumentsSeparatorToken,
    OptionToken,
    PositionalArgumentToken,
    Token,
)
from flagparser.value import (
    OptionsArgumentsSeparatorValue,
    OptionValue,
    PositionalArgumentValue,
    Value,
)


def _pop_argument(pending: Deque[Token]) -> str | None:
    token, ok = pending.front()
    if not ok:
        return None
    pending.pop_front()
    return str(token)


def _split_name(name: str) -> tuple[str, str]:
    index = name.find("=")
    if index > 0:
        return name[:index], name[index + 1 :]
    return name, ""


def parse_standalone_option(
    config: ParserConfig,
    token: OptionToken,
    pending: Deque[Token],
    options: Deque[Value],
) -> None:
    """Parse a token holding a single standalone option."""
    optname, optvalue = _split_name(token.name)
    logger.debug("optname=%r, optvalue=%r", optname, optvalue)

    option = config.find_option(token, optname, OptionKind.STANDALONE)
    logger.debug("Found option: %r", option)

    match option.type:
        case OptionType.STANDALONE_ARGUMENT_NONE:
            if optname != token.name:
                raise OptionRequiresNoArgumentError(option=option, token=token)

        case OptionType.STANDALONE_ARGUMENT_OPTIONAL:
            if not optvalue:
                optvalue = option.default_value

        case OptionType.STANDALONE_ARGUMENT_REQUIRED:
            if optname == token.name:
                argument = _pop_argument(pending)
                if argument is None:
                    raise OptionRequiresArgumentError(option=option, token=token)
                optvalue = argument

        case _:
            raise InvariantViolation(f"unhandled option type: {option.type!r}")

    value = OptionValue(option=option, token=token, value=optvalue)
    options.push_back(value)
    logger.debug("Added option value: %r", value)


def parse_groupable_option(
    config: ParserConfig,
    token: OptionToken,
    pending: Deque[Token],
    options: Deque[Value],
) -> None:
    """Parse a token holding one or more grouped single-character options."""
    remaining = token.name
    while remaining:
        optname, remaining = remaining[0], remaining[1:]
        logger.debug("optname=%r", optname)

        option = config.find_option(token, optname, OptionKind.GROUPABLE)
        logger.debug("Found option: %r", option)

        optvalue = ""
        match option.type:
            case OptionType.GROUPABLE_ARGUMENT_NONE:
                pass

            case OptionType.GROUPABLE_ARGUMENT_REQUIRED:
                if remaining:
                    # `-vfFILE`
                    optvalue, remaining = remaining, ""
                else:
                    argument = _pop_argument(pending)
                    if argument is None:
                        raise OptionRequiresArgumentError(option=option, token=token)
                    optvalue = argument

            case _:
                raise InvariantViolation(f"unhandled option type: {option.type!r}")

        value = OptionValue(option=option, token=token, value=optvalue)
        options.push_back(value)
        logger.debug("Added option value: %r", value)


def do_parse(
    config: ParserConfig,
    pending: Deque[Token],
    options: Deque[Value],
    positionals: Deque[Value],
) -> None:
    """
    Consume every token in `pending`, filling the `options` and `positionals` deques.

    Raises:
        ParseError: On the first unknown option or misused option argument.
        InvariantViolation: If an option token has a prefix with no declared family.
    """
    only_positionals = False

    while not pending.empty():
        token, _ = pending.front()
        pending.pop_front()
        logger.debug("Processing token: %r", token)

        match token:
            case PositionalArgumentToken():
                positional = PositionalArgumentValue(token=token, value=token.value)
                positionals.push_back(positional)
                logger.debug("Added positional argument value: %r", positional)
                if config.disable_permute and not only_positionals:
                    logger.debug("No permute: treating everything else as positional")
                    only_positionals = True

            case OptionsArgumentsSeparatorToken():
                separator = OptionsArgumentsSeparatorValue(
                    token=token, separator=token.separator
                )
                positionals.push_back(separator)
                logger.debug("Seen separator: treating everything else as positional")
                only_positionals = True

            case OptionToken() if only_positionals:
                positional = PositionalArgumentValue(token=token, value=str(token))
                positionals.push_back(positional)
                logger.debug("Added option as positional value: %r", positional)

            case OptionToken():
                kinds = config.prefix_kinds(token.prefix)
                if OptionKind.STANDALONE in kinds:
                    parse_standalone_option(config, token, pending, options)
                elif OptionKind.GROUPABLE in kinds:
                    parse_groupable_option(config, token, pending, options)
                else:
                    raise InvariantViolation(
                        f"unhandled option prefix: {token.prefix!r}"
                    )

            case _:
                raise InvariantViolation(f"unhandled token: {token!r}")
