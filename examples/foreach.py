"""foreach.py

Wrapping another command: permutation is disabled so that options after the
first positional argument belong to the wrapped command.

    python foreach.py -r git status -v
"""
import sys

from flagparser import FlagParserError, OptionValue, new_parser
from flagparser.utils import setup_logging

setup_logging()

parser = (
    new_parser()
    .with_disable_permute()
    .set_min_max_positional_arguments(1, None)
    .add_option_with_argument_none("r", "recursive")
)

if __name__ == "__main__":
    try:
        values = parser.parse(sys.argv[1:])
    except FlagParserError as error:
        print(f"foreach: {error}", file=sys.stderr)
        sys.exit(2)
    recursive = any(isinstance(value, OptionValue) for value in values)
    command = [
        arg for value in values if not isinstance(value, OptionValue) for arg in value.strings()
    ]
    print(f"recursive={recursive} command={command}")
