"""simple.py

A curl-like command line. Try:

    python simple.py https://example.com/ -fsSLo index.html
    python simple.py --nonexistent -h
"""
import sys

from flagparser import FlagParserError, new_parser, values_to_args
from flagparser.utils import setup_logging

setup_logging()

parser = (
    new_parser()
    .set_min_max_positional_arguments(1, None)
    .add_early_option("h", "help")
    .add_option_with_argument_none("f", "fail")
    .add_option_with_argument_none("L", "location")
    .add_option_with_argument_required("o", "output")
    .add_option_with_argument_none("S", "show-error")
    .add_option_with_argument_none("s", "silent")
    .add_long_option_with_argument_optional("http", "1.1")
)

if __name__ == "__main__":
    try:
        values = parser.parse(sys.argv[1:])
    except FlagParserError as error:
        print(f"curl: {error}", file=sys.stderr)
        sys.exit(2)
    print(" ".join(values_to_args(values)))
