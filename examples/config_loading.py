"""config_loading.py

    python config_loading.py dig @8.8.8.8 -p53 IN +short A example.com
    python config_loading.py curl https://example.com/ -fsSLo index.html
"""
import sys
from pathlib import Path

from flagparser import values_to_args
from flagparser.loader import loader

here = Path(__file__).parent
parsers = {
    "curl": loader(here / "curl.yaml"),
    "dig": loader(here / "dig.toml"),
}

if __name__ == "__main__":
    if len(sys.argv) < 2 or sys.argv[1] not in parsers:
        print(f"usage: {sys.argv[0]} {{{','.join(parsers)}}} ARGS...", file=sys.stderr)
        sys.exit(2)
    parser = parsers[sys.argv[1]]
    print(" ".join(values_to_args(parser.parse(sys.argv[2:]))))
