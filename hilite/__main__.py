# __main__.py

import argparse
import codecs
import sys

from rich.console import Console

from . import Interface
from .errors import HighlightError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='hilite', description='Highlight text for the terminal')
    parser.add_argument('files', nargs='*',
        help='Files to highlight (reads stdin when none are given)')
    parser.add_argument('--base',
        help='Escape restored after each token, e.g. "\\033[0m"')
    color = parser.add_mutually_exclusive_group()
    color.add_argument('--no-color',
        action='store_true',
        help='Write text unchanged')
    color.add_argument('--force-color',
        action='store_true',
        help='Color even when output is not a terminal')
    parser.add_argument('-i', '--interactive',
        action='store_true',
        help='Highlight lines typed at a prompt')
    parser.add_argument('--palette',
        action='store_true',
        help='Show the color palette and exit')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    enabled = False if args.no_color else (True if args.force_color else None)
    base = args.base
    if base and base.isascii():
        base = codecs.decode(base, 'unicode_escape')

    try:
        hl = Interface(
            base=base,
            enabled=enabled,
            logging_enabled=args.enable_logging,
            log_file=args.log_file
        )

        if args.palette:
            Console(force_terminal=hl.enabled).print(hl.palette())
            return 0

        if args.interactive:
            hl.interactive()
            return 0

        if not args.files:
            hl.write(sys.stdin.read())
        for path in args.files:
            with open(path, encoding='utf-8') as f:
                hl.write(f.read())
    except HighlightError as e:
        print(f"hilite: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"hilite: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
