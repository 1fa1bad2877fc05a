import sys
import logging
import argparse
from typing import List, Optional

from lprp import ReaderError, Token, read
from lprp.constants import DEFAULT_MAX_DEPTH, PROMPT, QUIT_COMMANDS


def _format(token: Token, sexp: bool) -> str:
    return str(token) if sexp else repr(token)


def set_log_level(level: int):
    """Set the level of the package logger and of every module logger under it."""
    # module loggers pin their own level
    for name in ['lprp'] + [name for name in logging.root.manager.loggerDict if name.startswith('lprp.')]:
        logging.getLogger(name).setLevel(level)


def read_(args: argparse.Namespace):
    """Read a single expression given on the command line and print it."""
    try:
        token = read(args.expr, max_depth=args.max_depth, strict=not args.lenient)
    except ReaderError as e:
        print(f'ERROR: {e.description}: {e}', file=sys.stderr)
        sys.exit(1)
    print(_format(token, args.sexp))


def repl(args: argparse.Namespace):
    """Read expressions line by line from standard input and print them."""
    while True:
        print(args.prompt, end='', flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            break
        line = line.rstrip('\n')
        if line in QUIT_COMMANDS:
            break
        try:
            token = read(line, max_depth=args.max_depth, strict=not args.lenient)
        except ReaderError as e:
            print(f'{e.description}: {e}', file=sys.stderr)
            if args.recover:
                continue
            sys.exit(1)
        print(_format(token, args.sexp))


def main(argv: Optional[List[str]] = None):
    """Entry point of CLI commands."""
    parser = argparse.ArgumentParser(prog='lprp', description='read S-expressions and print their syntax trees')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='show info logs (-v) or debug logs (-vv)')
    subparsers = parser.add_subparsers()

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--max-depth', default=DEFAULT_MAX_DEPTH, type=int,
                        help=f'maximum nesting depth of lists and quotes (default: {DEFAULT_MAX_DEPTH})')
    common.add_argument('--lenient', action='store_true', default=False,
                        help='accept unterminated strings and lists instead of failing')
    common.add_argument('--sexp', action='store_true', default=False,
                        help='print results as S-expressions instead of token structures')

    # subcommand: read
    parser_read = subparsers.add_parser('read', parents=[common], help='read one expression and print it')
    parser_read.add_argument('expr', type=str, help='expression to read')
    parser_read.set_defaults(handler=read_)

    # subcommand: repl
    parser_repl = subparsers.add_parser('repl', parents=[common], help='read expressions interactively')
    parser_repl.add_argument('--prompt', default=PROMPT, type=str,
                             help=f'prompt string (default: "{PROMPT}")')
    parser_repl.add_argument('--recover', action='store_true', default=False,
                             help='keep the session alive after a read error')
    parser_repl.set_defaults(handler=repl)

    args = parser.parse_args(argv)
    if args.verbose > 0:
        level = logging.DEBUG if args.verbose >= 2 else logging.INFO
        logging.basicConfig(level=level)
        set_log_level(level)
    if not hasattr(args, 'handler'):
        parser.print_help(file=sys.stderr)
        sys.exit(2)
    if args.max_depth < 1:
        parser.error(f'--max-depth must be >= 1, but got {args.max_depth}')
    args.handler(args)


if __name__ == '__main__':
    main()
