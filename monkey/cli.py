#!/usr/bin/env python3
"""
monkey-lex: command-line driver for the Monkey lexer
====================================================

Tokenizes Monkey source and prints one token per line.

Usage:
    monkey-lex [FILE] [options]

Options:
    -e, --expr TEXT   Tokenize TEXT instead of reading a file
    --json            Output tokens as a JSON array
    --strict          Treat integer overflow as a hard error
    -v, --verbose     Enable debug logging

With no FILE and no --expr, source is read from stdin. When stdin is a
terminal an interactive prompt is started instead and each line entered is
tokenized on its own.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

from . import __version__
from .lexer import Lexer, LexerConfig, LexerError, Token

PROMPT = ">> "


def token_to_dict(token: Token) -> Dict[str, Any]:
    return {
        "type": token.type.name,
        "lexeme": token.lexeme,
        "value": token.value,
    }


def write_tokens(tokens: List[Token], out: TextIO, as_json: bool = False):
    if as_json:
        json.dump([token_to_dict(token) for token in tokens], out, indent=2)
        out.write("\n")
    else:
        for token in tokens:
            out.write(f"{token}\n")


def run_source(source: str, config: LexerConfig, as_json: bool = False,
               out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """
    Tokenize one piece of source and report the results.

    Returns:
        0 if the source scanned cleanly, 1 if any diagnostic was produced
    """
    out = out or sys.stdout
    err = err or sys.stderr
    lexer = Lexer(source, config)
    try:
        tokens = lexer.tokenize()
    except LexerError as e:
        err.write(str(e))
        return 1

    write_tokens(tokens, out, as_json)

    for diagnostic in lexer.get_diagnostics():
        err.write(str(diagnostic))

    return 1 if lexer.get_diagnostics() else 0


def repl(config: LexerConfig, as_json: bool = False,
         stdin: Optional[TextIO] = None, out: Optional[TextIO] = None) -> int:
    """Read-lex-print loop. Each line is scanned by a fresh lexer."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    out.write(f"Monkey lexer {__version__}. Press Ctrl-D to exit.\n")
    while True:
        out.write(PROMPT)
        out.flush()
        line = stdin.readline()
        if not line:
            out.write("\n")
            return 0
        run_source(line, config, as_json, out=out, err=out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monkey-lex",
        description="Tokenize Monkey source code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    monkey-lex program.mky                 # Tokenize a file
    monkey-lex -e 'let x = 5;'             # Tokenize an expression
    echo 'fn(a) { a }' | monkey-lex --json # JSON output from stdin
    monkey-lex                             # Interactive prompt
        """
    )

    parser.add_argument('file', nargs='?',
                        help='Source file to tokenize')
    parser.add_argument('-e', '--expr', metavar='TEXT',
                        help='Tokenize TEXT instead of a file')

    parser.add_argument('--json', action='store_true',
                        help='Output tokens in JSON format')
    parser.add_argument('--strict', action='store_true',
                        help='Abort on integer literal overflow')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for monkey-lex"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.file and args.expr is not None:
        parser.error("give either FILE or --expr, not both")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = LexerConfig(strict=args.strict)

    if args.expr is not None:
        config.filename = "<expr>"
        return run_source(args.expr, config, args.json)

    if args.file:
        config.filename = args.file
        try:
            with open(args.file, 'r', encoding='utf-8') as f:
                source = f.read()
        except OSError as e:
            sys.stderr.write(f"monkey-lex: cannot read {args.file}: {e.strerror}\n")
            return 1
        return run_source(source, config, args.json)

    config.filename = "<stdin>"
    if sys.stdin.isatty():
        return repl(config, args.json)

    return run_source(sys.stdin.read(), config, args.json)


if __name__ == "__main__":
    sys.exit(main())
