#!/usr/bin/env python3
"""
repl.py

Interactive front end for the Styx calculator.

Usage examples:
    styx                         # interactive prompt
    styx -e "+ 1 (* 2 3)"        # evaluate one expression and exit
    styx -f exprs.txt            # evaluate a file, one expression per line
    styx -f exprs.txt --csv out.csv
"""

import argparse
import logging
import os
import sys

from engine.batch import evaluate_file
from styx import __version__
from styx.ast_utils import ast_to_pretty
from styx.config import Settings, get_settings
from styx.eval import EvaluationContext, eval_node
from styx.parser import ParseFailure, parse_program
from styx.values import render

try:
    import readline  # line editing and history where the platform has it
except ImportError:
    readline = None

logger = logging.getLogger("styx.repl")

BANNER = f"Styx Version {__version__}\nPress Ctrl+c to Exit\n"


def run_line(line: str, settings: Settings, show_ast: bool = False) -> str:
    """Parse and evaluate one line, returning the text to print for it."""
    try:
        ast = parse_program(line)
    except ParseFailure as e:
        return str(e)
    out = render(eval_node(EvaluationContext(settings.max_depth), ast), settings.float_format)
    if show_ast and ast.depth <= settings.max_depth:
        return ast_to_pretty(ast) + "\n" + out
    return out


def _load_history(path):
    if readline is None or not path:
        return
    try:
        readline.read_history_file(path)
    except FileNotFoundError:
        pass


def _save_history(path):
    if readline is None or not path:
        return
    try:
        readline.write_history_file(path)
    except OSError as e:
        logger.warning("could not save history to %s: %s", path, e)


def repl(settings: Settings, read=input, write=print, show_ast: bool = False):
    write(BANNER)
    history = os.path.expanduser(settings.history_file) if settings.history_file else None
    _load_history(history)
    try:
        while True:
            try:
                line = read(settings.prompt)
            except (EOFError, KeyboardInterrupt):
                write("")
                break
            write(run_line(line, settings, show_ast))
    finally:
        _save_history(history)


def main(argv=None):
    ap = argparse.ArgumentParser(prog="styx", description="Prefix-notation calculator.")
    ap.add_argument("-e", "--expr", type=str, default=None, help="Evaluate one expression and exit.")
    ap.add_argument("-f", "--file", type=str, default=None,
                    help="Evaluate every line of a file and exit.")
    ap.add_argument("--csv", type=str, default=None,
                    help="With --file, write the full result table to this CSV path.")
    ap.add_argument("--ast", action="store_true", help="Print the syntax tree before each result.")
    args = ap.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, stream=sys.stderr)

    if args.file:
        df = evaluate_file(args.file, settings)
        if args.csv:
            df.to_csv(args.csv, index=False)
        else:
            for out in df["output"]:
                print(out)
        return 0 if df["ok"].all() else 1

    if args.expr is not None:
        print(run_line(args.expr, settings, args.ast))
        return 0

    repl(settings, show_ast=args.ast)
    return 0


if __name__ == "__main__":
    sys.exit(main())
