#!/usr/bin/env python3

import argparse as arg
from pathlib import Path
from typing import Iterable
from arith.frontend.errors import CalcError
from arith.frontend.nodes import dump
from arith.frontend.parser import parse
from arith.backend.interpreter import evaluate

def evaluate_line(src: str, show_tree=False) -> str:
    """Runs one line through the whole pipeline and returns what to print."""
    try:
        tree = parse(src)
        result = evaluate(tree)
    except CalcError as err:
        return str(err)

    output = f"result: {result}"
    if show_tree:
        output = dump(tree) + output
    return output

def run_lines(lines: Iterable[str], show_tree=False):
    for line in lines:
        line = line.strip()
        if line:
            print(evaluate_line(line, show_tree))

def repl(show_tree=False):
    import readline

    print("-------------------------------------\n... Starting calculator... (Q = exit)")
    try:
        while True:
            src = input(">> ")
            if not src:
                continue
            if src in ['q', 'Q']:
                break
            print(evaluate_line(src, show_tree))
    except EOFError:
        pass

def main(argv=None) -> int:
    parser = arg.ArgumentParser(
        prog='arith',
        description='Evaluates integer arithmetic expressions',
        epilog='Reads expressions interactively when neither -e nor a source file is given')

    parser.add_argument('source', type=Path, nargs='?',
                        help='file with one expression per line')
    parser.add_argument('-e', '--expr', dest='exprs', action='append', default=[],
                        help='expression to evaluate, may be repeated')
    parser.add_argument('-t', '--tree', dest='tree', action='store_true', default=False,
                        help='print the parsed tree before each result')
    args = parser.parse_args(argv)

    if args.exprs:
        run_lines(args.exprs, args.tree)
    if args.source:
        try:
            with open(args.source, 'r') as fd:
                run_lines(fd, args.tree)
        except OSError as err:
            print(f"Error reading input: {err}")
            return 1
    if not args.exprs and not args.source:
        repl(args.tree)
    return 0

if __name__ == '__main__':
    raise SystemExit(main())
