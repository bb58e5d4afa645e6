"""CLI entry point for the treewalk interpreter.

Usage:
    python -m treewalk [-v|-vv|-vvv] [--example NAME]
    python -m treewalk [-v...] --ast <ast_json_file>
    python -m treewalk --emit-ast <out_file> [--example NAME]

Options:
  -v            Increase debug verbosity (can be repeated)
  --example     Built-in program to use: factorial (default) or book
  --ast         Execute an AST JSON file instead of a built-in program
  --emit-ast    Write the selected built-in program as AST JSON
  --no-print    Do not print the program text before its bindings

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero. After execution every variable binding is
printed as `name: value`, sorted by name.
"""

import argparse
import logging
import sys
from pathlib import Path

from .ast_json import dumps, loads_statement
from .environment import Environment
from .errors import TreeWalkError
from .executor import StatementExecutor
from .printer import render
from .programs import EXAMPLES

DEBUG_FILE = 'debug.txt'


def open_debug_log(path: str = DEBUG_FILE) -> logging.Handler:
    handler = logging.FileHandler(path, mode='w', encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(name)s: %(message)s'))
    package_logger = logging.getLogger('treewalk')
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    return handler


def close_debug_log(handler: logging.Handler) -> None:
    package_logger = logging.getLogger('treewalk')
    package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    handler.close()


def format_bindings(env: Environment) -> str:
    return ''.join(f"{name}: {env[name]}\n" for name in sorted(env))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="treewalk language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--example', choices=sorted(EXAMPLES), default='factorial',
                        help='built-in program to run or emit')
    parser.add_argument('--no-print', action='store_true', help='do not print the program text')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='OUT_FILE', help='write the built-in program as AST JSON')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    args = parser.parse_args(argv)

    handler = open_debug_log() if args.v > 0 else None
    try:
        execute_args(args)
    finally:
        if handler is not None:
            close_debug_log(handler)


def execute_args(args: argparse.Namespace) -> None:
    # Emit AST mode
    if args.emit_ast:
        out_path = Path(args.emit_ast)
        try:
            with open(out_path, 'w', encoding='utf-8') as out:
                out.write(dumps(EXAMPLES[args.example]()) + '\n')
        except OSError as e:
            print(f"Error: cannot write {out_path}: {e.strerror}", file=sys.stderr)
            sys.exit(1)
        print(str(out_path))
        return

    # Execute from AST JSON, or the built-in example
    if args.ast:
        ast_path = Path(args.ast)
        if not ast_path.exists():
            print(f"Error: file {ast_path} not found", file=sys.stderr)
            sys.exit(1)
        with open(ast_path, 'r', encoding='utf-8') as f:
            source = f.read()
        try:
            program = loads_statement(source)
        except TreeWalkError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        program = EXAMPLES[args.example]()

    executor = StatementExecutor(debug_level=args.v)
    try:
        if not args.no_print:
            sys.stdout.write(render(program))
        executor.run(program)
    except (TreeWalkError, RecursionError) as e:
        # bindings made before the failure are still reported
        sys.stdout.write(format_bindings(executor.env))
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.stdout.write(format_bindings(executor.env))


if __name__ == '__main__':
    main()
