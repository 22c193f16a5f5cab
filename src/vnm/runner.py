from __future__ import annotations

import sys
import traceback
from pathlib import Path
from typing import Any, Optional, TextIO

from lark import UnexpectedInput

from .parse_auto import VnmBuilder, get_parser
from .evaluator import eval_expr
from .node_kinds import NK
from .runtime import Frame, VnmRuntimeError, VnmValue, is_absent
from .tree import Tree
from .utils import debug_py_trace_enabled

def parse_source(src: str, grammar_path: Optional[str]=None) -> Tree:
    parser = get_parser(grammar_path)
    tree = parser.parse(src)
    ast = VnmBuilder().transform(tree)
    return ast

def run(src: str, out: Optional[TextIO]=None, data: Any=None, grammar_path: Optional[str]=None) -> VnmValue:
    ast = parse_source(src, grammar_path=grammar_path)
    # Unwrap the program body only when it holds a single statement so a
    # lone expression yields its own value.
    if ast.data == NK.BODY and len(ast.children) == 1:
        ast = ast.children[0]

    return eval_expr(ast, frame=Frame(out=out, data=data))

def _load_source(arg: Optional[str]) -> str:
    """
    Resolve CLI input into source text.
    - None or "-" => read stdin.
    - Existing path => read file contents.
    - Otherwise treat the argument as literal source.
    """

    if arg is None or arg == "-":
        data = sys.stdin.read()
        if not data:
            raise SystemExit("No input provided on stdin")
        return data

    candidate = Path(arg)
    if candidate.exists():
        return candidate.read_text(encoding="utf-8")

    return arg

def report_error(exc: BaseException) -> None:
    print(f"Error: {exc}", file=sys.stderr)

    if debug_py_trace_enabled() and exc.__traceback__ is not None:
        print("\nPython traceback:", file=sys.stderr)
        print("".join(traceback.format_tb(exc.__traceback__)), file=sys.stderr, end="")

def main(argv: Optional[list[str]]=None) -> int:
    grammar_path = None
    show_tree = False
    arg = None
    it = iter(sys.argv[1:] if argv is None else argv)

    for token in it:
        if token == "--tree":
            show_tree = True
            continue

        if token == "--repl":
            from .repl import repl
            repl()
            return 0

        if token.startswith("--grammar="):
            grammar_path = token.split("=", 1)[1]
            continue

        if token == "--grammar":
            try:
                grammar_path = next(it)
            except StopIteration:
                raise SystemExit("--grammar flag requires a path") from None
            continue

        if arg is None:
            arg = token
        else:
            raise SystemExit(f"Unexpected argument: {token}")

    source = _load_source(arg or "-")

    try:
        if show_tree:
            print(parse_source(source, grammar_path=grammar_path).pretty(), end="")
            return 0

        result = run(source, grammar_path=grammar_path)
    except (UnexpectedInput, VnmRuntimeError) as exc:
        sys.stdout.flush()
        report_error(exc)
        return 1

    if not is_absent(result):
        print(result)

    return 0

if __name__ == "__main__":
    sys.exit(main())
