from __future__ import annotations

from typing import Any, Callable, Dict, Optional, TextIO

from .node_kinds import NK, OP_MARKERS, PASSTHROUGH_KINDS
from .runtime import Frame, VnmRuntimeError, VnmValue
from .tree import Node, Tree, is_tree

from .eval.blocks import eval_passthrough
from .eval.control import eval_if, eval_marker, eval_null
from .eval.expr import (
    eval_and,
    eval_comparison,
    eval_div,
    eval_mod,
    eval_mul,
    eval_neg,
    eval_not,
    eval_or,
    eval_pos,
    eval_sum,
)
from .eval.literals import eval_false, eval_number, eval_print, eval_string, eval_true

# ---------------- Public API ----------------

def eval_expr(ast: Node, data: Any=None, out: Optional[TextIO]=None, frame: Optional[Frame]=None) -> VnmValue:
    """Evaluate a finished tree; program output goes to `out` (stdout by default)."""
    if frame is None:
        frame = Frame(out=out, data=data)

    return eval_node(ast, frame)

# ---------------- Core evaluator ----------------

def eval_node(n: Node, frame: Frame) -> VnmValue:
    if not is_tree(n):
        raise VnmRuntimeError(f"Not a tree node: {n!r}")

    handler = _NODE_DISPATCH.get(n.data)
    if handler is None:
        raise VnmRuntimeError(f"Unknown node: {n.data!r}")

    return handler(n, frame)

_NODE_DISPATCH: Dict[NK, Callable[[Tree, Frame], VnmValue]] = {
    NK.PRINT: lambda n, frame: eval_print(n, frame, eval_node),
    NK.PRINT_LN: lambda n, frame: eval_print(n, frame, eval_node, newline=True),
    NK.NUMBER: eval_number,
    NK.STRING: eval_string,
    NK.TRUE: eval_true,
    NK.FALSE: eval_false,
    NK.SUM: lambda n, frame: eval_sum(n, frame, eval_node),
    NK.MUL: lambda n, frame: eval_mul(n, frame, eval_node),
    NK.DIV: lambda n, frame: eval_div(n, frame, eval_node),
    NK.MOD: lambda n, frame: eval_mod(n, frame, eval_node),
    NK.NEG: lambda n, frame: eval_neg(n, frame, eval_node),
    NK.POS: lambda n, frame: eval_pos(n, frame, eval_node),
    NK.OR: lambda n, frame: eval_or(n, frame, eval_node),
    NK.AND: lambda n, frame: eval_and(n, frame, eval_node),
    NK.NOT: lambda n, frame: eval_not(n, frame, eval_node),
    NK.COMPARISON: lambda n, frame: eval_comparison(n, frame, eval_node),
    NK.IF: lambda n, frame: eval_if(n, frame, eval_node),
    NK.NULL: eval_null,
}

for _marker in OP_MARKERS.values():
    _NODE_DISPATCH[_marker] = eval_marker

for _kind in PASSTHROUGH_KINDS:
    _NODE_DISPATCH[_kind] = lambda n, frame: eval_passthrough(n, frame, eval_node)

_missing = set(NK) - set(_NODE_DISPATCH)
if _missing:
    raise VnmRuntimeError(f"node kinds without a handler: {sorted(k.value for k in _missing)}")
del _marker, _kind, _missing
