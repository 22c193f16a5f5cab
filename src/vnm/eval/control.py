from __future__ import annotations

from ..node_kinds import NK
from ..runtime import Frame, VnmNull, VnmValue
from ..tree import Tree, tree_label
from .common import EvalFunc, eval_bool

def eval_if(node: Tree, frame: Frame, eval_func: EvalFunc) -> VnmValue:
    cond_node, then_node, *rest = node.children

    if eval_bool(cond_node, frame, eval_func):
        return eval_func(then_node, frame)

    if rest:
        else_node = rest[0]
        if tree_label(else_node) != NK.NULL:
            return eval_func(else_node, frame)

    return VnmNull()

def eval_null(_: Tree, __: Frame) -> VnmNull:
    return VnmNull()

def eval_marker(_: Tree, __: Frame) -> VnmNull:
    """Operator markers are read by the comparison handler, never evaluated."""
    return VnmNull()
