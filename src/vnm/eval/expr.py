from __future__ import annotations

from typing import Optional

from ..node_kinds import MARKER_OPS, CmpOp
from ..runtime import Frame, VnmArithmeticError, VnmBool, VnmInt, VnmValue, make_int, trunc_divmod
from ..tree import Tree, tree_label
from .common import EvalFunc, eval_bool, eval_int

# ---------------- Arithmetic ----------------

def eval_sum(node: Tree, frame: Frame, eval_func: EvalFunc) -> VnmInt:
    total = 0

    for child in node.children:
        total += eval_int(child, frame, eval_func)

    return make_int(total)

def _binary_operands(node: Tree, frame: Frame, eval_func: EvalFunc) -> tuple[int, int]:
    lhs_node, rhs_node = node.children
    lhs = eval_int(lhs_node, frame, eval_func)
    rhs = eval_int(rhs_node, frame, eval_func)
    return lhs, rhs

def eval_mul(node: Tree, frame: Frame, eval_func: EvalFunc) -> VnmInt:
    lhs, rhs = _binary_operands(node, frame, eval_func)
    return make_int(lhs * rhs)

def eval_div(node: Tree, frame: Frame, eval_func: EvalFunc) -> VnmInt:
    lhs, rhs = _binary_operands(node, frame, eval_func)
    if rhs == 0:
        raise VnmArithmeticError("Division by zero")

    quotient, _ = trunc_divmod(lhs, rhs)
    return VnmInt(quotient)

def eval_mod(node: Tree, frame: Frame, eval_func: EvalFunc) -> VnmInt:
    lhs, rhs = _binary_operands(node, frame, eval_func)
    if rhs == 0:
        raise VnmArithmeticError("Modulo by zero")

    _, remainder = trunc_divmod(lhs, rhs)
    return VnmInt(remainder)

def eval_neg(node: Tree, frame: Frame, eval_func: EvalFunc) -> VnmInt:
    return make_int(-eval_int(node.children[0], frame, eval_func))

def eval_pos(node: Tree, frame: Frame, eval_func: EvalFunc) -> VnmValue:
    return eval_func(node.children[0], frame)

# ---------------- Logic gates ----------------

def eval_or(node: Tree, frame: Frame, eval_func: EvalFunc) -> VnmBool:
    for child in node.children:
        if eval_bool(child, frame, eval_func):
            return VnmBool(True)

    return VnmBool(False)

def eval_and(node: Tree, frame: Frame, eval_func: EvalFunc) -> VnmBool:
    for child in node.children:
        if not eval_bool(child, frame, eval_func):
            return VnmBool(False)

    return VnmBool(True)

def eval_not(node: Tree, frame: Frame, eval_func: EvalFunc) -> VnmBool:
    return VnmBool(not eval_bool(node.children[0], frame, eval_func))

# ---------------- Comparison ----------------

def comparison_op(node: Tree) -> Optional[CmpOp]:
    """Operator attached at construction, else the one named by the marker child."""
    if isinstance(node.value, CmpOp):
        return node.value

    label = tree_label(node.children[1])
    if label is None:
        return None

    return MARKER_OPS.get(label)

def eval_comparison(node: Tree, frame: Frame, eval_func: EvalFunc) -> VnmBool:
    lhs_node, _, rhs_node = node.children
    lhs = eval_int(lhs_node, frame, eval_func)
    rhs = eval_int(rhs_node, frame, eval_func)

    match comparison_op(node):
        case CmpOp.LT:
            return VnmBool(lhs < rhs)
        case CmpOp.LE:
            return VnmBool(lhs <= rhs)
        case CmpOp.GT:
            return VnmBool(lhs > rhs)
        case CmpOp.GE:
            return VnmBool(lhs >= rhs)
        case CmpOp.EQ:
            return VnmBool(lhs == rhs)
        case CmpOp.NE:
            return VnmBool(lhs != rhs)
        case _:
            return VnmBool(False)
