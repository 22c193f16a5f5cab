from __future__ import annotations

from ..runtime import Frame, VnmBool, VnmInt, VnmNull, VnmString, VnmValue, is_absent, make_int
from ..tree import Tree
from .common import EvalFunc, stringify

def eval_number(node: Tree, _: Frame) -> VnmInt:
    raw = node.value
    # the front end may hand over an already-parsed int
    if isinstance(raw, int) and not isinstance(raw, bool):
        return make_int(raw)

    return make_int(int(str(raw), 10))

def eval_string(node: Tree, _: Frame) -> VnmString:
    raw = str(node.value)

    if len(raw) >= 2 and raw.startswith('"'):
        return VnmString(raw[1:-1])

    return VnmString(raw)

def eval_true(_: Tree, __: Frame) -> VnmBool:
    return VnmBool(True)

def eval_false(_: Tree, __: Frame) -> VnmBool:
    return VnmBool(False)

def eval_print(node: Tree, frame: Frame, eval_func: EvalFunc, newline: bool = False) -> VnmValue:
    """Emit each non-null child value as soon as it is produced."""
    # children run without the caller's context
    inner = frame.without_data()

    for child in node.children:
        result = eval_func(child, inner)
        if not is_absent(result):
            frame.emit(stringify(result))

    if newline:
        frame.emit("\n")

    return VnmNull()
