from __future__ import annotations

from typing import Any, Callable

from ..runtime import Frame, VnmBool, VnmInt, VnmString, VnmTypeError, VnmValue, is_vnm_value
from ..tree import Node

EvalFunc = Callable[[Node, Frame], VnmValue]

def require_int(value: Any) -> int:
    if not isinstance(value, VnmInt):
        raise VnmTypeError("integer", value)

    return value.value

def require_bool(value: Any) -> bool:
    if not isinstance(value, VnmBool):
        raise VnmTypeError("boolean", value)

    return value.value

def eval_int(node: Node, frame: Frame, eval_func: EvalFunc) -> int:
    return require_int(eval_func(node, frame))

def eval_bool(node: Node, frame: Frame, eval_func: EvalFunc) -> bool:
    return require_bool(eval_func(node, frame))

def stringify(value: Any) -> str:
    if isinstance(value, VnmString):
        return value.value

    if isinstance(value, VnmInt):
        return str(value.value)

    if isinstance(value, VnmBool):
        return "true" if value.value else "false"

    if is_vnm_value(value):
        return repr(value)

    return str(value)
