from __future__ import annotations

from typing import Any

from ..runtime import Frame, VnmNull
from ..tree import Tree
from .common import EvalFunc

def eval_passthrough(node: Tree, frame: Frame, eval_func: EvalFunc) -> Any:
    """Visit children for their effects; the node itself yields the context value.

    Declarations, calls, loops, assignment, vector literals and membership
    tests all land here: nothing is stored, invoked or iterated.
    """
    for child in node.children:
        eval_func(child, frame)

    if frame.data is None:
        return VnmNull()

    return frame.data
