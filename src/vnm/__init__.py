"""Tree-walking evaluator for the VNM language."""

from .evaluator import eval_expr, eval_node
from .node_kinds import NK, CmpOp
from .runner import parse_source, run
from .tree import Tree, comparison, node

__all__ = [
    "eval_expr",
    "eval_node",
    "NK",
    "CmpOp",
    "parse_source",
    "run",
    "Tree",
    "comparison",
    "node",
]
