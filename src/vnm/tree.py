"""AST node type consumed by the evaluator, plus helpers for walking it.

Nodes are built once by the front end (or by hand in tests) and are
read-only afterwards: children are stored as a tuple and attribute
assignment after construction is rejected.
"""
from __future__ import annotations
from typing import Any, Iterable, Optional, Sequence, Tuple, TypeGuard

from .node_kinds import ARITY, NK, OP_MARKERS, CmpOp


class Tree:
    """Immutable AST node tagged with a node kind."""
    __slots__ = ('data', 'children', 'value')

    data: NK
    children: Tuple['Tree', ...]
    value: Any

    def __init__(self, data: NK, children: Iterable[Tree] = (), value: Any = None):
        object.__setattr__(self, 'data', data)
        object.__setattr__(self, 'children', tuple(children))
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Tree nodes are immutable (tried to set {name!r})")

    def __repr__(self) -> str:
        if self.value is None:
            return f'Tree({self.data.value!r}, {list(self.children)!r})'
        return f'Tree({self.data.value!r}, {list(self.children)!r}, value={self.value!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return False
        return self.data == other.data and self.value == other.value and self.children == other.children

    def __hash__(self) -> int:
        return hash((self.data, self.value, self.children))

    def pretty(self, indent: str = '  ') -> str:
        """Return pretty-printed tree representation."""
        def _pretty(node: Tree, level: int = 0) -> str:
            head = f'{indent * level}{node.data.value}'
            if node.value is not None:
                shown = node.value.value if isinstance(node.value, CmpOp) else node.value
                head += f'\t{shown!r}'
            lines = [head + '\n']
            for child in node.children:
                lines.append(_pretty(child, level + 1))
            return ''.join(lines)
        return _pretty(self)


Node = Tree


def node(kind: NK, *children: Tree, value: Any = None) -> Tree:
    """Build a node, enforcing the fixed arity of kinds that have one."""
    expected = ARITY.get(kind)
    if expected is not None and len(children) != expected:
        raise ValueError(f"{kind.value} takes {expected} children, got {len(children)}")

    if kind in OP_MARKERS.values() and children:
        raise ValueError(f"operator marker {kind.value} takes no children")

    return Tree(kind, children, value)

def comparison(left: Tree, op: CmpOp, right: Tree) -> Tree:
    """Build `left op right` with the operator attached as the node payload."""
    return Tree(NK.COMPARISON, (left, Tree(OP_MARKERS[op]), right), op)

def is_tree(node: Any) -> TypeGuard[Tree]:
    return isinstance(node, Tree)

def tree_label(node: Any) -> Optional[NK]:
    return node.data if is_tree(node) else None

def tree_children(node: Any) -> Sequence[Tree]:
    if not is_tree(node):
        return ()

    return node.children

