"""
Lark front end: builds the LALR parser from grammar.lark and lowers the
parse tree into vnm.tree.Tree nodes the evaluator understands.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from lark import Lark, Token, Transformer

from .node_kinds import NK, CmpOp
from .tree import Tree, comparison as make_comparison, tree_label

GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")


def read_grammar(grammar_path: Optional[str] = None) -> str:
    if grammar_path:
        return Path(grammar_path).read_text(encoding="utf-8")

    return GRAMMAR_PATH.read_text(encoding="utf-8")


def build_parser(grammar_text: Optional[str] = None, parser_kind: str = "lalr") -> Lark:
    if grammar_text is None:
        grammar_text = read_grammar()

    return Lark(grammar_text, parser=parser_kind, start="start", maybe_placeholders=True)


@lru_cache(maxsize=None)
def get_parser(grammar_path: Optional[str] = None) -> Lark:
    """Parser for `grammar_path` (bundled grammar when None), built once per path."""
    return build_parser(read_grammar(grammar_path))


def _ident(tok: Token) -> Tree:
    return Tree(NK.IDNUM, value=str(tok))


def _as_bool(node: Tree) -> Tree:
    """Retag references used where a boolean is expected."""
    match tree_label(node):
        case NK.IDNUM:
            return Tree(NK.IDBOOL, node.children, node.value)
        case NK.FN_CALL:
            return Tree(NK.BOOLEAN_CALL, node.children, node.value)
    return node


def _as_vec(node: Tree) -> Tree:
    if tree_label(node) == NK.IDNUM:
        return Tree(NK.IDVEC, node.children, node.value)
    return node


def _variadic(kind: NK, lhs: Tree, rhs: Tree) -> Tree:
    # left-recursive chains collapse into one variadic node
    if tree_label(lhs) == kind:
        return Tree(kind, lhs.children + (rhs,))
    return Tree(kind, (lhs, rhs))


class VnmBuilder(Transformer):
    """Lower Lark parse trees into evaluator nodes, bottom-up."""

    # ---- program structure ----

    def start(self, c):
        return Tree(NK.BODY, c)

    def block(self, c):
        return Tree(NK.CLAUSE, c)

    def args(self, c):
        return list(c)

    def params(self, c):
        return [_ident(tok) for tok in c]

    # ---- statements ----

    def print_stmt(self, c):
        args: Optional[List[Tree]] = c[0]
        return Tree(NK.PRINT, args or ())

    def println_stmt(self, c):
        args: Optional[List[Tree]] = c[0]
        return Tree(NK.PRINT_LN, args or ())

    def var_decl(self, c):
        *names, init = c
        children = [Tree(NK.IDENT_LIST, [_ident(tok) for tok in names])]

        if init is not None:
            children.append(init)

        return Tree(NK.VAR_DECL, children)

    def fn_decl(self, c):
        name, params, body = c
        return Tree(NK.FN_DECL, (Tree(NK.IDENT_LIST, params or ()), body), value=str(name))

    def assign(self, c):
        name, value = c
        return Tree(NK.ASSIGN, (_ident(name), value))

    def if_stmt(self, c):
        cond, then_body, else_body = c
        if else_body is None:
            else_body = Tree(NK.NULL)

        return Tree(NK.IF, (_as_bool(cond), then_body, else_body))

    def while_stmt(self, c):
        *conds, body = c
        if len(conds) == 1:
            head = _as_bool(conds[0])
        else:
            head = Tree(NK.CONDITION_LIST, [_as_bool(cond) for cond in conds])

        return Tree(NK.WHILE, (head, body))

    def for_stmt(self, c):
        name, source, body = c
        return Tree(NK.FOR, (_ident(name), _as_vec(source), body))

    def return_stmt(self, c):
        value = c[0]
        return Tree(NK.RETURN, () if value is None else (value,))

    # ---- logic ----

    def or_op(self, c):
        lhs, rhs = c
        return _variadic(NK.OR, _as_bool(lhs), _as_bool(rhs))

    def and_op(self, c):
        lhs, rhs = c
        return _variadic(NK.AND, _as_bool(lhs), _as_bool(rhs))

    def not_op(self, c):
        return Tree(NK.NOT, (_as_bool(c[0]),))

    # ---- comparison / membership ----

    def comparison(self, c):
        lhs, op, rhs = c
        return make_comparison(lhs, CmpOp(str(op)), rhs)

    def in_op(self, c):
        lhs, rhs = c
        return Tree(NK.IN, (lhs, _as_vec(rhs)))

    def notin_op(self, c):
        lhs, rhs = c
        return Tree(NK.NOT_IN, (lhs, _as_vec(rhs)))

    # ---- arithmetic ----

    def add(self, c):
        lhs, rhs = c
        return _variadic(NK.SUM, lhs, rhs)

    def sub(self, c):
        lhs, rhs = c
        return _variadic(NK.SUM, lhs, Tree(NK.NEG, (rhs,)))

    def mul(self, c):
        return Tree(NK.MUL, c)

    def div(self, c):
        return Tree(NK.DIV, c)

    def mod(self, c):
        return Tree(NK.MOD, c)

    def neg(self, c):
        return Tree(NK.NEG, c)

    def pos(self, c):
        return Tree(NK.POS, c)

    # ---- atoms ----

    def number(self, c):
        return Tree(NK.NUMBER, value=str(c[0]))

    def string(self, c):
        return Tree(NK.STRING, value=str(c[0]))

    def true(self, _):
        return Tree(NK.TRUE)

    def false(self, _):
        return Tree(NK.FALSE)

    def ident(self, c):
        return _ident(c[0])

    def call(self, c):
        name, args = c
        return Tree(NK.FN_CALL, (Tree(NK.EXP_LIST, args or ()),), value=str(name))

    def vec(self, c):
        return Tree(NK.VEC_CONST, c[0] or ())
