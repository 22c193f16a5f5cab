"""
Node Kinds for the VNM evaluator

Shared between the front end, the tree helpers and the evaluator to avoid
circular dependencies.
"""

from enum import Enum
from typing import Dict, FrozenSet


class NK(Enum):
    """Node Kinds - mirrors grammar productions"""

    # Program structure
    BODY = "body"
    CLAUSE = "clause"

    # Output
    PRINT = "print"
    PRINT_LN = "println"

    # Declarations / statements
    VAR_DECL = "var_decl"
    FN_DECL = "fn_decl"
    IDENT_LIST = "ident_list"
    FN_CALL = "fn_call"
    BOOLEAN_CALL = "boolean_call"
    EXP_LIST = "exp_list"
    CONDITION_LIST = "condition_list"
    RETURN = "return"
    ASSIGN = "assign"
    IF = "if"
    FOR = "for"
    WHILE = "while"

    # Arithmetic
    SUM = "sum"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    NEG = "neg"
    POS = "pos"

    # Logic gates
    OR = "or"
    AND = "and"
    NOT = "not"

    # Comparison and its operator markers
    COMPARISON = "comparison"
    LT = "lt"
    LE = "le"
    GT = "gt"
    GE = "ge"
    EQ = "eq"
    NE = "ne"

    # Collections / membership
    VEC_CONST = "vec_const"
    IN = "in"
    NOT_IN = "notin"

    # Identifier references
    IDVEC = "idvec"
    IDNUM = "idnum"
    IDBOOL = "idbool"

    # Literals
    NUMBER = "number"
    STRING = "string"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"


class CmpOp(Enum):
    """Comparison operators attached to `comparison` nodes."""

    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    EQ = "=="
    NE = "!="


MARKER_OPS: Dict[NK, CmpOp] = {
    NK.LT: CmpOp.LT,
    NK.LE: CmpOp.LE,
    NK.GT: CmpOp.GT,
    NK.GE: CmpOp.GE,
    NK.EQ: CmpOp.EQ,
    NK.NE: CmpOp.NE,
}

OP_MARKERS: Dict[CmpOp, NK] = {op: kind for kind, op in MARKER_OPS.items()}

# Kinds whose handler only visits children; no storage, calls, loops or
# membership are computed for them.
PASSTHROUGH_KINDS: FrozenSet[NK] = frozenset({
    NK.BODY,
    NK.CLAUSE,
    NK.VAR_DECL,
    NK.FN_DECL,
    NK.IDENT_LIST,
    NK.FN_CALL,
    NK.BOOLEAN_CALL,
    NK.EXP_LIST,
    NK.CONDITION_LIST,
    NK.RETURN,
    NK.ASSIGN,
    NK.FOR,
    NK.WHILE,
    NK.VEC_CONST,
    NK.IDVEC,
    NK.IDNUM,
    NK.IDBOOL,
    NK.IN,
    NK.NOT_IN,
})

# Fixed arities; kinds not listed are variadic or leaves with a payload.
ARITY: Dict[NK, int] = {
    NK.MUL: 2,
    NK.DIV: 2,
    NK.MOD: 2,
    NK.NEG: 1,
    NK.POS: 1,
    NK.NOT: 1,
    NK.COMPARISON: 3,
    NK.TRUE: 0,
    NK.FALSE: 0,
    NK.NULL: 0,
}
