from __future__ import annotations

from typing import Tuple

from .types import (
    VnmNull, VnmInt, VnmString, VnmBool,
    VnmValue, Frame,
    VnmRuntimeError, VnmTypeError, VnmArithmeticError,
    is_vnm_value, is_absent, type_name,
)

# Integers are signed 32-bit; results wrap the way two's complement hardware does.
INT_BITS = 32
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1

def wrap_int(n: int) -> int:
    n &= (1 << INT_BITS) - 1
    return n - (1 << INT_BITS) if n > INT_MAX else n

def make_int(n: int) -> VnmInt:
    return VnmInt(wrap_int(n))

def trunc_divmod(a: int, b: int) -> Tuple[int, int]:
    """Quotient rounded toward zero and the remainder carrying the dividend's sign.

    Callers reject a zero divisor with their own message.
    """
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q

    return wrap_int(q), wrap_int(a - q * b)
