from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Optional, TextIO, Tuple, Union
from typing_extensions import TypeAlias, TypeGuard

# ---------- Value Model ----------

@dataclass(frozen=True)
class VnmNull:
    """Absence: the result of print statements and of an `if` with no branch taken."""
    def __repr__(self) -> str:
        return "null"

@dataclass(frozen=True)
class VnmInt:
    value: int
    def __repr__(self) -> str:
        return str(self.value)

@dataclass(frozen=True)
class VnmString:
    value: str
    def __repr__(self) -> str:
        return f'"{self.value}"'

@dataclass(frozen=True)
class VnmBool:
    value: bool
    def __repr__(self) -> str:
        return "true" if self.value else "false"

VnmValue: TypeAlias = Union[VnmNull, VnmInt, VnmString, VnmBool]

class Frame:
    """Per-evaluation state: the output sink and the opaque context value."""

    def __init__(self, out: Optional[TextIO]=None, data: Any=None):
        self.out: TextIO = out if out is not None else sys.stdout
        self.data: Any = data

    def without_data(self) -> 'Frame':
        """Same sink, context cleared."""
        if self.data is None:
            return self

        return Frame(out=self.out)

    def emit(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

# ---------- Exceptions ----------

class VnmRuntimeError(Exception):
    pass

class VnmTypeError(VnmRuntimeError):
    """A handler needed one run-time kind and got another."""
    def __init__(self, expected: str, got: object):
        super().__init__(f"Expected {expected}, got {type_name(got)}")
        self.expected = expected
        self.got = got

class VnmArithmeticError(VnmRuntimeError):
    pass

_VNM_VALUE_TYPES: Tuple[type, ...] = (
    VnmNull,
    VnmInt,
    VnmString,
    VnmBool,
)

_TYPE_NAMES = {
    VnmNull: "null",
    VnmInt: "integer",
    VnmString: "string",
    VnmBool: "boolean",
}

def is_vnm_value(value: object) -> TypeGuard[VnmValue]:
    return isinstance(value, _VNM_VALUE_TYPES)

def is_absent(value: object) -> bool:
    return value is None or isinstance(value, VnmNull)

def type_name(value: object) -> str:
    name = _TYPE_NAMES.get(type(value))
    if name is not None:
        return name

    return "null" if value is None else type(value).__name__
