"""Runtime values for the Monkey evaluator.

Every value carries an `object_type` tag used in error messages and an
`inspect()` rendering used by the REPL and `puts`. Booleans and null are
process-wide singletons (TRUE, FALSE and monkey.types.nil.NULL) and are
compared by identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import Callable

from monkey.reader import ast_nodes as ast


INTEGER_OBJ = "INTEGER"
STRING_OBJ = "STRING"
BOOLEAN_OBJ = "BOOLEAN"
NULL_OBJ = "NULL"
ARRAY_OBJ = "ARRAY"
HASH_OBJ = "HASH"
FUNCTION_OBJ = "FUNCTION"
BUILTIN_OBJ = "BUILTIN"
RETURN_VALUE_OBJ = "RETURN_VALUE"
ERROR_OBJ = "ERROR"
QUOTE_OBJ = "QUOTE"
MACRO_OBJ = "MACRO"

_MASK64 = (1 << 64) - 1


class Object:
    object_type: str = ""

    def inspect(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.object_type} {self.inspect()}>"


@dataclass(frozen=True)
class HashKey:
    """Map-key surrogate for hashable values: equal contents, equal keys."""

    object_type: str
    value: int


class Hashable(Object):
    def hash_key(self) -> HashKey:
        raise NotImplementedError


class Integer(Hashable):
    __slots__ = ("value",)
    object_type = INTEGER_OBJ

    def __init__(self, value: int):
        self.value = value

    def inspect(self) -> str:
        return str(self.value)

    def hash_key(self) -> HashKey:
        return HashKey(self.object_type, self.value)


def djb2(text: str) -> int:
    h = 5381
    for ch in text:
        h = ((h << 5) + h + ord(ch)) & _MASK64
    return h


class String(Hashable):
    __slots__ = ("value",)
    object_type = STRING_OBJ

    def __init__(self, value: str):
        self.value = value

    def inspect(self) -> str:
        return self.value

    def hash_key(self) -> HashKey:
        return HashKey(self.object_type, djb2(self.value))


class Boolean(Hashable):
    __slots__ = ("value",)
    object_type = BOOLEAN_OBJ

    def __init__(self, value: bool):
        self.value = value

    def inspect(self) -> str:
        return "true" if self.value else "false"

    def hash_key(self) -> HashKey:
        return HashKey(self.object_type, 1 if self.value else 0)


TRUE = Boolean(True)
FALSE = Boolean(False)


def native_bool_to_boolean(value: bool) -> Boolean:
    return TRUE if value else FALSE


class Array(Object):
    __slots__ = ("elements",)
    object_type = ARRAY_OBJ

    def __init__(self, elements: list[Object]):
        self.elements = elements

    def inspect(self) -> str:
        return "[" + ", ".join(e.inspect() for e in self.elements) + "]"


@dataclass
class HashPair:
    key: Object
    value: Object


class Hash(Object):
    __slots__ = ("pairs",)
    object_type = HASH_OBJ

    def __init__(self, pairs: dict[HashKey, HashPair]):
        self.pairs = pairs

    def inspect(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for pair in self.pairs.values():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{pair.key.inspect()}: {pair.value.inspect()}")
                first = False
            buffer.write("}")
            return buffer.getvalue()


BuiltinFunction = Callable[[list[Object]], Object]


class Builtin(Object):
    __slots__ = ("fn",)
    object_type = BUILTIN_OBJ

    def __init__(self, fn: BuiltinFunction):
        self.fn = fn

    def inspect(self) -> str:
        return "builtin function"


class ReturnValue(Object):
    """Wraps the value of a `return` until it reaches the call boundary."""

    __slots__ = ("value",)
    object_type = RETURN_VALUE_OBJ

    def __init__(self, value: Object):
        self.value = value

    def inspect(self) -> str:
        return self.value.inspect()


class Error(Object):
    """A language-level evaluation error. Propagated as a value, never raised."""

    __slots__ = ("message",)
    object_type = ERROR_OBJ

    def __init__(self, message: str):
        self.message = message

    def inspect(self) -> str:
        return f"ERROR: {self.message}"


def is_error(obj: Object | None) -> bool:
    return obj is not None and obj.object_type == ERROR_OBJ


class Quote(Object):
    """Unevaluated syntax captured by `quote(...)` or bound to a macro parameter."""

    __slots__ = ("node",)
    object_type = QUOTE_OBJ

    def __init__(self, node: ast.Node):
        self.node = node

    def inspect(self) -> str:
        return f"QUOTE({self.node})"
