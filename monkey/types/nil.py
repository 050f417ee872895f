from __future__ import annotations

from monkey.types.objects import Object, FALSE, NULL_OBJ


class NullType(Object):
    object_type = NULL_OBJ

    def inspect(self) -> str:
        return "null"

    def __repr__(self):
        return "null"

    def __bool__(self):
        return False


NULL = NullType()


def is_truthy(obj: Object) -> bool:
    """Everything except FALSE and NULL is truthy."""
    return not (obj is NULL or obj is FALSE)
