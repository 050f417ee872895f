"""Built-in functions for the Monkey runtime.

Builtins are consulted only after an identifier is not found in the
environment chain. Each one validates its own arguments and reports misuse
as an Error value; none of them raise.
"""
from __future__ import annotations

from monkey.types.objects import Object, Builtin, Error, Integer, String, Array
from monkey.types.nil import NULL


def wrong_arity(got: int, want: int) -> Error:
    return Error(f"wrong number of arguments. got={got}, want={want}")


def len_builtin(args: list[Object]) -> Object:
    """Length of a string (in characters) or an array."""
    if len(args) != 1:
        return wrong_arity(len(args), 1)
    arg = args[0]
    if isinstance(arg, String):
        return Integer(len(arg.value))
    if isinstance(arg, Array):
        return Integer(len(arg.elements))
    return Error(f'argument to "len" not supported, got {arg.object_type}')


def _array_argument(name: str, args: list[Object], want: int) -> Array | Error:
    if len(args) != want:
        return wrong_arity(len(args), want)
    if not isinstance(args[0], Array):
        return Error(f'argument to "{name}" must be ARRAY, got {args[0].object_type}')
    return args[0]


def first(args: list[Object]) -> Object:
    """First element of an array; null when empty."""
    arr = _array_argument("first", args, 1)
    if isinstance(arr, Error):
        return arr
    return arr.elements[0] if arr.elements else NULL


def last(args: list[Object]) -> Object:
    """Last element of an array; null when empty."""
    arr = _array_argument("last", args, 1)
    if isinstance(arr, Error):
        return arr
    return arr.elements[-1] if arr.elements else NULL


def rest(args: list[Object]) -> Object:
    """New array holding every element but the first; null when empty."""
    arr = _array_argument("rest", args, 1)
    if isinstance(arr, Error):
        return arr
    if not arr.elements:
        return NULL
    return Array(list(arr.elements[1:]))


def push(args: list[Object]) -> Object:
    """New array with the second argument appended; the input is unchanged."""
    arr = _array_argument("push", args, 2)
    if isinstance(arr, Error):
        return arr
    return Array([*arr.elements, args[1]])


def puts(args: list[Object]) -> Object:
    """Print each argument's inspect() form on its own line."""
    for arg in args:
        print(arg.inspect())
    return NULL


BUILTINS: dict[str, Builtin] = {
    "len": Builtin(len_builtin),
    "first": Builtin(first),
    "last": Builtin(last),
    "rest": Builtin(rest),
    "push": Builtin(push),
    "puts": Builtin(puts),
}


def lookup_builtin(name: str) -> Builtin | None:
    return BUILTINS.get(name)
