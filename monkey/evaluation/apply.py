"""Application engine for Monkey.

This module centralizes function application semantics for the evaluator:
- Closures run in a fresh Environment enclosed by the one they captured,
  with parameters bound positionally.
- A ReturnValue produced by the body is unwrapped exactly once here, at the
  call boundary, so a `return` nested in blocks stops the whole call and no
  further.
- Builtins receive the already-evaluated argument list.

Arguments reach this module fully evaluated; error short-circuiting of the
arguments themselves happens in the evaluator before a call is attempted.
"""

from monkey import EvaluatorFn
from monkey.types.objects import Object, Builtin, Error, ReturnValue
from monkey.types.function import Function, Macro


def unwrap_return_value(obj: Object) -> Object:
    if isinstance(obj, ReturnValue):
        return obj.value
    return obj


def apply_function(fn: Object, args: list[Object], evaluate_fn: EvaluatorFn) -> Object:
    """Apply either a Function or a Builtin.

    - Macros are only callable through macro expansion.
    - Function arity must match the number of arguments exactly.
    - Anything else is not callable.
    """
    match fn:
        case Macro():
            return Error(f"not a function: {fn.object_type}")
        case Function():
            if len(args) != fn.arity:
                return Error(f"wrong number of arguments: want={fn.arity}, got={len(args)}")
            extended_env = fn.extend_env(args)
            evaluated = evaluate_fn(fn.body, extended_env)
            return unwrap_return_value(evaluated)
        case Builtin():
            return fn.fn(args)
        case _:
            return Error(f"not a function: {fn.object_type}")
