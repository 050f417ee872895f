# Core type aliases for Monkey's runtime model.
# Syntax is represented by the dataclass nodes in monkey.reader.ast_nodes and
# runtime values by the tagged classes in monkey.types.objects.
#
# MonkeyValue resolves to `Any` here so that this module never imports the
# submodules that depend on it.

from typing import Any, Callable

# Runtime value alias
MonkeyValue = Any

# Evaluator function type: passed to application and special-form helpers
EvaluatorFn = Callable[..., MonkeyValue]
