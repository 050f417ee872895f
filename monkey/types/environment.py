"""Runtime environment for Monkey.

The Environment stores bindings of names to evaluated Monkey values and
supports nested scopes via an `outer` link. A closure keeps a reference to
the Environment it was created in, so a single frame may be shared by many
function values; only the call that created a frame writes to it.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from monkey import MonkeyValue


class Environment:
    """Hierarchical mapping from names to Monkey values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, MonkeyValue] = {}
        self.outer: Environment | None = outer

    def enclosed(self) -> Environment:
        """Return a fresh child scope whose outer link is this environment."""
        return type(self)(outer=self)

    def define(self, name: str, value: MonkeyValue) -> MonkeyValue:
        """Bind `name` to `value` in this (innermost) frame and return `value`."""
        self.vars[name] = value
        return value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: str, default: MonkeyValue = None) -> MonkeyValue:
        """Look up `name` along the chain, returning `default` when unbound."""
        env = self.find(name)
        if env is None:
            return default
        return env.vars[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v.inspect() if hasattr(v, 'inspect') else v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging, innermost frame first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
