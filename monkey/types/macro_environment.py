from __future__ import annotations

from typing import Optional

from monkey.types.environment import Environment
from monkey.types.function import Macro


class MacroEnvironment(Environment):
    """
    Environment dedicated to macro definitions.

    Macros collected from a program live here and never in the evaluation
    environment, so ordinary code cannot see or call them directly. Only the
    outermost MacroEnvironment of a chain holds definitions; the enclosed
    frames created while running a macro body bind its quoted parameters.
    """

    __slots__ = ()

    def define_macro(self, name: str, macro: Macro) -> None:
        self.define(name, macro)

    def is_macro(self, name: str) -> bool:
        return isinstance(self.get(name), Macro)

    def get_macro(self, name: str) -> Optional[Macro]:
        value = self.get(name)
        return value if isinstance(value, Macro) else None

    def macro_names(self) -> list[str]:
        return [name for name, value in self.vars.items() if isinstance(value, Macro)]
