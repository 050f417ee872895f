from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from monkey.errors import MonkeyOpcodeError


class Opcode(IntEnum):
    # Stack and constants
    OP_CONSTANT = 0x00  # u16 constant index
    # Arithmetic
    OP_ADD = 0x01


@dataclass(frozen=True)
class Definition:
    """Human-readable name and the byte width of each operand."""

    name: str
    operand_widths: tuple[int, ...]


DEFINITIONS: dict[Opcode, Definition] = {
    Opcode.OP_CONSTANT: Definition("OpConstant", (2,)),
    Opcode.OP_ADD: Definition("OpAdd", ()),
}


def lookup(op: int) -> Definition:
    """Return the definition of `op`; raises MonkeyOpcodeError when unknown."""
    try:
        return DEFINITIONS[Opcode(op)]
    except (ValueError, KeyError):
        raise MonkeyOpcodeError(op) from None
