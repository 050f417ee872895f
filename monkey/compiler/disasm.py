from __future__ import annotations

from monkey.compiler.instructions import read_operands
from monkey.compiler.opcodes import Definition
from monkey.compiler.opcodes import lookup
from monkey.errors import MonkeyOpcodeError


def format_instruction(definition: Definition, operands: list[int]) -> str:
    count = len(definition.operand_widths)
    if len(operands) != count:
        return f"ERROR: operand len {len(operands)} does not match defined {count}"
    if count == 0:
        return definition.name
    return f"{definition.name} " + " ".join(str(o) for o in operands)


def disassemble(ins: bytes) -> str:
    """Render one instruction per line as `<offset> <name> <operands>`."""
    out = []
    i = 0
    while i < len(ins):
        try:
            definition = lookup(ins[i])
        except MonkeyOpcodeError as ex:
            out.append(f"ERROR: {ex}")
            i += 1
            continue
        operands, read = read_operands(definition, ins[i + 1:])
        out.append(f"{i:04d} {format_instruction(definition, operands)}")
        if len(operands) != len(definition.operand_widths):
            break  # truncated final instruction
        i += 1 + read
    return "\n".join(out) + ("\n" if out else "")
