"""Encoding of single instructions.

An instruction is the opcode byte followed by its operands, each stored
big-endian in the width its Definition declares. Nothing executes these
bytes yet; the evaluator walks the syntax tree directly.
"""

from __future__ import annotations

from monkey.compiler.opcodes import DEFINITIONS, Definition, Opcode


def _emit(buffer: bytearray, value: int, width: int) -> None:
    for shift in range((width - 1) * 8, -1, -8):
        buffer.append((value >> shift) & 0xFF)


def make(op: int, *operands: int) -> bytes:
    """Encode `op` and its operands; an unknown opcode encodes to b""."""
    try:
        definition = DEFINITIONS[Opcode(op)]
    except (ValueError, KeyError):
        return b""

    instruction = bytearray([int(op)])
    for operand, width in zip(operands, definition.operand_widths):
        _emit(instruction, operand, width)
    return bytes(instruction)


def read_operands(definition: Definition, ins: bytes) -> tuple[list[int], int]:
    """Decode the operands at the start of `ins` (which excludes the opcode byte).

    Returns the operand values and the number of bytes consumed. A truncated
    instruction yields fewer operands than the definition declares.
    """
    operands: list[int] = []
    offset = 0
    for width in definition.operand_widths:
        if offset + width > len(ins):
            break
        value = 0
        for i in range(width):
            value = (value << 8) | ins[offset + i]
        operands.append(value)
        offset += width
    return operands, offset


def concat(*instructions: bytes) -> bytes:
    return b"".join(instructions)
