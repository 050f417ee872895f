"""
Line-oriented REPL for Monkey.

Each line is parsed on its own but evaluated against one Interpreter, so
bindings and macros persist for the whole session.

    python -m monkey.repl

Environment variables (see monkey.config):
- MONKEY_PROMPT: prompt string (default ">> ")
- MONKEY_DUMP_AST: print the expanded program before evaluating it
- MONKEY_LOG_LEVEL: logging level for the session (default WARNING)
"""

from __future__ import annotations

import getpass
import logging
import sys
from typing import TextIO

from monkey.config import get_prompt, dump_ast_enabled, get_log_level
from monkey.errors import MonkeyError, MonkeySyntaxError
from monkey.interpreter import Interpreter
from monkey.types.nil import NULL

log = logging.getLogger("monkey.repl")


def print_parser_errors(out: TextIO, errors: list[str]) -> None:
    out.write("parser errors:\n")
    for msg in errors:
        out.write(f"\t{msg}\n")


def eval_line(interp: Interpreter, line: str, out: TextIO) -> None:
    """Evaluate one line and write whatever the session should show for it."""
    interp.dump_to = out if dump_ast_enabled() else None
    try:
        result = interp.eval(line)
    except MonkeySyntaxError as ex:
        print_parser_errors(out, ex.errors)
        return
    except MonkeyError as ex:
        out.write(f"error: {ex}\n")
        return

    if result is not NULL:
        out.write(result.inspect())
        out.write("\n")


def start(stdin: TextIO, stdout: TextIO, interp: Interpreter | None = None) -> None:
    interp = interp or Interpreter()
    prompt = get_prompt()
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        log.debug("read %r", line)
        eval_line(interp, line, stdout)


def main() -> None:
    logging.basicConfig(level=get_log_level())
    try:
        user = getpass.getuser()
    except (KeyError, OSError):
        user = "there"
    print(f"Hello {user}! This is the Monkey programming language!")
    print("Feel free to type in commands")
    start(sys.stdin, sys.stdout)


if __name__ == "__main__":
    main()
