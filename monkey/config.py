from __future__ import annotations
import logging
import os


_DEFAULT_PROMPT = ">> "
_DEFAULT_LOG_LEVEL = "WARNING"


def flag_from_env(var: str) -> bool:
    raw = os.environ.get(var)
    return bool(raw and raw.strip() and raw.strip() not in ("0", "false", "no"))


def get_prompt() -> str:
    return os.environ.get("MONKEY_PROMPT", _DEFAULT_PROMPT)


def dump_ast_enabled() -> bool:
    return flag_from_env("MONKEY_DUMP_AST")


def get_log_level() -> int:
    raw = os.environ.get("MONKEY_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    # accept both names (DEBUG) and numbers (10)
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.WARNING
