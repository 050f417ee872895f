import pytest

from monkey.evaluation.evaluator import evaluate
from monkey.interpreter import Interpreter
from monkey.reader.parser import parse
from monkey.types.environment import Environment


# Most evaluation tests only need "source in, object out". `run` parses with
# the real parser, fails the test on any diagnostic, and evaluates the
# program in a fresh Environment.


@pytest.fixture
def env():
    """Return a fresh environment for each test."""
    return Environment()


@pytest.fixture
def run(env):
    def _run(source: str):
        program, errors = parse(source)
        assert errors == [], f"parser errors for {source!r}: {errors}"
        return evaluate(program, env)

    return _run


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture(autouse=True)
def _clean_monkey_env(monkeypatch):
    # keep the developer's shell settings out of REPL and config tests
    for var in ("MONKEY_PROMPT", "MONKEY_DUMP_AST", "MONKEY_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
