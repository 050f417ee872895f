import pytest

from monkey.types.function import Function
from monkey.types.nil import NULL
from monkey.types.objects import (
    Array,
    Error,
    FALSE,
    Hash,
    Integer,
    String,
    TRUE,
)

# -----------------------------------------------------
# Helpers
# -----------------------------------------------------

def assert_integer(obj, expected):
    assert isinstance(obj, Integer), obj
    assert obj.value == expected


def assert_error(obj, message):
    assert isinstance(obj, Error), obj
    assert obj.message == message

# -----------------------------------------------------
# Literals and operators
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("5", 5),
        ("10", 10),
        ("-5", -5),
        ("-10", -10),
        ("5 + 5 + 5 + 5 - 10", 10),
        ("2 * 2 * 2 * 2 * 2", 32),
        ("-50 + 100 + -50", 0),
        ("5 * 2 + 10", 20),
        ("5 + 2 * 10", 25),
        ("20 + 2 * -10", 0),
        ("50 / 2 * 2 + 10", 60),
        ("2 * (5 + 10)", 30),
        ("3 * 3 * 3 + 10", 37),
        ("3 * (3 * 3) + 10", 37),
        ("(5 + 10 * 2 + 15 / 3) * 2 + -10", 50),
        ("7 / 2", 3),
        ("-7 / 2", -3),
        ("7 / -2", -3),
        ("-7 / -2", 3),
    ],
)
def test_integer_expressions(run, source, expected):
    assert_integer(run(source), expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("9223372036854775807 + 1", -9223372036854775808),
        ("-9223372036854775807 - 2", 9223372036854775807),
        ("9223372036854775807 * 9223372036854775807", 1),
        ("9223372036854775807 * 2", -2),
        ("let min = -9223372036854775807 - 1; -min", -9223372036854775808),
        ("let min = -9223372036854775807 - 1; min / -1", -9223372036854775808),
    ],
)
def test_integer_arithmetic_wraps_to_64_bits(run, source, expected):
    assert_integer(run(source), expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("true", True),
        ("false", False),
        ("1 < 2", True),
        ("1 > 2", False),
        ("1 < 1", False),
        ("1 > 1", False),
        ("1 == 1", True),
        ("1 != 1", False),
        ("1 == 2", False),
        ("1 != 2", True),
        ("true == true", True),
        ("false == false", True),
        ("true == false", False),
        ("true != false", True),
        ("false != true", True),
        ("(1 < 2) == true", True),
        ("(1 < 2) == false", False),
        ("(1 > 2) == true", False),
        ("(1 > 2) == false", True),
    ],
)
def test_boolean_expressions(run, source, expected):
    assert run(source) is (TRUE if expected else FALSE)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("!true", False),
        ("!false", True),
        ("!5", False),
        ("!!true", True),
        ("!!false", False),
        ("!!5", True),
        ("!if (false) { 1 }", True),
    ],
)
def test_bang_operator(run, source, expected):
    assert run(source) is (TRUE if expected else FALSE)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("if (true) { 10 }", 10),
        ("if (false) { 10 }", None),
        ("if (1) { 10 }", 10),
        ("if (1 < 2) { 10 }", 10),
        ("if (1 > 2) { 10 }", None),
        ("if (1 > 2) { 10 } else { 20 }", 20),
        ("if (1 < 2) { 10 } else { 20 }", 10),
        ("if (0) { 10 } else { 20 }", 10),
        ('if ("") { 10 } else { 20 }', 10),
    ],
)
def test_if_else_expressions(run, source, expected):
    result = run(source)
    if expected is None:
        assert result is NULL
    else:
        assert_integer(result, expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("return 10;", 10),
        ("return 10; 9;", 10),
        ("return 2 * 5; 9;", 10),
        ("9; return 2 * 5; 9;", 10),
        ("if (10 > 1) { return 10; }", 10),
        (
            """
            if (10 > 1) {
              if (10 > 1) {
                return 10;
              }

              return 1;
            }
            """,
            10,
        ),
        (
            """
            let f = fn(x) {
              return x;
              x + 10;
            };
            f(10);
            """,
            10,
        ),
        (
            """
            let f = fn(x) {
               let result = x + 10;
               return result;
               return 10;
            };
            f(10);
            """,
            20,
        ),
    ],
)
def test_return_statements(run, source, expected):
    assert_integer(run(source), expected)


def test_return_stops_only_the_enclosing_call(run):
    source = """
    let inner = fn() { return 1; 2 };
    let outer = fn() { inner(); 3 };
    outer();
    """
    assert_integer(run(source), 3)


# -----------------------------------------------------
# Errors
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,message",
    [
        ("5 + true;", "type mismatch: INTEGER + BOOLEAN"),
        ("5 + true; 5;", "type mismatch: INTEGER + BOOLEAN"),
        ("-true", "unknown operator: -BOOLEAN"),
        ("true + false;", "unknown operator: BOOLEAN + BOOLEAN"),
        ("true + false + true + false;", "unknown operator: BOOLEAN + BOOLEAN"),
        ("5; true + false; 5", "unknown operator: BOOLEAN + BOOLEAN"),
        ("if (10 > 1) { true + false; }", "unknown operator: BOOLEAN + BOOLEAN"),
        (
            """
            if (10 > 1) {
              if (10 > 1) {
                return true + false;
              }

              return 1;
            }
            """,
            "unknown operator: BOOLEAN + BOOLEAN",
        ),
        ("foobar", "identifier not found: foobar"),
        ('"Hello" - "World"', "unknown operator: STRING - STRING"),
        ('"a" == "a"', "unknown operator: STRING == STRING"),
        ('{"name": "Monkey"}[fn(x) { x }];', "unusable as hash key: FUNCTION"),
        ("{[1]: 2}", "unusable as hash key: ARRAY"),
        ("1 / 0", "division by zero"),
        ("5(1)", "not a function: INTEGER"),
        ("fn(x) { x }(1, 2)", "wrong number of arguments: want=1, got=2"),
        ("1[0]", "index operator not supported: INTEGER"),
        ('[1, 2]["a"]', "index operator not supported: ARRAY"),
        ("[1, foo, bar]", "identifier not found: foo"),
        ("let x = -true; x", "unknown operator: -BOOLEAN"),
        ("f(undefined)", "identifier not found: f"),
        ("len(undefined)", "identifier not found: undefined"),
    ],
)
def test_error_handling(run, source, message):
    assert_error(run(source), message)


def test_error_stops_evaluation(run, capsys):
    result = run('puts("before"); 1 + true; puts("after")')
    assert_error(result, "type mismatch: INTEGER + BOOLEAN")
    assert capsys.readouterr().out == "before\n"


def test_error_in_argument_prevents_the_call(run, capsys):
    result = run('let f = fn(x) { puts("called") }; f(1 + true)')
    assert_error(result, "type mismatch: INTEGER + BOOLEAN")
    assert capsys.readouterr().out == ""


def test_error_in_builtin_argument_prevents_the_call(run, capsys):
    result = run("puts(1, undefined)")
    assert_error(result, "identifier not found: undefined")
    assert capsys.readouterr().out == ""


# -----------------------------------------------------
# Bindings and functions
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("let a = 5; a;", 5),
        ("let a = 5 * 5; a;", 25),
        ("let a = 5; let b = a; b;", 5),
        ("let a = 5; let b = a; let c = a + b + 5; c;", 15),
        ("let a = 1; let a = a + 1; a", 2),
    ],
)
def test_let_statements(run, source, expected):
    assert_integer(run(source), expected)


def test_let_evaluates_to_the_bound_value(run):
    assert_integer(run("let a = 5;"), 5)


def test_function_ending_in_let_returns_the_value(run):
    assert_integer(run("fn() { let x = 5 }()"), 5)


def test_empty_program_is_null(run):
    assert run("") is NULL


def test_function_object(run):
    fn = run("fn(x) { x + 2; };")
    assert isinstance(fn, Function)
    assert [p.value for p in fn.parameters] == ["x"]
    assert str(fn.body) == "{ (x + 2) }"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("let identity = fn(x) { x; }; identity(5);", 5),
        ("let identity = fn(x) { return x; }; identity(5);", 5),
        ("let double = fn(x) { x * 2; }; double(5);", 10),
        ("let add = fn(x, y) { x + y; }; add(5, 5);", 10),
        ("let add = fn(x, y) { x + y; }; add(5 + 5, add(5, 5));", 20),
        ("fn(x) { x; }(5)", 5),
        ("let f = fn() { 7 }; f()", 7),
    ],
)
def test_function_application(run, source, expected):
    assert_integer(run(source), expected)


def test_empty_function_body_is_null(run):
    assert run("fn() { }()") is NULL


def test_closures(run):
    source = """
    let newAdder = fn(x) {
      fn(y) { x + y };
    };

    let addTwo = newAdder(2);
    addTwo(3);
    """
    assert_integer(run(source), 5)


def test_recursive_function(run):
    source = """
    let fib = fn(n) {
      if (n < 2) { return n; }
      fib(n - 1) + fib(n - 2)
    };
    fib(15);
    """
    assert_integer(run(source), 610)


def test_call_does_not_leak_bindings(run, env):
    run("let f = fn(x) { let y = x; y }; f(1);")
    assert env.get("x") is None
    assert env.get("y") is None


def test_higher_order_functions(run):
    source = """
    let map = fn(arr, f) {
      let iter = fn(arr, accumulated) {
        if (len(arr) == 0) {
          accumulated
        } else {
          iter(rest(arr), push(accumulated, f(first(arr))));
        }
      };
      iter(arr, []);
    };
    map([1, 2, 3, 4], fn(x) { x * 2 });
    """
    result = run(source)
    assert isinstance(result, Array)
    assert [e.value for e in result.elements] == [2, 4, 6, 8]


# -----------------------------------------------------
# Strings, arrays, hashes
# -----------------------------------------------------

def test_string_literal(run):
    result = run('"Hello World!"')
    assert isinstance(result, String)
    assert result.value == "Hello World!"


def test_string_concatenation(run):
    assert run('"Hello" + " " + "World!"').value == "Hello World!"


def test_array_literals(run):
    result = run("[1, 2 * 2, 3 + 3]")
    assert isinstance(result, Array)
    assert [e.value for e in result.elements] == [1, 4, 6]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[1, 2, 3][0]", 1),
        ("[1, 2, 3][1]", 2),
        ("[1, 2, 3][2]", 3),
        ("let i = 0; [1][i];", 1),
        ("[1, 2, 3][1 + 1];", 3),
        ("let myArray = [1, 2, 3]; myArray[2];", 3),
        ("let myArray = [1, 2, 3]; myArray[0] + myArray[1] + myArray[2];", 6),
        ("let myArray = [1, 2, 3]; let i = myArray[0]; myArray[i]", 2),
        ("[1, 2, 3][3]", None),
        ("[1, 2, 3][-1]", None),
        ("[][0]", None),
    ],
)
def test_array_index_expressions(run, source, expected):
    result = run(source)
    if expected is None:
        assert result is NULL
    else:
        assert_integer(result, expected)


def test_hash_literals(run):
    source = """
    let two = "two";
    {
        "one": 10 - 9,
        two: 1 + 1,
        "thr" + "ee": 6 / 2,
        4: 4,
        true: 5,
        false: 6
    }
    """
    result = run(source)
    assert isinstance(result, Hash)
    expected = {
        String("one").hash_key(): 1,
        String("two").hash_key(): 2,
        String("three").hash_key(): 3,
        Integer(4).hash_key(): 4,
        TRUE.hash_key(): 5,
        FALSE.hash_key(): 6,
    }
    assert len(result.pairs) == len(expected)
    for key, value in expected.items():
        assert_integer(result.pairs[key].value, value)


def test_hash_literal_later_key_wins(run):
    result = run('{"a": 1, "a": 2}')
    assert len(result.pairs) == 1
    assert_integer(result.pairs[String("a").hash_key()].value, 2)


@pytest.mark.parametrize(
    "source,expected",
    [
        ('{"foo": 5}["foo"]', 5),
        ('{"foo": 5}["bar"]', None),
        ('let key = "foo"; {"foo": 5}[key]', 5),
        ('{}["foo"]', None),
        ("{5: 5}[5]", 5),
        ("{true: 5}[true]", 5),
        ("{false: 5}[false]", 5),
    ],
)
def test_hash_index_expressions(run, source, expected):
    result = run(source)
    if expected is None:
        assert result is NULL
    else:
        assert_integer(result, expected)


def test_null_comparisons(run):
    assert run("if (false) { 1 } == if (false) { 2 }") is TRUE
    assert run("[][0] != false") is TRUE
