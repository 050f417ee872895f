import string

from hypothesis import given, settings, strategies as st

from monkey.reader.parser import parse


# Source text generators. Every generated program parses cleanly; the
# property is that rendering is a fixed point of parse-then-render.

atoms = st.one_of(
    st.integers(min_value=0, max_value=2**63 - 1).map(str),
    st.sampled_from(["a", "b", "foo", "bar_baz", "x"]),
    st.sampled_from(["true", "false"]),
    st.text(alphabet=string.ascii_letters + " ", max_size=8).map(lambda s: f'"{s}"'),
)


def compound(children):
    return st.one_of(
        st.tuples(st.sampled_from(["-", "!"]), children).map(lambda t: f"{t[0]}{t[1]}"),
        st.tuples(
            children,
            st.sampled_from(["+", "-", "*", "/", "<", ">", "==", "!="]),
            children,
        ).map(lambda t: f"({t[0]} {t[1]} {t[2]})"),
        st.lists(children, max_size=3).map(lambda xs: "[" + ", ".join(xs) + "]"),
        st.lists(st.tuples(children, children), max_size=2).map(
            lambda kvs: "{" + ", ".join(f"{k}: {v}" for k, v in kvs) + "}"
        ),
        st.tuples(st.sampled_from(["f", "add"]), st.lists(children, max_size=3)).map(
            lambda t: f"{t[0]}({', '.join(t[1])})"
        ),
        st.tuples(children, children).map(lambda t: f"({t[0]})[{t[1]}]"),
        st.tuples(children, children, children).map(
            lambda t: f"if ({t[0]}) {{ {t[1]} }} else {{ {t[2]} }}"
        ),
        children.map(lambda body: f"fn(x, y) {{ {body} }}"),
    )


expressions = st.recursive(atoms, compound, max_leaves=12)

statements = st.one_of(
    expressions,
    expressions.map(lambda e: f"let v = {e};"),
    expressions.map(lambda e: f"return {e};"),
)

programs = st.lists(statements, min_size=1, max_size=4).map(
    lambda xs: " ".join(x if x.endswith(";") else x + ";" for x in xs)
)


@settings(max_examples=200, deadline=None)
@given(programs)
def test_rendering_is_a_parse_fixed_point(source):
    program, errors = parse(source)
    assert errors == [], (source, errors)

    rendered = str(program)
    reparsed, errors = parse(rendered)
    assert errors == [], (rendered, errors)
    assert str(reparsed) == rendered


@given(expressions)
def test_statement_count_survives_rendering(source):
    program, _ = parse(f"{source}; {source}")
    reparsed, _ = parse(str(program))
    assert len(reparsed.statements) == len(program.statements) == 2
