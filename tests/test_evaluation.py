import pytest
from hypothesis import given, strategies as st

from linsl.errors import LinslNameError, LinslTypeError, LinslArityError, LinslDivisionError
from linsl.evaluation.evaluator import evaluate
from linsl.types.procedure import Closure, Macro, Primitive
from linsl.types.symbol import Symbol
from linsl.types.environment import Environment

# -----------------------------------------------------
# Self-evaluating values and lookup
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1.0, env) == 1.0
    assert evaluate(3.14, env) == 3.14
    assert evaluate(True, env) is True
    assert evaluate(False, env) is False
    assert evaluate([], env) == []


def test_procedures_are_self_evaluating(env):
    closure = Closure([Symbol("x")], Symbol("x"), env)
    macro = Macro([], 1.0, env)
    assert evaluate(closure, env) is closure
    assert evaluate(macro, env) is macro


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42.0)
    assert evaluate(Symbol("x"), env) == 42
    with pytest.raises(LinslNameError):
        evaluate(Symbol("z"), env)


def test_primitive_names_evaluate_to_primitives(env):
    plus = evaluate(Symbol("+"), env)
    assert isinstance(plus, Primitive)
    assert plus.name == "+"


def test_special_form_names_are_not_values(env):
    with pytest.raises(LinslNameError):
        evaluate(Symbol("if"), env)


def test_unknown_python_object_is_rejected(env):
    with pytest.raises(LinslTypeError):
        evaluate("a string", env)
    with pytest.raises(LinslTypeError):
        evaluate(None, env)

# -----------------------------------------------------
# Application
# -----------------------------------------------------

def test_simple_expression(env):
    assert evaluate([Symbol("+"), 1.0, 2.0], env) == 3


def test_lambda_simple(env):
    expr = [Symbol("lambda"), [Symbol("a"), Symbol("b")], [Symbol("+"), Symbol("a"), Symbol("b")]]
    lam = evaluate(expr, env)
    assert isinstance(lam, Closure)
    assert evaluate([lam, 2.0, 3.0], env) == 5


def test_closure_frame_is_parented_at_captured_env(env):
    outer = env.extend()
    outer.define(Symbol("n"), 10.0)
    lam = evaluate([Symbol("lambda"), [], Symbol("n")], outer)
    # the caller's environment does not bind n; the captured one does
    assert evaluate([lam], env) == 10


def test_closure_frame_is_discarded(env):
    lam = evaluate([Symbol("lambda"), [Symbol("a")], Symbol("a")], env)
    evaluate([lam, 1.0], env)
    assert Symbol("a") not in env


@pytest.mark.parametrize("head", [1.0, True, [Symbol("quote"), [1.0]], []])
def test_non_applicable_head(env, head):
    with pytest.raises(LinslTypeError, match="Not applicable"):
        evaluate([head, 2.0], env)


def test_arguments_evaluated_left_to_right(env):
    # the second argument fails only after the first one has defined x
    expr = [Symbol("+"), [Symbol("define"), Symbol("x"), 1.0], [Symbol("inv"), 0.0]]
    with pytest.raises(LinslDivisionError):
        evaluate(expr, env)
    assert env.lookup(Symbol("x")) == 1


@given(
    n_params=st.integers(min_value=0, max_value=4),
    args=st.lists(st.floats(allow_nan=False, allow_infinity=False), max_size=6),
)
def test_closure_arity_mismatch_always_fails(n_params, args):
    if len(args) == n_params:
        args = args + [0.0]
    env = Environment()
    params = [Symbol(f"p{i}") for i in range(n_params)]
    lam = evaluate([Symbol("lambda"), params, 0.0], env)
    with pytest.raises(LinslArityError):
        evaluate([lam, *args], env)


def test_macro_arity_mismatch(env):
    mac = evaluate([Symbol("macro"), [Symbol("a")], Symbol("a")], env)
    with pytest.raises(LinslArityError):
        evaluate([mac], env)
