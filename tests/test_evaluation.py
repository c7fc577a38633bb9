import pytest

from shallot.types.environment import Environment
from shallot.types.lambda_fn import Lambda
from shallot.types.macro import Macro
from shallot.types.symbol import Symbol
from shallot.types import errors
from shallot.evaluation.evaluator import evaluate

S = Symbol

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def env():
    env = Environment()
    env.define(S("+"), lambda _, args: float(sum(args)))
    env.define(S("*"), lambda _, args: args[0] * args[1])
    env.define(S("x"), 42.0)
    env.define(S("y"), 100.0)
    return env

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_numbers(env):
    assert evaluate(1.0, env) == 1.0
    assert evaluate(3.14, env) == 3.14


def test_symbol_lookup(env):
    assert evaluate(S("x"), env) == 42.0
    assert evaluate(S("y"), env) == 100.0
    with pytest.raises(errors.ShallotUnboundSymbol):
        evaluate(S("z"), env)


def test_quote_returns_form_unevaluated(env):
    assert evaluate([S("quote"), [S("x"), 1.0]], env) == [S("x"), 1.0]
    assert evaluate([S("'"), S("x")], env) == S("x")


def test_quote_arity(env):
    with pytest.raises(errors.ShallotMalformedExpression):
        evaluate([S("quote")], env)
    with pytest.raises(errors.ShallotMalformedExpression):
        evaluate([S("quote"), 1.0, 2.0], env)


def test_simple_application(env):
    assert evaluate([S("+"), 1.0, 2.0], env) == 3.0


def test_lambda_creates_closure_over_env(env):
    lam = evaluate([S("λ"), [S("a"), S("b")], [S("+"), S("a"), S("b")]], env)
    assert isinstance(lam, Lambda)
    assert lam.env is env
    assert lam.formals == [S("a"), S("b")]


def test_lambda_application(env):
    expr = [[S("λ"), [S("a"), S("b")], [S("+"), S("a"), S("b")]], 2.0, 3.0]
    assert evaluate(expr, env) == 5.0


def test_closure_object_in_head_position(env):
    lam = evaluate([S("lambda"), [S("a")], [S("*"), S("a"), S("a")]], env)
    assert evaluate([lam, 7.0], env) == 49.0


def test_arity_mismatch_is_malformed(env):
    lam = [S("λ"), [S("a"), S("b")], S("a")]
    with pytest.raises(errors.ShallotMalformedExpression):
        evaluate([lam, 1.0], env)
    with pytest.raises(errors.ShallotMalformedExpression):
        evaluate([lam, 1.0, 2.0, 3.0], env)


@pytest.mark.parametrize(
    "form",
    [
        [S("λ")],
        [S("λ"), [S("a")]],
        [S("λ"), [S("a")], S("a"), S("a")],
        [S("λ"), S("a"), S("a")],
        [S("λ"), [1.0], S("a")],
        [S("λ"), [S("a"), S("a")], S("a")],
        [S("μ"), [S("a")]],
    ],
)
def test_malformed_lambda_and_macro_forms(env, form):
    with pytest.raises(errors.ShallotMalformedExpression):
        evaluate(form, env)


def test_define_binds_in_global_frame_and_returns_value(env):
    assert evaluate([S("define"), S("z"), [S("+"), 1.0, 2.0]], env) == 3.0
    assert env.vars[S("z")] == 3.0


def test_define_accepts_quoted_name(env):
    evaluate([S("define"), [S("quote"), S("w")], 5.0], env)
    assert evaluate(S("w"), env) == 5.0


def test_define_inside_closure_writes_global_frame(env):
    # ((λ (v) (define 'inner v)) 9)
    evaluate([[S("λ"), [S("v")], [S("define"), [S("quote"), S("inner")], S("v")]], 9.0], env)
    assert env.vars[S("inner")] == 9.0
    assert S("v") not in env


@pytest.mark.parametrize(
    "form",
    [
        [S("define")],
        [S("define"), S("a")],
        [S("define"), S("a"), 1.0, 2.0],
    ],
)
def test_malformed_define(env, form):
    with pytest.raises(errors.ShallotMalformedExpression):
        evaluate(form, env)


@pytest.mark.parametrize(
    "name",
    [1.0, [S("quote"), 1.0], [S("a"), S("b")]],
)
def test_define_rejects_non_symbol_names(env, name):
    with pytest.raises(errors.ShallotInvalidSymbol):
        evaluate([S("define"), name, 2.0], env)


def test_string_literals_evaluate_to_themselves(env):
    literal = S('"hello world"')
    assert evaluate(literal, env) == literal
    assert evaluate([S("quote"), literal], env) == literal


def test_cond_selects_branch(env):
    assert evaluate([S("cond"), 1.0, 10.0, 20.0], env) == 10.0
    assert evaluate([S("cond"), 0.0, 10.0, 20.0], env) == 20.0
    assert evaluate([S("cond"), -0.5, 10.0, 20.0], env) == 10.0


def test_cond_evaluates_only_selected_branch(env):
    # the untaken branch references an unbound symbol
    assert evaluate([S("cond"), 1.0, S("x"), S("nope")], env) == 42.0
    assert evaluate([S("cond"), 0.0, S("nope"), S("y")], env) == 100.0


def test_cond_non_number_test_is_malformed(env):
    with pytest.raises(errors.ShallotMalformedExpression):
        evaluate([S("cond"), [S("quote"), S("yes")], 1.0, 2.0], env)
    with pytest.raises(errors.ShallotMalformedExpression):
        evaluate([S("cond"), [S("quote"), []], 1.0, 2.0], env)


def test_cond_arity(env):
    with pytest.raises(errors.ShallotMalformedExpression):
        evaluate([S("cond"), 1.0, 2.0], env)
    with pytest.raises(errors.ShallotMalformedExpression):
        evaluate([S("cond"), 1.0, 2.0, 3.0, 4.0], env)


def test_empty_form_is_malformed(env):
    with pytest.raises(errors.ShallotMalformedExpression):
        evaluate([], env)


def test_not_callable(env):
    with pytest.raises(errors.ShallotNotCallable):
        evaluate([S("x"), 1.0], env)
    with pytest.raises(errors.ShallotNotCallable):
        evaluate([1.0, 2.0], env)
    with pytest.raises(errors.ShallotNotCallable):
        evaluate([[S("quote"), S("sym")]], env)


def test_head_evaluated_before_operands(env):
    # an unbound head fails even though the operands are unbound too
    with pytest.raises(errors.ShallotUnboundSymbol) as exc:
        evaluate([S("nope"), S("also-nope")], env)
    assert "nope" in str(exc.value)


def test_special_forms_cannot_be_shadowed(env):
    evaluate([S("define"), S("cond"), 1.0], env)
    assert evaluate([S("cond"), 1.0, 2.0, 3.0], env) == 2.0


def test_mu_creates_macro(env):
    m = evaluate([S("μ"), [S("a")], S("a")], env)
    assert isinstance(m, Macro)
    assert m.env is env


def test_self_application(env):
    # ((λ (x) (x x)) (λ (y) 7)) -> ((λ (y) 7) (λ (y) 7)) -> 7
    expr = [[S("λ"), [S("x")], [S("x"), S("x")]], [S("λ"), [S("y")], 7.0]]
    assert evaluate(expr, env) == 7.0


def test_referential_transparency(env):
    expr = [[S("λ"), [S("a")], [S("*"), S("a"), [S("+"), S("a"), S("x")]]], 3.0]
    first = evaluate(expr, env)
    assert first == 135.0
    assert evaluate(expr, env) == first
