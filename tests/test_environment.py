import pytest

from linsl.errors import LinslNameError, LinslTypeError
from linsl.types.environment import Environment
from linsl.types.symbol import Symbol


def test_define_returns_value(env):
    assert env.define(Symbol("a"), 1.0) == 1.0
    assert env.lookup(Symbol("a")) == 1.0


def test_define_overwrites_in_same_frame(env):
    env.define(Symbol("a"), 1.0)
    env.define(Symbol("a"), 2.0)
    assert env.lookup(Symbol("a")) == 2.0


def test_lookup_walks_outward(env):
    env.define(Symbol("a"), 1.0)
    child = env.extend().extend()
    assert child.lookup(Symbol("a")) == 1.0
    assert child.find(Symbol("a")) is env


def test_child_define_shadows_without_mutating_parent(env):
    env.define(Symbol("a"), 1.0)
    child = env.extend()
    child.define(Symbol("a"), 2.0)
    assert child.lookup(Symbol("a")) == 2.0
    assert env.lookup(Symbol("a")) == 1.0


def test_child_bindings_invisible_to_parent(env):
    child = env.extend()
    child.define(Symbol("b"), 1.0)
    assert Symbol("b") in child
    assert Symbol("b") not in env
    with pytest.raises(LinslNameError):
        env.lookup(Symbol("b"))


def test_later_parent_define_visible_to_child(env):
    child = env.extend()
    env.define(Symbol("late"), 3.0)
    assert child.lookup(Symbol("late")) == 3.0


def test_extend_creates_empty_frame(env):
    env.define(Symbol("a"), 1.0)
    child = env.extend()
    assert child.vars == {}
    assert child.outer is env


def test_define_requires_symbol(env):
    with pytest.raises(LinslTypeError):
        env.define("a", 1.0)


def test_update_binds_in_current_frame(env):
    child = env.extend()
    child.update({Symbol("x"): 1.0, Symbol("y"): 2.0})
    assert child.vars == {Symbol("x"): 1.0, Symbol("y"): 2.0}
    assert env.vars == {}


def test_repr_shows_chain(env):
    env.define(Symbol("a"), 1.0)
    child = env.extend()
    child.define(Symbol("b"), 2.0)
    assert repr(child) == "<Environment chain: {b: 2.0} -> {a: 1.0}>"
    assert str(child) == "{b: 2.0} -> ..."


def test_symbols_are_interned():
    assert Symbol("abc") == Symbol("abc")
    assert hash(Symbol("abc")) == hash(Symbol("abc"))
    assert Symbol("abc") != "abc"
