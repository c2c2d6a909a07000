import pytest
import styx.operators  # noqa: F401  ensure registry loads
from styx.registry import get_op, is_operator, list_operators, register


def test_synonyms_share_one_entry():
    for sym, word in [("+", "add"), ("-", "sub"), ("*", "mul"), ("/", "div"), ("%", "mod")]:
        assert get_op(sym) is get_op(word)


def test_every_grammar_operator_is_registered():
    for tok in ["+", "-", "*", "/", "%", "^", "add", "sub", "mul", "div", "mod", "min", "max"]:
        assert is_operator(tok)


def test_reducers():
    assert get_op("min").kind == "reduce"
    assert get_op("max").kind == "reduce"
    assert get_op("+").kind == "fold"


def test_unknown_operator():
    assert not is_operator("pow")
    with pytest.raises(KeyError):
        get_op("pow")


def test_list_operators():
    ops = {o["name"]: o for o in list_operators()}
    assert set(ops) == {"+", "-", "*", "/", "%", "^", "min", "max"}
    assert ops["+"]["aliases"] == ["add"]
    assert ops["max"]["kind"] == "reduce"


def test_duplicate_spelling_rejected():
    with pytest.raises(ValueError):
        register("plus", aliases=("add",))(lambda x, y: x)
