from __future__ import annotations

import pytest

from tests.support.harness import (
    NK,
    VnmBool,
    VnmTypeError,
    effect,
    evaluate,
    false,
    node,
    num,
    run_runtime_case,
    true,
)

SCENARIOS = [
    pytest.param("true || false;", ("bool", True), None, id="or-basic"),
    pytest.param("false || false || false;", ("bool", False), None, id="or-all-false"),
    pytest.param("true && true;", ("bool", True), None, id="and-basic"),
    pytest.param("true && false && true;", ("bool", False), None, id="and-one-false"),
    pytest.param("!true;", ("bool", False), None, id="not-true"),
    pytest.param("!!true;", ("bool", True), None, id="not-not"),
    pytest.param("!(1 < 2);", ("bool", False), None, id="not-comparison"),
    pytest.param("1 < 2 && 3 > 2;", ("bool", True), None, id="and-of-comparisons"),
    pytest.param("false && 1;", ("bool", False), None, id="and-skips-bad-operand"),
    pytest.param("true || 1;", ("bool", True), None, id="or-skips-bad-operand"),
    pytest.param("true && 1;", None, VnmTypeError, id="and-reaches-bad-operand"),
    pytest.param("1 || true;", None, VnmTypeError, id="or-int-operand"),
    pytest.param('!"yes";', None, VnmTypeError, id="not-string"),
    pytest.param("!0;", None, VnmTypeError, id="not-int-no-coercion"),
]


@pytest.mark.parametrize("source, expectation, expected_exc", SCENARIOS)
def test_logic(source: str, expectation, expected_exc) -> None:
    run_runtime_case(source, expectation, expected_exc)


def test_empty_gates() -> None:
    assert evaluate(node(NK.OR))[0] == VnmBool(False)
    assert evaluate(node(NK.AND))[0] == VnmBool(True)


def test_and_stops_at_first_false() -> None:
    # each effect yields the context value, so every child here is false
    tree = node(NK.AND, effect("a"), effect("b"), effect("c"))

    value, output = evaluate(tree, data=VnmBool(False))

    assert value == VnmBool(False)
    assert output == "a"


def test_and_visits_all_when_true() -> None:
    tree = node(NK.AND, effect("a"), effect("b"), effect("c"))

    value, output = evaluate(tree, data=VnmBool(True))

    assert value == VnmBool(True)
    assert output == "abc"


def test_or_stops_at_first_true() -> None:
    tree = node(NK.OR, false(), effect("a"), effect("b"))

    value, output = evaluate(tree, data=VnmBool(True))

    assert value == VnmBool(True)
    assert output == "a"


def test_or_visits_all_when_false() -> None:
    tree = node(NK.OR, effect("a"), effect("b"))

    value, output = evaluate(tree, data=VnmBool(False))

    assert value == VnmBool(False)
    assert output == "ab"


def test_and_false_then_effect_never_runs() -> None:
    tree = node(NK.AND, effect("first"), true(), effect("second"))

    value, output = evaluate(tree, data=VnmBool(False))

    assert value == VnmBool(False)
    assert "second" not in output
    assert output == "first"


def test_gate_failure_keeps_earlier_output() -> None:
    tree = node(NK.OR, effect("x"), num(1))

    with pytest.raises(VnmTypeError):
        evaluate(tree, data=VnmBool(False))
