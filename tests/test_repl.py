from __future__ import annotations

import pytest

from vnm.repl import ReplState, brace_depth, eval_submission, handle_slash
from vnm.utils import DEBUG_PY_TRACE_ENV, debug_py_trace_enabled


@pytest.mark.parametrize(
    "text, depth",
    [
        pytest.param("println(1);", 0, id="flat"),
        pytest.param("if (x) {", 1, id="open-block"),
        pytest.param("if (x) { while (y) {", 2, id="nested-open"),
        pytest.param("if (x) { }", 0, id="closed"),
        pytest.param('print("{");', 0, id="brace-in-string"),
    ],
)
def test_brace_depth(text: str, depth: int) -> None:
    assert brace_depth(text) == depth


def test_non_slash_line_is_not_a_command() -> None:
    assert handle_slash("println(1);", ReplState()) is False


def test_tree_toggle(capsys: pytest.CaptureFixture[str]) -> None:
    state = ReplState()

    assert handle_slash("/tree on", state)
    assert state.show_tree
    assert handle_slash("/tree", state)
    assert not state.show_tree
    assert capsys.readouterr().out == "Tree display: on\nTree display: off\n"


def test_tree_toggle_bad_argument(capsys: pytest.CaptureFixture[str]) -> None:
    state = ReplState()

    assert handle_slash("/tree maybe", state)
    assert not state.show_tree
    assert "Usage: /tree" in capsys.readouterr().err


def test_py_traceback_toggle(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(DEBUG_PY_TRACE_ENV, "0")
    state = ReplState()

    handle_slash("/py-traceback on", state)
    assert debug_py_trace_enabled()

    handle_slash("/py-traceback off", state)
    assert not debug_py_trace_enabled()


def test_unknown_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert handle_slash("/nope", ReplState())
    assert "Unknown command: /nope" in capsys.readouterr().err


def test_submission_echoes_value(capsys: pytest.CaptureFixture[str]) -> None:
    eval_submission("2 * 21;", ReplState())

    assert capsys.readouterr().out == "42\n"


def test_submission_prints_output_without_echo(capsys: pytest.CaptureFixture[str]) -> None:
    eval_submission('println("x");', ReplState())

    assert capsys.readouterr().out == "x\n"


def test_submission_with_tree(capsys: pytest.CaptureFixture[str]) -> None:
    state = ReplState()
    state.show_tree = True

    eval_submission("true;", state)

    assert capsys.readouterr().out == "body\n  true\ntrue\n"


def test_submission_error(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.delenv(DEBUG_PY_TRACE_ENV, raising=False)

    eval_submission("5 % 0;", ReplState())

    assert capsys.readouterr().err == "Error: Modulo by zero\n"
