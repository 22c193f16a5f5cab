"""Interactive REPL for VNM, powered by prompt_toolkit."""

from __future__ import annotations

import re
import sys
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.shortcuts import clear

from lark import UnexpectedInput

from .runner import parse_source, report_error, run
from .runtime import VnmRuntimeError, is_absent
from .utils import debug_py_trace_enabled, set_debug_py_trace

# Zero-width and invisible characters to strip from input.
_INVISIBLE_RE = re.compile("[\u200b\u200c\u200d\ufeff\u00a0\r]")

# Slash commands: name => (description, argument_hint).
_SLASH_CMDS = {
    "/clear": ("Clear the terminal screen", ""),
    "/py-traceback": ("Toggle Python traceback on errors", "[on|off]"),
    "/tree": ("Toggle printing the AST before evaluating", "[on|off]"),
}

_ON = ("on", "1", "true", "yes")
_OFF = ("off", "0", "false", "no")


class ReplState:
    def __init__(self) -> None:
        self.show_tree = False


class _SlashCompleter(Completer):
    """Autocomplete slash commands on the primary prompt."""

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        if not text.startswith("/"):
            return

        for cmd, (desc, hint) in _SLASH_CMDS.items():
            if cmd.startswith(text):
                yield Completion(
                    cmd,
                    start_position=-len(text),
                    display_meta=desc,
                )


def _toggle(arg: str, current: bool) -> bool | None:
    """Resolve an on/off/empty argument; None means the argument was invalid."""
    arg = arg.lower()
    if arg in _ON:
        return True
    if arg in _OFF:
        return False
    if arg == "":
        return not current
    return None


def handle_slash(line: str, state: ReplState) -> bool:
    """Handle slash commands. Returns True if the line was a command."""
    stripped = line.strip()
    if not stripped.startswith("/"):
        return False

    parts = stripped.split(None, 1)
    cmd = parts[0]
    arg = parts[1] if len(parts) > 1 else ""

    if cmd == "/clear":
        clear()
        return True

    if cmd == "/py-traceback":
        enabled = _toggle(arg, debug_py_trace_enabled())
        if enabled is None:
            print("Usage: /py-traceback [on|off]", file=sys.stderr)
            return True

        set_debug_py_trace(enabled)
        print(f"Python traceback: {'on' if enabled else 'off'}")
        return True

    if cmd == "/tree":
        enabled = _toggle(arg, state.show_tree)
        if enabled is None:
            print("Usage: /tree [on|off]", file=sys.stderr)
            return True

        state.show_tree = enabled
        print(f"Tree display: {'on' if enabled else 'off'}")
        return True

    print(f"Unknown command: {cmd}", file=sys.stderr)
    return True


def _normalize(text: str) -> str:
    """Strip invisible characters from input."""
    return _INVISIBLE_RE.sub("", text)


def brace_depth(text: str) -> int:
    """Open `{` count outside string literals; positive means the input is unfinished."""
    depth = 0
    in_string = False

    for ch in text:
        if ch == '"':
            in_string = not in_string
        elif in_string:
            continue
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1

    return depth


def eval_submission(text: str, state: ReplState) -> None:
    """Parse and run one submission, echoing a non-null result."""
    try:
        if state.show_tree:
            print(parse_source(text).pretty(), end="")
        result = run(text, out=sys.stdout)
    except (UnexpectedInput, VnmRuntimeError) as exc:
        sys.stdout.flush()
        report_error(exc)
        return

    if not is_absent(result):
        print(result)


def repl() -> None:
    """Interactive read-eval-print loop with prompt_toolkit."""
    state = ReplState()
    history = InMemoryHistory()

    bindings = KeyBindings()

    @bindings.add("enter")
    def _enter(event):
        buf = event.app.current_buffer
        text = buf.text

        if text.strip().startswith("/") or brace_depth(text) <= 0:
            buf.validate_and_handle()
            return

        indent = "    " * brace_depth(text)
        buf.insert_text("\n" + indent)

    session: PromptSession[str] = PromptSession(
        history=history,
        completer=_SlashCompleter(),
        complete_while_typing=True,
        key_bindings=bindings,
        multiline=True,
        prompt_continuation="... ",
    )

    print("vnm repl - Ctrl-D to exit, / for commands")

    while True:
        try:
            text = session.prompt(">>> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("KeyboardInterrupt")
            continue

        text = _normalize(text)
        if not text.strip():
            continue

        if handle_slash(text, state):
            continue

        eval_submission(text, state)
