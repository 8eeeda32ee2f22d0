from pathlib import Path

import pytest

from floxdbg.events import NavEvent, Shell, VarsEvent
from floxdbg.trace import (
    CallCtx,
    CallFrame,
    CallStack,
    StackTraceError,
    TraceState,
    load_call_stack,
    parse_bash_or_zsh_stack_trace,
    parse_fish_stack_trace,
)

FISH_TRACE = (
    "in function 'otherfunc';        called on line 8 of file ./run.fish;"
    "in function 'myfunction';        called on line 19 of file ./run.fish"
)


def test_parses_bash_stack_trace():
    st = """
            foo:1:func1
            bar:2:func2
        """
    frames = parse_bash_or_zsh_stack_trace(st)
    assert len(frames) == 2
    assert frames[0].function == "func1"
    assert frames[1].function == "func2"
    assert frames[0].file == Path("foo")
    assert frames[1].line == 2


def test_parses_fish_stack_trace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    frames = parse_fish_stack_trace(FISH_TRACE)
    assert len(frames) == 2
    assert frames[0].function == "otherfunc"
    assert frames[0].line == 8
    assert frames[1].function == "myfunction"
    assert frames[1].line == 19
    assert frames[0].file == Path.cwd() / "run.fish"
    assert frames[0].file.is_absolute()


@pytest.mark.parametrize("text", ["foo:1", "foo:1:f:extra", "foo:x:f", "foo:-1:f"])
def test_bash_rejects_malformed_lines(text):
    with pytest.raises(StackTraceError):
        parse_bash_or_zsh_stack_trace(text)


def test_bash_empty_input_has_no_frames():
    assert parse_bash_or_zsh_stack_trace("\n  \n") == []


def test_fish_rejects_uneven_lines():
    with pytest.raises(StackTraceError):
        parse_fish_stack_trace("in function 'f'")


def test_fish_rejects_missing_function_name():
    with pytest.raises(StackTraceError):
        parse_fish_stack_trace("in function f;called on line 8 of file ./run.fish")


def test_fish_rejects_bad_line_number():
    with pytest.raises(StackTraceError):
        parse_fish_stack_trace("in function 'f';called on line x of file ./run.fish")


def test_fish_rejects_missing_file():
    with pytest.raises(StackTraceError):
        parse_fish_stack_trace("in function 'f';called on line 8 of")


def test_load_call_stack_reads_files(tmp_path):
    source = tmp_path / "script.sh"
    source.write_text("one\ntwo\nthree")
    missing = tmp_path / "missing.sh"
    text = f"{source}:2:func1\n{missing}:1:func2\n"
    stack = load_call_stack(text, Shell.BASH)
    assert [f.ctx.function for f in stack.frames] == ["func1", "func2"]
    assert stack.frames[0].lines == ["one", "two", "three"]
    assert stack.frames[1].lines is None


def test_load_call_stack_fish(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "run.fish").write_text("a\nb\n")
    stack = load_call_stack(FISH_TRACE, Shell.FISH)
    assert len(stack.frames) == 2
    assert stack.frames[0].lines == ["a", "b", ""]


def test_load_call_stack_propagates_parse_errors():
    with pytest.raises(StackTraceError):
        load_call_stack("garbage", Shell.ZSH)


def _stack(n):
    return CallStack(
        frames=[CallFrame(CallCtx(Path(f"f{i}"), i, f"fn{i}")) for i in range(n)]
    )


def test_trace_state_without_stack_has_no_selection():
    state = TraceState("tp")
    assert state.list_state is None
    assert state.selected_frame() is None
    state.handle_event(NavEvent.DOWN)
    assert state.list_state is None


def test_trace_state_selects_first_frame():
    stack = _stack(3)
    state = TraceState(None, stack)
    assert state.list_state.selected == 0
    assert state.selected_frame() is stack.frames[0]


def test_trace_state_navigation_is_bounded():
    stack = _stack(3)
    state = TraceState("tp", stack)
    state.handle_event(NavEvent.UP)
    assert state.list_state.selected == 0
    for _ in range(5):
        state.handle_event(NavEvent.DOWN)
    assert state.list_state.selected == 2
    assert state.selected_frame() is stack.frames[2]
    state.handle_event(NavEvent.UP)
    assert state.list_state.selected == 1


def test_trace_state_ignores_other_events():
    state = TraceState(None, _stack(2))
    state.handle_event(NavEvent.RIGHT)
    state.handle_event(VarsEvent.SPLIT_DETAIL)
    assert state.list_state.selected == 0