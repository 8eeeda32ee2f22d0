import pytest

from floxdbg.events import ExitModal, ExitOption, Screen, Shell


@pytest.mark.parametrize(
    "screen,index",
    [
        (Screen.HOME, 0),
        (Screen.PROMPT, 1),
        (Screen.VARS, 2),
        (Screen.TRACE, 3),
        (Screen.OUTPUT, 4),
    ],
)
def test_tab_indices_follow_display_order(screen, index):
    assert screen.tab_index() == index


def test_next_tab_sequence():
    assert Screen.HOME.next_tab() is Screen.PROMPT
    assert Screen.PROMPT.next_tab() is Screen.VARS
    assert Screen.VARS.next_tab() is Screen.TRACE
    assert Screen.TRACE.next_tab() is Screen.OUTPUT
    assert Screen.OUTPUT.next_tab() is Screen.HOME


def test_cycling_all_tabs_returns_to_start():
    screen = Screen.VARS
    for _ in range(5):
        screen = screen.next_tab()
    assert screen is Screen.VARS


@pytest.mark.parametrize(
    "screen,name",
    [
        (Screen.HOME, "Home"),
        (Screen.PROMPT, "Prompt"),
        (Screen.VARS, "Vars"),
        (Screen.TRACE, "Trace"),
        (Screen.OUTPUT, "Output"),
    ],
)
def test_screen_display_names(screen, name):
    assert screen.__str__() == name
    assert str(screen) == name


@pytest.mark.parametrize(
    "name,shell", [("bash", Shell.BASH), ("zsh", Shell.ZSH), ("fish", Shell.FISH)]
)
def test_shell_parse(name, shell):
    assert Shell.parse(name) is shell


def test_shell_parse_rejects_unknown():
    with pytest.raises(ValueError, match="unrecognized shell: sh"):
        Shell.parse("sh")


def test_shell_parse_is_case_sensitive():
    with pytest.raises(ValueError):
        Shell.parse("Bash")


def test_exit_option_toggle():
    assert ExitOption.OK.toggled() is ExitOption.CANCEL
    assert ExitOption.CANCEL.toggled() is ExitOption.OK
    assert ExitOption.OK.toggled().toggled() is ExitOption.OK


def test_exit_modal_defaults_to_cancel():
    assert ExitModal().highlighted_option is ExitOption.CANCEL