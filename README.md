# floxdbg

A full-screen terminal debugger that pauses the activation of a shell
environment so that you can look at its state before carrying on.

The interface is drawn on standard error. When you leave the debugger, the
shell commands it has gathered are printed on standard output, so your shell
can source them.

## Installation

```
pip install .
```

## Usage

Start it from a Bash, Zsh or Fish script:

```
floxdbg --shell bash --tracepoint my_point --call-stack "$STACK"
```

Options:

- `--shell` (required): `bash`, `zsh` or `fish`. This is the shell that
  started the debugger and the dialect of the printed commands. Any other
  value is rejected with a usage message.
- `--tracepoint`: the name of the tracepoint where execution paused.
- `--call-stack`: a stack trace of the shell's execution.
  - For Bash and Zsh, give one `file:line:function` entry per line. Blank
    lines are ignored; any other line must have exactly three
    colon-separated parts and a whole-number line.
  - For Fish, give Fish's own stack trace with the newlines replaced by `;`,
    for example
    `in function 'f';        called on line 8 of file ./run.fish`.
    The entries come in pairs, and relative file paths are resolved against
    the current directory.

If the call stack cannot be parsed, the debugger prints `Error: ...` on
standard error and exits with status 1 before showing anything. Pressing
Ctrl-C leaves it with status 130 and prints no commands.

If the `FLOX_DBG_TRACEPOINT` variable is set to anything other than `all` or
the empty string, the printed output removes it on exit: `unset
FLOX_DBG_TRACEPOINT` for Bash and Zsh, `set -e FLOX_DBG_TRACEPOINT` for Fish.

To source the commands in Bash or Zsh:

```
eval "$(floxdbg --shell bash)"
```

In Fish:

```
floxdbg --shell fish | source
```

## Tabs

- **Home**: an overview of the debugger and its tabs.
- **Prompt**: a placeholder screen.
- **Vars**: the environment variables, sorted by name. Up and down move
  through the focused list; left focuses the variable list and right the
  detail view. `r` shows the selected variable's raw value and `s` splits it
  on the platform's path separator into a list you can move through.
- **Trace**: the current tracepoint and, when a call stack was given, its
  frames. Up and down select a frame; you see its file, line and function,
  with the source around the call site highlighted. If the file cannot be
  read, `<source unavailable>` is shown instead.
- **Output**: the commands that will be sourced when the debugger exits.

`Tab` goes to the next tab. `q` asks whether to exit. In that dialog, left
and right switch between Ok and Cancel, and `Enter` confirms. Cancel is
highlighted first.

## What it does not do

The Prompt tab has no command prompt yet: you cannot set breakpoints, change
variables or add commands to the output from inside the debugger. The output
only ever holds the tracepoint clean-up described above.

## Using it as a library

The state lives in `floxdbg.app.App`, built with `App.from_args(shell,
tracepoint, call_stack, environ)`. Feed it events from `floxdbg.events`
through `App.handle_event`, which returns `True` once exit is confirmed, and
draw it into a `floxdbg.canvas.Canvas` with `floxdbg.ui.draw.draw_ui`. Stack
traces can be parsed on their own with `floxdbg.trace.load_call_stack`,
which raises `StackTraceError` on bad input.

## Development

```
pip install -e ".[test]"
pytest
```