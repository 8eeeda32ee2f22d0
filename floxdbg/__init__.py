"""Terminal debugger for inspecting shell environment activation."""

__version__ = "0.1.0"