"""Renderers for the debugger's screens, header, footer and exit modal."""