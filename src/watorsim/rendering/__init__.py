"""
Terminal output for live runs.

- glyph_for / render_world: emoji view of the grid
- render_frame: full screen redraw with the stats line
- terminal_world_size: fit the world to the terminal
- TerminalScreen: cursor handling around a run
"""

from watorsim.rendering.terminal import (
    glyph_for,
    render_world,
    render_frame,
    terminal_world_size,
    TerminalScreen,
)

__all__ = [
    "glyph_for",
    "render_world",
    "render_frame",
    "terminal_world_size",
    "TerminalScreen",
]
