"""
Terminal rendering: draw the ocean with emoji glyphs, one frame per chronon.

Every glyph is two columns wide, so a terminal of C columns fits C // 2
cells per row. Two lines are reserved below the grid for the stats line.
"""

from __future__ import annotations
import shutil
import sys
from typing import Sequence, TextIO

from watorsim.core.cells import Fish, Shark
from watorsim.core.config import OLD_SHARK_AGE

# ANSI control codes
CLEAR_HOME = "\x1b[2J\x1b[1;1H"
HIDE = "\x1b[?25l"
SHOW = "\x1b[?25h"

GLYPH_EMPTY = "  "
GLYPH_FISH = "🐋"
GLYPH_SHARK = "🐠"
GLYPH_OLD_SHARK = "🐙"

DEFAULT_WORLD_SIZE = (80, 40)


def glyph_for(cell, old_shark_age: int = OLD_SHARK_AGE) -> str:
    if isinstance(cell, Fish):
        return GLYPH_FISH
    if isinstance(cell, Shark):
        return GLYPH_OLD_SHARK if cell.lived_chronons > old_shark_age else GLYPH_SHARK
    return GLYPH_EMPTY


def render_world(world: Sequence, width: int, old_shark_age: int = OLD_SHARK_AGE) -> str:
    """Render the grid as text, one line per row."""
    rows = []
    for start in range(0, len(world), width):
        rows.append("".join(glyph_for(c, old_shark_age) for c in world[start:start + width]))
    return "\n".join(rows)


def render_frame(
    world: Sequence,
    width: int,
    status_line: str,
    old_shark_age: int = OLD_SHARK_AGE,
) -> str:
    """Clear screen, grid and status line as one string."""
    return f"{CLEAR_HOME}{render_world(world, width, old_shark_age)}\n{status_line}\n"


def terminal_world_size(
    fallback: tuple[int, int] = DEFAULT_WORLD_SIZE,
) -> tuple[int, int]:
    """
    Largest (width, height) world that fits the current terminal.

    Falls back to the given world size when the terminal size is unknown.
    """
    size = shutil.get_terminal_size((0, 0))
    if size.columns <= 0 or size.lines <= 0:
        return fallback
    return max(1, size.columns // 2), max(1, size.lines - 2)


class TerminalScreen:
    """Context manager that hides the cursor while frames are drawn."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def __enter__(self):
        self.stream.write(HIDE)
        self.stream.flush()
        return self

    def __exit__(self, *_):
        self.stream.write(SHOW)
        self.stream.flush()

    def draw(self, frame: str) -> None:
        self.stream.write(frame)
        self.stream.flush()
