"""
Topology: orthogonal neighbor lookup on a linearly indexed grid.

The grid is a flat sequence addressed by i = row * width + col. Neighbors
are always reported in the order left, right, up, down.

Two boundary modes:
- wrap=True: the grid is a torus, every cell has exactly 4 neighbors
- wrap=False: directions that would leave the grid are omitted
  (corners have 2 neighbors, edges 3, interior cells 4)
"""

from __future__ import annotations
from typing import Sequence, TypeVar

T = TypeVar("T")

LEFT = "left"
RIGHT = "right"
UP = "up"
DOWN = "down"

# Fixed reporting order
DIRECTIONS = (LEFT, RIGHT, UP, DOWN)


def validate_dimensions(grid_len: int, width: int) -> int:
    """
    Check that a grid of grid_len cells forms a width-wide rectangle.

    Returns:
        The grid height

    Raises:
        ValueError: if width or height is below 1, or grid_len is not a
            multiple of width
    """
    if width < 1:
        raise ValueError(f"Grid width must be at least 1, got {width}")
    if grid_len < width:
        raise ValueError(
            f"Grid of {grid_len} cells is shorter than one row of width {width}"
        )
    if grid_len % width != 0:
        raise ValueError(
            f"Grid of {grid_len} cells is not a rectangle of width {width}"
        )
    return grid_len // width


def neighbor_coords(
    grid_len: int, width: int, index: int, wrap: bool
) -> list[tuple[str, int]]:
    """
    Get (direction, index) pairs for every available neighbor of a cell.

    Assumes validate_dimensions(grid_len, width) holds.
    """
    col = index % width
    result = []

    if wrap:
        # Left: far left column wraps to the end of the same row
        result.append((LEFT, index + width - 1 if col == 0 else index - 1))

        # Right: far right column wraps to the start of the same row
        result.append((RIGHT, index + 1 - width if col == width - 1 else index + 1))

        # Up: first row wraps to the last row
        result.append((UP, index - width if index >= width else grid_len - width + index))

        # Down: last row wraps to the first row
        result.append((DOWN, col if index >= grid_len - width else index + width))
    else:
        if col > 0:
            result.append((LEFT, index - 1))
        if col < width - 1:
            result.append((RIGHT, index + 1))
        if index >= width:
            result.append((UP, index - width))
        if index + width < grid_len:
            result.append((DOWN, index + width))

    return result


def neighbor_indices(grid_len: int, width: int, index: int, wrap: bool) -> list[int]:
    """Neighbor indices of a cell in left, right, up, down order."""
    return [i for _, i in neighbor_coords(grid_len, width, index, wrap)]


def neighbors(
    grid: Sequence[T], width: int, index: int, wrap: bool
) -> list[tuple[int, T]]:
    """
    Get (index, content) pairs for the neighbors of grid[index].

    The grid is only read. Content is whatever the slot holds at call time,
    so slots rewritten earlier in the same pass are seen in their new state.
    """
    return [(i, grid[i]) for i in neighbor_indices(len(grid), width, index, wrap)]
