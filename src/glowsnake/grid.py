# grid.py
"""Toroidal geometry for the board: coordinates wrap instead of bounding."""
from typing import Iterable, Tuple
import random

from .config import COLS, ROWS

Cell = Tuple[int, int]


def wrap(coord: int, size: int) -> int:
    """Reduce ``coord`` into ``[0, size)``; Python's modulo is never negative."""
    return coord % size


def step(cell: Cell, direction: Tuple[int, int], cols: int = COLS, rows: int = ROWS) -> Cell:
    x, y = cell
    dx, dy = direction
    return (wrap(x + dx, cols), wrap(y + dy, rows))


def random_empty_cell(
    blocked: Iterable[Cell],
    rng: random.Random,
    cols: int = COLS,
    rows: int = ROWS,
) -> Cell:
    """
    Sample uniform cells until one is not in ``blocked``.
    Loops forever if every cell is blocked; a board that full is never
    reached in play.
    """
    taken = set(blocked)
    while True:
        cell = (rng.randrange(cols), rng.randrange(rows))
        if cell not in taken:
            return cell
