"""Pretty-print helpers for level grids and the letter ring."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine.grid import LevelGrid
    from ..engine.ring import RingLayout
    from ..engine.session import GameSession


HIDDEN = "_"
BLANK = " "


def cell_symbol(grid: LevelGrid, x: int, y: int, reveal_all: bool = False) -> str:
    cell = grid.cell(x, y)
    if cell is None:
        return BLANK
    if cell.revealed or reveal_all:
        return cell.letter
    return HIDDEN


def format_grid(grid: LevelGrid, *, reveal_all: bool = False) -> str:
    width = grid.bounds.width
    header_cells = [f"{x:>2}" for x in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * max(0, 3 * width - 1))
    for y in range(grid.bounds.height):
        row_render = " ".join(f"{cell_symbol(grid, x, y, reveal_all):>2}" for x in range(width))
        lines.append(f"{y:>2} | {row_render}".rstrip())
    return "\n".join(lines)


def format_ring(ring: RingLayout) -> str:
    """Letters in clockwise order starting from the top-most token."""

    ordered = sorted(ring.tokens, key=lambda token: (round(token.y, 6), token.x))
    start = ordered[0] if ordered else None
    if start is None:
        return ""
    tokens = ring.tokens[start.slot:] + ring.tokens[: start.slot]
    return "  ".join(f"{token.letter}[{token.token_id}]" for token in tokens)


def print_session_status(session: GameSession, *, stream=None) -> None:
    stream = stream or sys.stdout
    catalog = session.catalog
    found, total = session.progress
    print(
        f"Level {catalog.level_number}/{len(catalog)}: {catalog.current.name}"
        f"  ({found}/{total} words)",
        file=stream,
    )
    print(format_grid(session.grid), file=stream)
    print(file=stream)
    print(f"Ring: {format_ring(session.ring)}", file=stream)
