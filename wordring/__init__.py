"""Word ring puzzle core: level grids, ring selection and level progression.

This package exposes the public API surface via:

- ``wordring.engine.grid.LevelGrid``: parses a level and tracks found words.
- ``wordring.engine.selection.SelectionEngine``: drag gestures over the ring.
- ``wordring.engine.session.GameSession``: glues catalog, grid and selection.
- ``wordring.data.catalog.LevelCatalog``: ordered levels and the cursor.

Rendering layers subscribe to the events in ``wordring.engine.events``.
"""

from .data.catalog import LevelCatalog, default_catalog, load_catalog
from .engine.grid import LevelGrid
from .engine.ring import RingConfig, RingLayout
from .engine.selection import SelectionEngine
from .engine.session import GameSession

__all__ = [
    "GameSession",
    "LevelCatalog",
    "LevelGrid",
    "RingConfig",
    "RingLayout",
    "SelectionEngine",
    "default_catalog",
    "load_catalog",
]

__version__ = "0.1.0"
