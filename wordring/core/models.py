"""Data models supporting the word ring puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import Orientation


@dataclass(frozen=True, order=True)
class Coordinate:
    """Integer grid position; the key of the cell map."""

    x: int
    y: int


RevealStep = Tuple[Coordinate, str]


@dataclass
class PlacedWord:
    """A target word anchored in the grid."""

    word: str
    x: int
    y: int
    orientation: Orientation
    found: bool = False

    @property
    def is_horizontal(self) -> bool:
        return self.orientation == Orientation.HORIZONTAL

    @property
    def coordinates(self) -> List[Coordinate]:
        if self.is_horizontal:
            return [Coordinate(self.x + i, self.y) for i in range(len(self.word))]
        return [Coordinate(self.x, self.y + i) for i in range(len(self.word))]

    def letters(self) -> List[RevealStep]:
        return list(zip(self.coordinates, self.word))


@dataclass
class GridCell:
    """One coordinate of the puzzle grid and the words crossing it."""

    coordinate: Coordinate
    letter: str
    revealed: bool = False
    words: List[PlacedWord] = field(default_factory=list)

    @property
    def is_intersection(self) -> bool:
        return len(self.words) > 1


@dataclass(eq=False)
class LetterToken:
    """A letter laid out on the ring.

    Tokens compare by identity so that a ring with repeated letters still
    resolves selections per instance.
    """

    token_id: int
    letter: str
    slot: int
    x: float
    y: float
    radius: float
    selected: bool = False

    def distance_to(self, x: float, y: float) -> float:
        return ((x - self.x) ** 2 + (y - self.y) ** 2) ** 0.5


@dataclass(frozen=True)
class LevelEntry:
    """A raw level definition as authored."""

    id: int
    name: str
    letters: str
    words: str
