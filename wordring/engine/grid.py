"""Level grid representation and word bookkeeping."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set

from ..core.constants import Bounds
from ..core.exceptions import InvariantViolation
from ..core.models import Coordinate, GridCell, LevelEntry, PlacedWord, RevealStep
from ..data.normalization import normalize_word
from ..data.parsing import parse_letter_bank, parse_placements
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def build_grid(words: Iterable[PlacedWord]) -> Dict[Coordinate, GridCell]:
    """Replay every word's letters into a coordinate-keyed cell map.

    Cells shared by several words collect every word reference. A shared cell
    whose words disagree on the letter raises :class:`InvariantViolation`.
    """

    cells: Dict[Coordinate, GridCell] = {}
    for placed in words:
        for coordinate, letter in placed.letters():
            cell = cells.get(coordinate)
            if cell is None:
                cells[coordinate] = GridCell(coordinate=coordinate, letter=letter, words=[placed])
                continue
            if cell.letter != letter:
                others = ", ".join(w.word for w in cell.words)
                LOGGER.error(
                    "Letter conflict at (%s,%s): %s needs %r but %s placed %r",
                    coordinate.x,
                    coordinate.y,
                    placed.word,
                    letter,
                    others,
                    cell.letter,
                )
                raise InvariantViolation(
                    f"Conflicting letters at ({coordinate.x},{coordinate.y}): "
                    f"{cell.letter!r} from {others} vs {letter!r} from {placed.word}"
                )
            cell.words.append(placed)
    return cells


def compute_bounds(words: Iterable[PlacedWord]) -> Bounds:
    max_x = 0
    max_y = 0
    for placed in words:
        if placed.is_horizontal:
            max_x = max(max_x, placed.x + len(placed.word))
            max_y = max(max_y, placed.y + 1)
        else:
            max_x = max(max_x, placed.x + 1)
            max_y = max(max_y, placed.y + len(placed.word))
    return Bounds(width=max_x, height=max_y)


class LevelGrid:
    """Placed words of one level, their cells and the found state."""

    def __init__(self, letters: List[str], words: List[PlacedWord]) -> None:
        self.letters = list(letters)
        self.words = list(words)
        self.cells = build_grid(self.words)
        self.bounds = compute_bounds(self.words)
        self.found_words: Set[str] = set()
        LOGGER.debug(
            "Built grid %sx%s with %d cells for %d words",
            self.bounds.width,
            self.bounds.height,
            len(self.cells),
            len(self.words),
        )

    @classmethod
    def from_text(cls, letters: str, words: str) -> "LevelGrid":
        return cls(parse_letter_bank(letters), parse_placements(words))

    @classmethod
    def from_entry(cls, entry: LevelEntry) -> "LevelGrid":
        return cls.from_text(entry.letters, entry.words)

    # ------------------------------------------------------------------
    # Word matching
    # ------------------------------------------------------------------
    def check_word(self, candidate: str) -> Optional[PlacedWord]:
        """Return the unfound placement spelling ``candidate``, if any."""

        target = normalize_word(candidate)
        for placed in self.words:
            if placed.word == target and not placed.found:
                return placed
        return None

    def mark_found(self, word: str) -> None:
        target = normalize_word(word)
        for placed in self.words:
            if placed.word == target:
                placed.found = True
                self.found_words.add(target)
                return

    def mark_placed(self, placed: PlacedWord) -> None:
        """Mark this exact placement found, even when its word is placed twice."""

        placed.found = True
        self.found_words.add(placed.word)

    def is_found(self, word: str) -> bool:
        return normalize_word(word) in self.found_words

    def is_complete(self) -> bool:
        return all(placed.found for placed in self.words)

    @property
    def found_count(self) -> int:
        return sum(1 for placed in self.words if placed.found)

    @property
    def total_count(self) -> int:
        return len(self.words)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def cell(self, x: int, y: int) -> Optional[GridCell]:
        return self.cells.get(Coordinate(x, y))

    def letter_at(self, x: int, y: int) -> Optional[str]:
        cell = self.cell(x, y)
        return cell.letter if cell else None

    def cells_for_word(self, placed: PlacedWord) -> List[GridCell]:
        return [self.cells[c] for c in placed.coordinates if c in self.cells]

    def reveal(self, placed: PlacedWord) -> List[RevealStep]:
        """Reveal the word's cells and return them in reading order."""

        steps: List[RevealStep] = []
        for cell in self.cells_for_word(placed):
            cell.revealed = True
            steps.append((cell.coordinate, cell.letter))
        return steps

    def is_all_revealed(self) -> bool:
        return all(cell.revealed for cell in self.cells.values())
