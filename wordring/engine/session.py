"""Game session orchestrating catalog, grid and selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..core.constants import RejectReason
from ..core.models import LevelEntry, PlacedWord, RevealStep
from ..data.catalog import LevelCatalog
from ..data.normalization import normalize_word
from ..utils.logger import get_logger
from .events import (
    CatalogExhausted,
    EventDispatcher,
    LevelCompleted,
    LevelLoaded,
    WordAccepted,
    WordRejected,
)
from .grid import LevelGrid
from .ring import RingConfig, RingLayout
from .selection import SelectionEngine


LOGGER = get_logger(__name__)


@dataclass
class SubmitResult:
    """Outcome of one submitted word."""

    word: str
    accepted: bool
    placed_word: Optional[PlacedWord] = None
    reveal: List[RevealStep] = field(default_factory=list)
    reason: Optional[RejectReason] = None
    level_completed: bool = False
    is_last_level: bool = False


@dataclass
class LoadedLevel:
    """What a renderer needs to draw a freshly loaded level."""

    index: int
    entry: LevelEntry
    letters: List[str]
    placed_words: List[PlacedWord]
    grid: LevelGrid


class GameSession:
    """Routes gestures and submissions between the catalog, grid and ring."""

    def __init__(
        self,
        catalog: LevelCatalog,
        *,
        ring_config: Optional[RingConfig] = None,
        dispatcher: Optional[EventDispatcher] = None,
    ) -> None:
        self.catalog = catalog
        self.ring_config = ring_config or RingConfig()
        self.dispatcher = dispatcher or EventDispatcher()
        self.level_over = False
        self.grid, self.ring, self.selection = self._build(catalog.current)
        self._announce(catalog.current_index)

    # ------------------------------------------------------------------
    # Level lifecycle
    # ------------------------------------------------------------------
    def _build(self, entry: LevelEntry) -> Tuple[LevelGrid, RingLayout, SelectionEngine]:
        grid = LevelGrid.from_entry(entry)
        ring = RingLayout(grid.letters, self.ring_config)
        return grid, ring, SelectionEngine(ring, self.dispatcher)

    def _activate(self, index: int) -> LoadedLevel:
        # Build before touching the cursor so a broken level leaves the
        # current one in place.
        entry = self.catalog.entry_at(index)
        grid, ring, selection = self._build(entry)
        self.selection.cancel()
        self.catalog.go_to(index)
        self.grid, self.ring, self.selection = grid, ring, selection
        self.level_over = False
        return self._announce(index)

    def _announce(self, index: int) -> LoadedLevel:
        entry = self.catalog.current
        LOGGER.info(
            "Level %d/%d loaded: %s (%d words)",
            index + 1,
            len(self.catalog),
            entry.name,
            self.grid.total_count,
        )
        self.dispatcher.emit(
            LevelLoaded(
                index=index,
                name=entry.name,
                letters=tuple(self.grid.letters),
                bounds=self.grid.bounds,
                placed_words=tuple(self.grid.words),
            )
        )
        return LoadedLevel(
            index=index,
            entry=entry,
            letters=list(self.grid.letters),
            placed_words=list(self.grid.words),
            grid=self.grid,
        )

    def advance(self) -> Optional[LoadedLevel]:
        """Load the next catalog level, or report exhaustion with ``None``."""

        if self.catalog.peek_next() is None:
            LOGGER.info("Catalog exhausted after level %d", self.catalog.level_number)
            self.dispatcher.emit(CatalogExhausted())
            return None
        return self._activate(self.catalog.current_index + 1)

    def submit_level(self, level_index: int) -> LoadedLevel:
        """Jump straight to ``level_index`` (resume or debugging)."""

        return self._activate(level_index)

    def restart(self) -> LoadedLevel:
        return self._activate(0)

    # ------------------------------------------------------------------
    # Gesture boundary
    # ------------------------------------------------------------------
    def begin_selection(self, token_id: int) -> bool:
        return self.selection.begin(self.ring.token(token_id))

    def extend_selection(self, x: float, y: float) -> bool:
        return self.selection.extend_to(x, y)

    def end_selection(self) -> Optional[SubmitResult]:
        word = self.selection.end()
        if word is None:
            return None
        return self.submit(word)

    def shuffle(self) -> None:
        if self.selection.is_dragging:
            LOGGER.debug("Ignoring shuffle during a gesture")
            return
        self.ring.shuffle()

    # ------------------------------------------------------------------
    # Word submission
    # ------------------------------------------------------------------
    def submit(self, word: str) -> SubmitResult:
        candidate = normalize_word(word)
        if self.level_over:
            LOGGER.debug("Ignoring %r, level already complete", candidate)
            return SubmitResult(word=candidate, accepted=False, reason=self._reject_reason(candidate))

        placed = self.grid.check_word(candidate)
        if placed is None:
            reason = self._reject_reason(candidate)
            LOGGER.info("Rejected %r (%s)", candidate, reason.value)
            self.dispatcher.emit(WordRejected(word=candidate, reason=reason))
            return SubmitResult(word=candidate, accepted=False, reason=reason)

        self.grid.mark_placed(placed)
        reveal = self.grid.reveal(placed)
        LOGGER.info(
            "Found %s (%d/%d)", placed.word, self.grid.found_count, self.grid.total_count
        )
        self.dispatcher.emit(
            WordAccepted(
                placed_word=placed,
                reveal=tuple(reveal),
                found_count=self.grid.found_count,
                total_count=self.grid.total_count,
            )
        )
        result = SubmitResult(word=candidate, accepted=True, placed_word=placed, reveal=reveal)

        if self.grid.is_complete():
            self.level_over = True
            result.level_completed = True
            result.is_last_level = self.catalog.is_last()
            LOGGER.info("Level %d complete", self.catalog.level_number)
            self.dispatcher.emit(LevelCompleted(is_last_level=result.is_last_level))
        return result

    def _reject_reason(self, candidate: str) -> RejectReason:
        if self.grid.is_found(candidate):
            return RejectReason.ALREADY_FOUND
        return RejectReason.UNKNOWN

    # ------------------------------------------------------------------
    # Read-only helpers
    # ------------------------------------------------------------------
    @property
    def progress(self) -> Tuple[int, int]:
        return self.grid.found_count, self.grid.total_count

    def hint(self) -> Optional[PlacedWord]:
        """First placement the player has not found yet."""

        return next((placed for placed in self.grid.words if not placed.found), None)
