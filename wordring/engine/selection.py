"""Drag selection state machine over the letter ring.

The engine has two phases. ``IDLE`` waits for a gesture; ``DRAGGING``
accumulates tokens in the order the pointer reaches them. Releasing the
pointer always returns to ``IDLE`` and clears the selection, submitting the
accumulated word first when it is long enough. Input that does not fit the
current phase is ignored.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..core.constants import MIN_SUBMIT_LENGTH, SelectionPhase
from ..core.models import LetterToken
from ..utils.logger import get_logger
from .events import (
    ConnectorMoved,
    EventDispatcher,
    SelectionChanged,
    SelectionCleared,
    SelectionSubmitted,
)
from .ring import RingLayout


LOGGER = get_logger(__name__)

Point = Tuple[float, float]


class SelectionEngine:
    """Turns pointer events over a :class:`RingLayout` into candidate words."""

    def __init__(self, ring: RingLayout, dispatcher: Optional[EventDispatcher] = None) -> None:
        self.ring = ring
        self.dispatcher = dispatcher or EventDispatcher()
        self.phase = SelectionPhase.IDLE
        self.selection: List[LetterToken] = []

    @property
    def is_dragging(self) -> bool:
        return self.phase == SelectionPhase.DRAGGING

    @property
    def selected_tokens(self) -> Tuple[LetterToken, ...]:
        return tuple(self.selection)

    @property
    def current_word(self) -> str:
        return "".join(token.letter for token in self.selection)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def begin(self, token: Optional[LetterToken]) -> bool:
        """Start a gesture on ``token``; returns whether the selection grew."""

        if token is None or not self._owns(token):
            LOGGER.debug("Ignoring begin without a token on this ring")
            return False
        if not self.is_dragging:
            self.phase = SelectionPhase.DRAGGING
        return self._select(token)

    def begin_at(self, x: float, y: float) -> bool:
        """Pointer down anywhere on the ring area.

        The gesture starts even when the point misses every token, so the
        first token reached by :meth:`extend_to` opens the word.
        """

        if not self.is_dragging:
            self.phase = SelectionPhase.DRAGGING
        token = self.ring.token_at(x, y)
        grew = self._select(token) if token is not None else False
        self._emit_connector((x, y))
        return grew

    def extend_to(self, x: float, y: float) -> bool:
        if not self.is_dragging:
            LOGGER.debug("Ignoring extend_to(%.1f, %.1f) while idle", x, y)
            return False
        token = self.ring.token_at(x, y)
        grew = self._select(token) if token is not None else False
        self._emit_connector((x, y))
        return grew

    def end(self) -> Optional[str]:
        """Release the pointer; returns the submitted word, if any."""

        if not self.is_dragging:
            LOGGER.debug("Ignoring end while idle")
            return None
        self.phase = SelectionPhase.IDLE
        word = self.current_word
        if len(self.selection) < MIN_SUBMIT_LENGTH:
            LOGGER.debug("Discarding short selection %r", word)
            self._clear()
            return None
        try:
            self.dispatcher.emit(SelectionSubmitted(word=word))
        finally:
            self._clear()
        return word

    def cancel(self) -> None:
        """Abort the gesture without submitting."""

        if not self.is_dragging:
            return
        self.phase = SelectionPhase.IDLE
        self._clear()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _owns(self, token: LetterToken) -> bool:
        return any(token is known for known in self.ring.tokens)

    def _select(self, token: LetterToken) -> bool:
        if any(token is chosen for chosen in self.selection):
            return False
        token.selected = True
        self.selection.append(token)
        self.dispatcher.emit(SelectionChanged(letters=self.current_word))
        return True

    def _clear(self) -> None:
        for token in self.selection:
            token.selected = False
        self.selection = []
        self.dispatcher.emit(SelectionCleared())
        self.dispatcher.emit(SelectionChanged(letters=""))

    def path_points(self, pointer: Optional[Point] = None) -> List[Point]:
        """Centres of the selected tokens, followed by the pointer while dragging."""

        points: List[Point] = [(token.x, token.y) for token in self.selection]
        if points and pointer is not None and self.is_dragging:
            points.append(pointer)
        return points

    def _emit_connector(self, pointer: Point) -> None:
        self.dispatcher.emit(ConnectorMoved(points=tuple(self.path_points(pointer))))
