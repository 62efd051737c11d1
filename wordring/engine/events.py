"""Outbound events consumed by renderers and other presentation layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Tuple

from ..core.constants import Bounds, RejectReason
from ..core.models import PlacedWord, RevealStep
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class SelectionChanged:
    letters: str


@dataclass(frozen=True)
class ConnectorMoved:
    """Polyline through the selected tokens, ending at the pointer."""

    points: Tuple[Tuple[float, float], ...]


@dataclass(frozen=True)
class SelectionSubmitted:
    word: str


@dataclass(frozen=True)
class SelectionCleared:
    pass


@dataclass(frozen=True)
class WordAccepted:
    placed_word: PlacedWord
    reveal: Tuple[RevealStep, ...]
    found_count: int
    total_count: int


@dataclass(frozen=True)
class WordRejected:
    word: str
    reason: RejectReason


@dataclass(frozen=True)
class LevelCompleted:
    is_last_level: bool


@dataclass(frozen=True)
class LevelLoaded:
    index: int
    name: str
    letters: Tuple[str, ...]
    bounds: Bounds
    placed_words: Tuple[PlacedWord, ...]


@dataclass(frozen=True)
class CatalogExhausted:
    pass


Listener = Callable[[object], None]


@dataclass
class EventDispatcher:
    """Synchronous fan-out of events to subscribed callables."""

    listeners: List[Listener] = field(default_factory=list)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self.listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self.listeners:
                self.listeners.remove(listener)

        return unsubscribe

    def emit(self, event: object) -> None:
        LOGGER.debug("Emitting %s", event)
        for listener in list(self.listeners):
            listener(event)
