"""Circular layout of letter tokens and pointer hit testing."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.constants import DEFAULT_HIT_SLACK, DEFAULT_RING_RADIUS, DEFAULT_TOKEN_RADIUS
from ..core.models import LetterToken
from ..data.normalization import normalize_word
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

START_ANGLE = -math.pi / 2


@dataclass
class RingConfig:
    """Geometry of the letter ring, in renderer-local units."""

    ring_radius: float = DEFAULT_RING_RADIUS
    token_radius: float = DEFAULT_TOKEN_RADIUS
    hit_slack: float = DEFAULT_HIT_SLACK
    rng_seed: Optional[int] = None

    @property
    def hit_radius(self) -> float:
        return self.token_radius + self.hit_slack


class RingLayout:
    """Places one token per letter on a circle centred at the origin."""

    def __init__(self, letters: Sequence[str], config: Optional[RingConfig] = None) -> None:
        self.config = config or RingConfig()
        self.rng = random.Random(self.config.rng_seed)
        self.tokens: List[LetterToken] = [
            LetterToken(
                token_id=index,
                letter=letter,
                slot=index,
                x=0.0,
                y=0.0,
                radius=self.config.token_radius,
            )
            for index, letter in enumerate(letters)
        ]
        self._place(START_ANGLE)

    def _place(self, start_angle: float) -> None:
        if not self.tokens:
            return
        step = (math.pi * 2) / len(self.tokens)
        for token in self.tokens:
            angle = start_angle + step * token.slot
            token.x = math.cos(angle) * self.config.ring_radius
            token.y = math.sin(angle) * self.config.ring_radius

    def __len__(self) -> int:
        return len(self.tokens)

    def token(self, token_id: int) -> Optional[LetterToken]:
        if 0 <= token_id < len(self.tokens):
            return self.tokens[token_id]
        return None

    def token_at(self, x: float, y: float) -> Optional[LetterToken]:
        """Return the nearest token whose hit circle contains ``(x, y)``."""

        best: Optional[LetterToken] = None
        best_distance = self.config.hit_radius
        for token in self.tokens:
            distance = token.distance_to(x, y)
            if distance < best_distance:
                best = token
                best_distance = distance
        return best

    def shuffle(self) -> None:
        """Rotate the ring by a random angle; token identities are kept."""

        start = START_ANGLE + self.rng.random() * math.pi * 2
        LOGGER.debug("Shuffling ring of %d tokens from angle %.3f", len(self.tokens), start)
        self._place(start)

    def tokens_for_word(self, word: str) -> Optional[List[LetterToken]]:
        """Resolve ``word`` to distinct tokens, or ``None`` if it cannot be spelled."""

        used: List[LetterToken] = []
        for char in normalize_word(word):
            match = next(
                (t for t in self.tokens if t.letter == char and all(t is not u for u in used)),
                None,
            )
            if match is None:
                return None
            used.append(match)
        return used
