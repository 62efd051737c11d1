"""Deterministic content checks for authored levels."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Sequence, Set

from ..core.constants import MIN_SUBMIT_LENGTH
from ..core.exceptions import InvariantViolation, MalformedLevelError
from ..core.models import LevelEntry, PlacedWord
from ..data.catalog import LevelCatalog
from ..data.parsing import parse_letter_bank, parse_placements
from ..utils.logger import get_logger
from .grid import build_grid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str] = field(default_factory=list)


class LevelValidator:
    """Runs grammar and authoring checks over a level entry."""

    def validate(self, entry: LevelEntry) -> ValidationResult:
        messages: List[str] = []
        try:
            letters = parse_letter_bank(entry.letters)
            words = parse_placements(entry.words)
            build_grid(words)
        except (MalformedLevelError, InvariantViolation) as exc:
            LOGGER.error("Level %s (%s) rejected: %s", entry.id, entry.name, exc)
            return ValidationResult(ok=False, messages=[str(exc)])

        messages.extend(self._check_duplicates(words))
        messages.extend(self._check_lengths(words))
        messages.extend(self._check_spellable(letters, words))
        for message in messages:
            LOGGER.warning("Level %s (%s): %s", entry.id, entry.name, message)
        return ValidationResult(ok=not messages, messages=messages)

    @staticmethod
    def _check_duplicates(words: Sequence[PlacedWord]) -> List[str]:
        seen: Set[str] = set()
        messages: List[str] = []
        for placed in words:
            if placed.word in seen:
                messages.append(f"Duplicate word '{placed.word}' at ({placed.x},{placed.y})")
            seen.add(placed.word)
        return messages

    @staticmethod
    def _check_lengths(words: Sequence[PlacedWord]) -> List[str]:
        return [
            f"Word '{placed.word}' is shorter than {MIN_SUBMIT_LENGTH} letters and can never be submitted"
            for placed in words
            if len(placed.word) < MIN_SUBMIT_LENGTH
        ]

    @staticmethod
    def _check_spellable(letters: Sequence[str], words: Sequence[PlacedWord]) -> List[str]:
        bank = Counter(letters)
        messages: List[str] = []
        for placed in words:
            missing = Counter(placed.word) - bank
            if missing:
                short = "".join(sorted(missing.elements()))
                messages.append(f"Word '{placed.word}' needs letters {short} not in the bank")
        return messages


def validate_catalog(catalog: LevelCatalog, validator: LevelValidator | None = None) -> List[ValidationResult]:
    validator = validator or LevelValidator()
    return [validator.validate(entry) for entry in catalog.entries]
