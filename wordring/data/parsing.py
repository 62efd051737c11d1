"""Level text grammar.

Letter banks are comma-separated single letters (``"C,A,T,R"``); word
placements are ``|``-separated ``x,y,WORD,DIR`` rows with ``DIR`` one of
``H`` or ``V`` (``"0,0,CAT,H|0,0,CAR,V|1,0,AT,V"``).
"""

from __future__ import annotations

from typing import Iterable, List

from ..core.constants import FIELD_DELIMITER, LETTER_DELIMITER, ROW_DELIMITER, Orientation
from ..core.exceptions import MalformedLevelError
from ..core.models import PlacedWord
from .normalization import normalize_letter, normalize_word

PLACEMENT_FIELDS = 4


def parse_letter_bank(raw: str) -> List[str]:
    if raw is None or not raw.strip():
        raise MalformedLevelError("Letter bank is empty")
    letters: List[str] = []
    for index, token in enumerate(raw.split(LETTER_DELIMITER)):
        letter = normalize_letter(token)
        if len(letter) != 1:
            raise MalformedLevelError(
                f"Letter bank token {index} must be a single letter, got {token!r}"
            )
        letters.append(letter)
    return letters


def _parse_coordinate(value: str, axis: str, row: str) -> int:
    text = value.strip()
    if not (text.isascii() and text.isdigit()):
        raise MalformedLevelError(
            f"Coordinate {axis}={value!r} is not a non-negative integer in {row!r}"
        )
    return int(text)


def _parse_orientation(code: str, row: str) -> Orientation:
    try:
        return Orientation(code.strip().upper())
    except ValueError as exc:
        raise MalformedLevelError(f"Unknown orientation {code!r} in {row!r}") from exc


def parse_placements(raw: str) -> List[PlacedWord]:
    if raw is None or not raw.strip():
        raise MalformedLevelError("Word placement text is empty")
    words: List[PlacedWord] = []
    for row in raw.split(ROW_DELIMITER):
        fields = row.split(FIELD_DELIMITER)
        if len(fields) != PLACEMENT_FIELDS:
            raise MalformedLevelError(
                f"Placement {row!r} has {len(fields)} fields, expected {PLACEMENT_FIELDS}"
            )
        x_text, y_text, word_text, code = fields
        word = normalize_word(word_text)
        if not word:
            raise MalformedLevelError(f"Placement {row!r} has an empty word")
        words.append(
            PlacedWord(
                word=word,
                x=_parse_coordinate(x_text, "x", row),
                y=_parse_coordinate(y_text, "y", row),
                orientation=_parse_orientation(code, row),
            )
        )
    return words


def format_letter_bank(letters: Iterable[str]) -> str:
    return LETTER_DELIMITER.join(letters)


def format_placements(words: Iterable[PlacedWord]) -> str:
    """Serialize placements back into the authoring grammar."""

    return ROW_DELIMITER.join(
        FIELD_DELIMITER.join((str(w.x), str(w.y), w.word, w.orientation.value))
        for w in words
    )


__all__ = [
    "parse_letter_bank",
    "parse_placements",
    "format_letter_bank",
    "format_placements",
]
