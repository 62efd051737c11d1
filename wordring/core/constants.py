"""Shared constants and enumerations for the word ring puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Orientation(str, Enum):
    """Word orientations supported by the grid."""

    HORIZONTAL = "H"
    VERTICAL = "V"


class RejectReason(str, Enum):
    """Why a submitted word did not reveal anything."""

    UNKNOWN = "unknown"
    ALREADY_FOUND = "alreadyFound"


class SelectionPhase(str, Enum):
    """States of the drag selection machine."""

    IDLE = "IDLE"
    DRAGGING = "DRAGGING"


LETTER_DELIMITER = ","
ROW_DELIMITER = "|"
FIELD_DELIMITER = ","

MIN_SUBMIT_LENGTH = 2

DEFAULT_RING_RADIUS = 100.0
DEFAULT_TOKEN_RADIUS = 35.0
DEFAULT_HIT_SLACK = 10.0


@dataclass(frozen=True)
class Bounds:
    """Grid extents in cells."""

    width: int
    height: int
