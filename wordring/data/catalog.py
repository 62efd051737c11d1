"""Ordered level catalog and its JSON document form.

A catalog document is either a list of level objects or an object with a
``levels`` list. Each level carries ``letters`` and ``words`` in the level
text grammar and optionally ``id`` and ``name``::

    {"levels": [{"id": 1, "name": "Start", "letters": "C,A,T,R",
                 "words": "0,0,CAT,H|0,0,CAR,V|1,0,AT,V"}]}
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..core.exceptions import CatalogError
from ..core.models import LevelEntry
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


DEFAULT_LEVELS: Sequence[Dict[str, Any]] = (
    {"name": "Beginning", "letters": "C,A,T,R", "words": "0,0,CAT,H|0,0,CAR,V|1,0,AT,V"},
    {"name": "Stars", "letters": "S,T,A,R", "words": "0,0,STAR,H|2,0,ARTS,V"},
    {"name": "Sun", "letters": "S,U,N,T,E", "words": "0,0,SUN,H|1,0,USE,V|2,0,NUT,V"},
    {"name": "Play", "letters": "P,L,A,Y", "words": "0,0,PLAY,H|0,0,PAY,V|1,0,LAP,V"},
    {"name": "Time", "letters": "T,I,M,E", "words": "0,0,TIME,H|1,0,ITEM,V"},
    {"name": "Hero", "letters": "H,E,R,O", "words": "0,0,HERO,H|0,0,HER,V|3,0,ORE,V"},
    {"name": "Fire", "letters": "F,I,R,E", "words": "0,0,FIRE,H|0,0,FIR,V|1,0,IRE,V"},
    {"name": "Snow", "letters": "S,N,O,W", "words": "0,0,SNOW,H|0,0,SON,V|2,0,OWN,V"},
    {
        "name": "Water",
        "letters": "W,A,T,E,R",
        "words": "0,0,WATER,H|0,0,WAR,V|1,0,ATE,V|3,0,EAR,V",
    },
    {"name": "Final", "letters": "B,R,A,I,N", "words": "0,0,BRAIN,H|0,0,BRA,V|1,0,RAIN,V"},
)


class LevelCatalog:
    """Ordered level entries plus a 0-based cursor."""

    def __init__(self, entries: Iterable[LevelEntry], start_index: int = 0) -> None:
        self.entries: List[LevelEntry] = list(entries)
        if not self.entries:
            raise CatalogError("Level catalog is empty")
        self._check_index(start_index)
        self.current_index = start_index

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.entries):
            raise CatalogError(
                f"Level index {index} outside catalog of {len(self.entries)} levels"
            )

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def current(self) -> LevelEntry:
        return self.entries[self.current_index]

    @property
    def level_number(self) -> int:
        return self.current_index + 1

    def is_last(self) -> bool:
        return self.current_index == len(self.entries) - 1

    @property
    def progress(self) -> float:
        """Percentage of the catalog reached, counting the current level."""

        return (self.current_index + 1) / len(self.entries) * 100

    def entry_at(self, index: int) -> LevelEntry:
        self._check_index(index)
        return self.entries[index]

    def peek_next(self) -> Optional[LevelEntry]:
        if self.is_last():
            return None
        return self.entries[self.current_index + 1]

    def next_level(self) -> Optional[LevelEntry]:
        if self.is_last():
            return None
        self.current_index += 1
        return self.current

    def go_to(self, index: int) -> LevelEntry:
        self._check_index(index)
        self.current_index = index
        return self.current

    def restart(self) -> LevelEntry:
        self.current_index = 0
        return self.current

    def add_level(self, letters: str, words: str, name: Optional[str] = None) -> LevelEntry:
        number = len(self.entries) + 1
        entry = LevelEntry(id=number, name=name or f"Level {number}", letters=letters, words=words)
        self.entries.append(entry)
        LOGGER.debug("Added level %s (%s)", entry.id, entry.name)
        return entry


def entries_from_documents(documents: Any) -> List[LevelEntry]:
    """Convert decoded catalog JSON into level entries."""

    if isinstance(documents, dict):
        documents = documents.get("levels")
    if not isinstance(documents, list):
        raise CatalogError("Catalog document must be a list of levels or contain a 'levels' list")

    entries: List[LevelEntry] = []
    for position, doc in enumerate(documents, start=1):
        if not isinstance(doc, dict):
            raise CatalogError(f"Catalog level {position} is not an object")
        try:
            letters = doc["letters"]
            words = doc["words"]
        except KeyError as exc:
            raise CatalogError(f"Catalog level {position} is missing {exc.args[0]!r}") from exc
        if not isinstance(letters, str) or not isinstance(words, str):
            raise CatalogError(f"Catalog level {position} letters/words must be strings")
        try:
            level_id = int(doc.get("id", position))
        except (TypeError, ValueError) as exc:
            raise CatalogError(f"Catalog level {position} has a non-integer id") from exc
        entries.append(
            LevelEntry(
                id=level_id,
                name=str(doc.get("name") or f"Level {position}"),
                letters=letters,
                words=words,
            )
        )
    return entries


def default_catalog() -> LevelCatalog:
    return LevelCatalog(entries_from_documents(list(DEFAULT_LEVELS)))


def load_catalog(path: Path | str) -> LevelCatalog:
    path = Path(path)
    try:
        documents = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise CatalogError(f"Cannot read catalog {path}: {exc}") from exc
    entries = entries_from_documents(documents)
    LOGGER.info("Loaded %d levels from %s", len(entries), path)
    return LevelCatalog(entries)


def save_catalog(catalog: LevelCatalog, path: Path | str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    doc = {"levels": [asdict(entry) for entry in catalog.entries]}
    path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
    LOGGER.info("Saved %d levels to %s", len(catalog), path)
    return path


__all__ = [
    "DEFAULT_LEVELS",
    "LevelCatalog",
    "default_catalog",
    "entries_from_documents",
    "load_catalog",
    "save_catalog",
]
