"""Custom exception hierarchy for the word ring puzzle."""


class WordRingError(Exception):
    """Base exception for puzzle failures."""


class MalformedLevelError(WordRingError):
    """Raised when letter bank or placement text violates the level grammar."""


class InvariantViolation(WordRingError):
    """Raised when two placed words disagree on the letter of a shared cell."""


class CatalogError(WordRingError):
    """Raised when a level catalog cannot be read or indexed."""


class RemoteCatalogError(CatalogError):
    """Raised when a catalog cannot be fetched over HTTP."""
