"""Shared helpers for word and letter normalization."""

from __future__ import annotations

import re

WHITESPACE_RE = re.compile(r"\s+")


def normalize_word(text: str) -> str:
    """Return the canonical uppercase form of ``text`` used for matching."""

    if not text:
        return ""
    return WHITESPACE_RE.sub("", text).upper()


def normalize_letter(token: str) -> str:
    """Trim and uppercase a single letter-bank token."""

    return token.strip().upper()


__all__ = ["normalize_word", "normalize_letter"]
