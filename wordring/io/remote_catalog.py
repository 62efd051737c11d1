"""Lightweight HTTP client for fetching level catalogs."""

from __future__ import annotations

import os
from typing import List, Optional

import requests

from ..core.exceptions import CatalogError, RemoteCatalogError
from ..core.models import LevelEntry
from ..data.catalog import LevelCatalog, entries_from_documents
from ..engine.validator import LevelValidator
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class RemoteCatalogClient:
    """Downloads a JSON catalog document and turns it into a :class:`LevelCatalog`."""

    def __init__(
        self,
        url: Optional[str] = None,
        url_env: str = "WORDRING_CATALOG_URL",
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url or os.environ.get(url_env)
        self.url_env = url_env
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()
        if not self.url:
            raise RemoteCatalogError(
                f"No catalog URL given and environment variable {self.url_env} is unset"
            )

    def fetch_entries(self) -> List[LevelEntry]:
        try:
            response = self.session.get(self.url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise RemoteCatalogError(f"Catalog request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteCatalogError(f"Catalog response is not JSON: {exc}") from exc
        return entries_from_documents(payload)

    def fetch(self, skip_invalid: bool = False) -> LevelCatalog:
        """Fetch the catalog; with ``skip_invalid`` broken levels are dropped."""

        entries = self.fetch_entries()
        if skip_invalid:
            validator = LevelValidator()
            kept = []
            for entry in entries:
                if validator.validate(entry).ok:
                    kept.append(entry)
                else:
                    LOGGER.warning("Skipping invalid remote level %s (%s)", entry.id, entry.name)
            entries = kept
        if not entries:
            raise CatalogError(f"Catalog at {self.url} has no playable levels")
        LOGGER.info("Fetched %d levels from %s", len(entries), self.url)
        return LevelCatalog(entries)
