"""Resolve view-definition locators to raw bytes.

Locators are opaque strings to the core. This adapter understands three
shapes:

* ``http://`` / ``https://`` URLs, fetched through ``RetryingSession``;
* absolute filesystem paths;
* relative paths, resolved against ``root_dir`` (the bundled
  ``stagecraft/resources`` directory by default).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from stagecraft.adapters.http_client import HttpConfig, RetryingSession, TransportTimeoutError
from stagecraft.domain.errors import ResourceNotFound
from stagecraft.domain.ports import DefinitionSourcePort
from stagecraft.domain.views import ResourceLocator

DEFAULT_VIEWS_ROOT = Path(__file__).resolve().parent.parent / "resources"

logger = logging.getLogger(__name__)


def is_remote_locator(locator: ResourceLocator) -> bool:
    lowered = (locator or "").strip().lower()
    return lowered.startswith("http://") or lowered.startswith("https://")


class DefinitionSource(DefinitionSourcePort):
    """Read view definitions from disk or over HTTP."""

    def __init__(
        self,
        root_dir: Union[str, Path, None] = None,
        *,
        http_config: Optional[HttpConfig] = None,
        session: Optional[RetryingSession] = None,
    ) -> None:
        self.root = Path(root_dir) if root_dir else DEFAULT_VIEWS_ROOT
        self._http_config = http_config or HttpConfig()
        self._session = session

    @property
    def session(self) -> RetryingSession:
        # Created on first remote fetch only.
        if self._session is None:
            self._session = RetryingSession(self._http_config)
        return self._session

    def read(self, locator: ResourceLocator) -> bytes:
        if not locator or not str(locator).strip():
            raise ResourceNotFound("Empty view locator.", locator=locator)
        if is_remote_locator(locator):
            return self._read_remote(locator)
        return self._read_file(locator)

    def resolve_path(self, locator: ResourceLocator) -> Path:
        path = Path(locator)
        return path if path.is_absolute() else self.root / path

    def _read_file(self, locator: ResourceLocator) -> bytes:
        path = self.resolve_path(locator)
        if not path.is_file():
            raise ResourceNotFound(f"View definition not found: {path}", locator=locator)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise ResourceNotFound(f"Cannot read view definition {path}: {exc}", locator=locator) from exc

    def _read_remote(self, locator: ResourceLocator) -> bytes:
        try:
            resp = self.session.get(locator)
        except TransportTimeoutError as exc:
            raise ResourceNotFound(str(exc), locator=locator) from exc
        status = int(getattr(resp, "status_code", 0) or 0)
        if status == 404:
            raise ResourceNotFound(f"View definition not found (HTTP 404): {locator}", locator=locator)
        if status < 200 or status >= 300:
            logger.debug("Definition fetch %s answered HTTP %s", locator, status)
            raise ResourceNotFound(
                f"View definition unavailable (HTTP {status}): {locator}", locator=locator
            )
        return resp.content


__all__ = ["DEFAULT_VIEWS_ROOT", "DefinitionSource", "is_remote_locator"]
