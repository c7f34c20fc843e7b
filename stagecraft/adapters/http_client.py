"""Shared HTTP transport for fetching remote view definitions.

This module provides a thin wrapper around ``requests.Session`` so the
definition source can apply one timeout and retry policy to every fetch.

Dependencies:
    - ``requests`` for network I/O.

Call context:
    - Constructed by ``stagecraft.adapters.definition_source.DefinitionSource``
      when a locator is an ``http://`` or ``https://`` URL.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

import requests
from requests import exceptions as req_exc


class TransportTimeoutError(RuntimeError):
    """Transport level timeout or connectivity failure."""

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message)
        self.context = context


@dataclass
class HttpConfig:
    """Timeout and retry configuration for definition fetches.

    Attributes:
        request_timeout_s: Timeout in seconds for a single GET.
        retries: Number of retry attempts after the initial request.
    """
    request_timeout_s: int = 10
    retries: int = 2


class RetryingSession:
    """Shared requests wrapper with a retry loop on transport failures.

    Callers decide how to map non-2xx responses into domain errors.
    """

    def __init__(self, cfg: Optional[HttpConfig] = None) -> None:
        """Create a retry-enabled session.

        Args:
            cfg: Shared timeout and retry settings.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self.session = requests.Session()
        self.cfg = cfg or HttpConfig()

    @staticmethod
    def _headers(accept: str) -> Dict[str, str]:
        return {"Accept": accept}

    def get(
        self,
        url: str,
        *,
        accept: str = "application/xml, text/xml, */*",
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send a GET request with retries on timeout/connectivity failures.

        Args:
            url: Absolute URL of the definition.
            accept: ``Accept`` header value.
            timeout: Optional timeout override in seconds.

        Returns:
            ``requests.Response`` from the first attempt that reached the server.

        Raises:
            TransportTimeoutError: If all attempts fail with timeout/connection errors.
        """
        context = f"GET {url}"
        last_err: TransportTimeoutError | None = None
        attempts = max(0, int(self.cfg.retries)) + 1
        for _ in range(attempts):
            try:
                return self.session.get(
                    url,
                    headers=self._headers(accept),
                    timeout=timeout or self.cfg.request_timeout_s,
                )
            except (req_exc.Timeout, req_exc.ConnectionError):
                last_err = TransportTimeoutError(f"Timeout contacting {url}", context=context)
        raise last_err


__all__ = ["HttpConfig", "RetryingSession", "TransportTimeoutError"]
