# HTTP access to the n8n REST API
import json
import logging
import urllib.error
import urllib.request
from typing import Any

from n8nmcp.config import Settings
from n8nmcp.models import FetchResponse

logger = logging.getLogger(__name__)


class N8nClient:
    """Thin request helper bound to one n8n instance.

    ABOUTME: Adds auth and JSON content-type headers to every request
    ABOUTME: HTTP error statuses are returned, transport errors raise
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._headers = {
            **settings.headers,
            "Content-Type": "application/json",
        }

    @property
    def api_base(self) -> str:
        return self._settings.api_base

    def fetch(
        self,
        path: str,
        method: str = "GET",
        body: dict[str, Any] | None = None,
    ) -> FetchResponse:
        """Send a request to an API path such as "/workflows?limit=1".

        Args:
            path: Path relative to the API root, starting with "/"
            method: HTTP method
            body: Optional JSON body

        Returns:
            FetchResponse for any HTTP status

        Raises:
            urllib.error.URLError: If the server cannot be reached
            TimeoutError: If the request exceeds the configured timeout
        """
        url = f"{self.api_base}{path}"
        data = json.dumps(body).encode("utf-8") if body is not None else None
        request = urllib.request.Request(url, data=data, headers=self._headers, method=method)

        logger.debug(f"{method} {url}")
        try:
            with urllib.request.urlopen(request, timeout=self._settings.timeout_ms / 1000) as response:
                return FetchResponse(
                    status=response.status,
                    reason=response.reason or "",
                    body=response.read(),
                )
        except urllib.error.HTTPError as e:
            return FetchResponse(status=e.code, reason=str(e.reason or ""), body=e.read() if e.fp else b"")

    def __call__(self, path: str) -> FetchResponse:
        return self.fetch(path)
