"""URL shortening client."""

from __future__ import annotations

import httpx

from hookcast.config import settings
from hookcast.errors import ShortenerError

HTTP_TIMEOUT_SECONDS = 5


class HttpShortener:
    """
    Shorten URLs through a git.io-style HTTP service.

    The service receives the long URL as the ``url`` form field and answers
    either ``201 Created`` with the short URL in ``Location``, or any 2xx with
    the short URL as the response body.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        client: httpx.Client | None = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self._client = client

    def shorten(self, url: str) -> str:
        try:
            if self._client is not None:
                resp = self._client.post(self.endpoint, data={"url": url})
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    resp = client.post(self.endpoint, data={"url": url})
        except httpx.HTTPError as exc:
            raise ShortenerError(f"Shortener unreachable: {exc}") from exc

        if resp.status_code == 201 and resp.headers.get("location"):
            return resp.headers["location"]
        body = resp.text.strip()
        if 200 <= resp.status_code < 300 and body:
            return body
        raise ShortenerError(f"Shortener error: {resp.status_code} {resp.text}")


def default_shortener() -> HttpShortener | None:
    """Return the configured shortener, or None when shortening is disabled."""
    if not settings.shortener_url:
        return None
    return HttpShortener(settings.shortener_url, timeout=settings.shortener_timeout)
