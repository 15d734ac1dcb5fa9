"""Async download of remote template files.

Wraps ``httpx.AsyncClient`` so the executor only sees ``fetch(url) -> bytes``
and a single ``NetworkFetchError`` type on failure.

Typical usage::

    fetcher = HttpFetcher(timeout=30)
    content = await fetcher.fetch("https://cdn.tailwindcss.com")
"""

from __future__ import annotations

from typing import Protocol

import httpx

from webstarter.errors import NetworkFetchError


class Fetcher(Protocol):
    """Network collaborator used by the choice executor."""

    async def fetch(self, url: str) -> bytes: ...


class HttpFetcher:
    """Downloads URLs over HTTP(S), following redirects."""

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = timeout

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with our timeout."""
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout, connect=10.0),
            follow_redirects=True,
        )

    async def fetch(self, url: str) -> bytes:
        """Return the body of *url*.

        Raises:
            NetworkFetchError: On connection failures, timeouts, invalid URLs
                and non-2xx responses.
        """
        try:
            async with self._client() as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.content
        except httpx.ConnectError as exc:
            raise NetworkFetchError(url, f"cannot connect ({exc})") from exc
        except httpx.TimeoutException as exc:
            raise NetworkFetchError(url, f"timed out after {self.timeout}s") from exc
        except httpx.HTTPStatusError as exc:
            raise NetworkFetchError(
                url, f"HTTP {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkFetchError(url, str(exc)) from exc
