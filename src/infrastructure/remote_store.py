"""HTTP adapter for the spreadsheet-backed remote document endpoint."""

from collections.abc import Callable
import json
import time
from typing import Any

import httpx

from src.application.ports.cloud_sync import (
    RemoteDocumentPort,
    RemoteStoreError,
)


PUSH_HEADERS = {"Content-Type": "text/plain;charset=utf-8"}

CACHE_BUST_PARAM = "t"


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class HttpRemoteDocumentStore(RemoteDocumentPort):
    """Remote store speaking the endpoint's POST/GET document protocol.

    Pushes are declared as plain text because the endpoint does not honour a
    JSON content type across origins, and they acknowledge through a redirect
    whose body is never read. Snapshot reads add a timestamp query parameter
    so intermediaries cannot serve a cached copy.
    """

    def __init__(
        self,
        endpoint_url: str,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], int] = _epoch_millis,
    ) -> None:
        """Initialize the adapter.

        Args:
            endpoint_url: Remote endpoint receiving pushes and serving pulls.
            timeout: Per-request HTTP timeout in seconds.
            transport: Optional httpx transport, used by tests.
            clock: Source of the cache-busting timestamp in milliseconds.
        """
        self._endpoint_url = endpoint_url
        self._timeout = timeout
        self._transport = transport
        self._clock = clock

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    async def send_collection(
        self,
        kind: str,
        records: list[dict[str, Any]],
    ) -> None:
        """POST the full collection for ``kind``.

        Raises:
            RemoteStoreError: If the endpoint answers with an error status.
            httpx.HTTPError: If the request could not be sent.
        """
        body = json.dumps({"type": kind, "data": records}, ensure_ascii=False)
        async with self._client(follow_redirects=False) as client:
            response = await client.post(
                self._endpoint_url,
                content=body.encode("utf-8"),
                headers=PUSH_HEADERS,
            )
        if response.status_code >= 400:
            raise RemoteStoreError(
                f"Push of {kind} rejected with HTTP {response.status_code}"
            )

    async def fetch_snapshot(self) -> Any:
        """GET the snapshot of every stored collection.

        Returns:
            Any: Decoded JSON body.

        Raises:
            RemoteStoreError: If the status is not successful or the body is
            not JSON.
            httpx.HTTPError: If the request could not be completed.
        """
        params = {CACHE_BUST_PARAM: str(self._clock())}
        async with self._client(follow_redirects=True) as client:
            response = await client.get(self._endpoint_url, params=params)
        if not response.is_success:
            raise RemoteStoreError(f"HTTP Status {response.status_code}")
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteStoreError("Snapshot body is not valid JSON") from exc

    def _client(self, follow_redirects: bool) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout,
            follow_redirects=follow_redirects,
            transport=self._transport,
        )


__all__ = ["HttpRemoteDocumentStore", "PUSH_HEADERS", "CACHE_BUST_PARAM"]
