# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
httpx-based transport.

Dispatches RequestDescriptors through an ``httpx.AsyncClient``. Connection
reuse, TLS and pooling follow the client's own defaults.
"""

import logging

import httpx

from ..exceptions import TransportError
from ..types.request import RequestDescriptor
from ..types.response import ResponseEnvelope
from .base import BaseTransport

logger = logging.getLogger(__name__)


class HttpxTransport(BaseTransport):
    """
    Transport backed by httpx.AsyncClient.

    A client passed in by the caller is used as-is and is never closed by
    this transport. When no client is given, one is created and owned by the
    transport, and aclose() closes it.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            client: Pre-configured client to use. Mutually exclusive with timeout.
            timeout: Timeout in seconds for an owned client. None keeps the
                httpx default.

        Raises:
            ValueError: If both client and timeout are given
        """
        if client is not None and timeout is not None:
            raise ValueError("timeout cannot be combined with an injected client")

        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient() if timeout is None else httpx.AsyncClient(timeout=timeout)
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def owns_client(self) -> bool:
        return self._owns_client

    async def send(self, request: RequestDescriptor) -> ResponseEnvelope:
        method = request.method.value
        content = request.body.encode("utf-8") if request.body is not None else None

        try:
            response = await self._client.request(
                method,
                request.url,
                headers=request.headers,
                content=content,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"Transport failure for {method} {request.url}: {e!r}")
            raise TransportError(
                f"{method} {request.url} failed: {e}",
                cause=e,
                method=method,
                url=request.url,
            ) from e

        logger.debug(f"Received HTTP {response.status_code} for {method} {request.url}")
        return ResponseEnvelope(
            status_code=response.status_code,
            headers=dict(response.headers),
            raw_body=response.text,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
