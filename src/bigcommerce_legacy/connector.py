# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Connector for the BigCommerce legacy API.
"""

import logging
from types import TracebackType
from typing import Any

from .builder import build_request
from .config import BodyFormat, ConnectorConfig
from .normalizer import normalize_response
from .protocols.transport import TransportProtocol
from .transports.base import BaseTransport
from .transports.http import HttpxTransport
from .types.request import HttpMethod
from .types.response import ApiResponse

logger = logging.getLogger(__name__)


class Connector:
    """
    Async client for one store's legacy API.

    The connector holds only its immutable configuration and a transport.
    Every call builds a fresh request, awaits one HTTP round trip and
    normalizes the response, so any number of calls may run concurrently on
    the same instance. Nothing is retried.

    Example:
        >>> config = ConnectorConfig("https://store.example.com", "admin", "abc123")
        >>> async with Connector(config) as api:
        ...     for product in await api.get("/products"):
        ...         print(product["name"])
    """

    def __init__(
        self,
        config: ConnectorConfig,
        transport: TransportProtocol | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            config: Validated store configuration
            transport: Transport used to dispatch requests. When omitted an
                HttpxTransport is created and owned by the connector.
            timeout: Request timeout in seconds for the owned transport.
                Only valid when no transport is given.

        Raises:
            ValueError: If both transport and timeout are given
        """
        if transport is not None and timeout is not None:
            raise ValueError("timeout cannot be combined with an injected transport")

        self._config = config
        self._owns_transport = transport is None
        self._transport: TransportProtocol = (
            HttpxTransport(timeout=timeout) if transport is None else transport
        )

    @classmethod
    def create(
        cls,
        base_path: str,
        username: str,
        token: str,
        body_format: BodyFormat | str = BodyFormat.JSON,
        transport: TransportProtocol | None = None,
        timeout: float | None = None,
    ) -> "Connector":
        """
        Build a connector from raw settings.

        Settings are validated before any transport is created.

        Raises:
            ConfigurationError: If any setting is missing or invalid
        """
        config = ConnectorConfig(
            base_path=base_path,
            username=username,
            token=token,
            body_format=body_format,  # type: ignore[arg-type]
        )
        return cls(config, transport=transport, timeout=timeout)

    @property
    def config(self) -> ConnectorConfig:
        return self._config

    @property
    def transport(self) -> TransportProtocol:
        return self._transport

    async def request(
        self,
        method: HttpMethod | str,
        endpoint: str,
        payload: Any = None,
    ) -> ApiResponse:
        """
        Perform one API call and return the response with its parsed body.

        Args:
            method: HTTP verb
            endpoint: Resource path with a leading '/', e.g. '/products/1999'
            payload: Body for POST/PUT, or None

        Returns:
            ApiResponse holding the raw envelope and the parsed body

        Raises:
            SerializationError: If the payload cannot be encoded (nothing is sent)
            RequestError: If method is not a supported HTTP verb (nothing is sent)
            TransportError: If no response was obtained
            ApiError: If the store returned a status other than 200
            ParseError: If a JSON body could not be decoded
        """
        descriptor = build_request(self._config, method, endpoint, payload)
        method_name = descriptor.method.value

        logger.debug(f"{method_name} {descriptor.url}")
        envelope = await self._transport.send(descriptor)
        body = normalize_response(
            self._config.body_format,
            envelope,
            method=method_name,
            url=descriptor.url,
        )
        return ApiResponse(envelope=envelope, body=body)

    async def get(self, endpoint: str) -> Any:
        """Perform a GET request, e.g. ``await api.get('/products')``."""
        response = await self.request(HttpMethod.GET, endpoint)
        return response.body

    async def post(self, endpoint: str, payload: Any = None) -> Any:
        """Perform a POST request with an optional payload."""
        response = await self.request(HttpMethod.POST, endpoint, payload)
        return response.body

    async def put(self, endpoint: str, payload: Any = None) -> Any:
        """Perform a PUT request with an optional payload."""
        response = await self.request(HttpMethod.PUT, endpoint, payload)
        return response.body

    async def delete(self, endpoint: str) -> Any:
        """Perform a DELETE request."""
        response = await self.request(HttpMethod.DELETE, endpoint)
        return response.body

    async def aclose(self) -> None:
        """Close the transport if this connector created it."""
        if self._owns_transport and isinstance(self._transport, BaseTransport):
            await self._transport.aclose()

    async def __aenter__(self) -> "Connector":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_path={self._config.base_path!r}, "
            f"body_format={self._config.body_format.value!r})"
        )


__all__ = ["Connector"]
