# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""BigCommerce Legacy Connector - async client for the BigCommerce v2 REST API.

This library issues authenticated GET/POST/PUT/DELETE requests against a
store's legacy API, encodes request bodies as JSON or XML and normalizes
responses into parsed values or typed errors.

Key Features:
    - Basic-auth credentials validated and encoded once per store
    - JSON or single-root XML request bodies
    - Non-200 responses surfaced as ApiError with the body kept verbatim
    - asyncio-native; calls on one connector may run concurrently
    - Pluggable transports via TransportProtocol (httpx by default)

Quick Start:
    >>> from bigcommerce_legacy import Connector
    >>>
    >>> api = Connector.create(
    ...     "https://store-abc123.mybigcommerce.com", "admin", "token"
    ... )
    >>> async with api:
    ...     products = await api.get("/products")
    ...     await api.put("/products/1999", {"inventory_level": 100})

Main Exports:
    - Connector: The API client
    - ConnectorConfig, BodyFormat: Store configuration
    - HttpxTransport, BaseTransport, TransportProtocol: Transports
    - ConnectorError and subclasses: Error taxonomy

Version: 1.0.0
"""

__version__ = "1.0.0"

from .builder import build_request
from .config import API_VERSION, BodyFormat, ConnectorConfig
from .connector import Connector
from .exceptions import (
    ApiError,
    ConfigurationError,
    ConnectorError,
    ParseError,
    RequestError,
    SerializationError,
    TransportError,
)
from .normalizer import normalize_response
from .protocols import TransportProtocol
from .transports import BaseTransport, HttpxTransport
from .types import ApiResponse, HttpMethod, RequestDescriptor, ResponseEnvelope

__all__ = [
    "API_VERSION",
    "ApiError",
    "ApiResponse",
    "BaseTransport",
    "BodyFormat",
    "ConfigurationError",
    # Core
    "Connector",
    "ConnectorConfig",
    # Exceptions
    "ConnectorError",
    "HttpMethod",
    # Transports
    "HttpxTransport",
    "ParseError",
    "RequestError",
    "RequestDescriptor",
    "ResponseEnvelope",
    "SerializationError",
    "TransportError",
    "TransportProtocol",
    # Functions
    "build_request",
    "normalize_response",
]
