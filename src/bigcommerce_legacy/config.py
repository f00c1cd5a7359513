# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Connector Configuration for the BigCommerce Legacy API

This module provides the immutable per-store configuration used by the
connector: the API host, the basic-auth credentials and the body format
used for request and response payloads.
"""

import base64
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx

from .exceptions import ConfigurationError

API_VERSION = "/api/v2"
"""Fixed path segment of the legacy API, inserted between host and endpoint."""


class BodyFormat(Enum):
    """Serialization used for request and response bodies.

    - JSON: Payloads are sent as JSON text and responses are parsed into
      Python objects.
    - XML: Payloads are sent as a single-root XML document and responses are
      returned as raw text.
    """

    JSON = "json"
    XML = "xml"

    @property
    def media_type(self) -> str:
        """Value used for the Accept and Content-Type headers."""
        return f"application/{self.value}"

    @classmethod
    def parse(cls, value: "BodyFormat | str") -> "BodyFormat":
        """Resolve a BodyFormat from an enum member or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ConfigurationError(
            f"Valid options for body_format are 'json' or 'xml', got {value!r}",
            field="body_format",
        )


def encode_credential(username: str, token: str) -> str:
    """Return base64("username:token") as used by HTTP Basic authentication."""
    raw = f"{username}:{token}".encode()
    return base64.b64encode(raw).decode("ascii")


def _validate_base_path(base_path: str) -> None:
    try:
        url = httpx.URL(base_path)
    except httpx.InvalidURL as e:
        raise ConfigurationError(
            f"BigCommerce API base_path is not a valid URL: {e}", field="base_path"
        ) from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(
            f"BigCommerce API base_path must be an http(s) URL with a host, got {base_path!r}",
            field="base_path",
        )


@dataclass(frozen=True)
class ConnectorConfig:
    """
    Configuration for a single BigCommerce store.

    Instances are immutable and validated on construction, so a connector
    can never be built from incomplete settings. The basic-auth credential
    is encoded once here and reused for every request.
    """

    base_path: str
    """Scheme and host of the store, without a trailing slash."""

    username: str
    """Legacy API username."""

    token: str = field(repr=False)
    """Legacy API token (password)."""

    body_format: BodyFormat = BodyFormat.JSON
    """Body format for payloads; strings 'json'/'xml' are accepted."""

    encoded_credential: str = field(init=False, repr=False, compare=False)
    """base64 of 'username:token', computed in __post_init__."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("base_path", "username", "token"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(f"BigCommerce API {name} not provided", field=name)
        _validate_base_path(self.base_path)
        if self.body_format is None:
            raise ConfigurationError(
                "Valid options for body_format are 'json' or 'xml', got None",
                field="body_format",
            )

        # Frozen dataclass: bypass __setattr__ for derived fields
        object.__setattr__(self, "body_format", BodyFormat.parse(self.body_format))
        object.__setattr__(
            self, "encoded_credential", encode_credential(self.username, self.token)
        )

    @property
    def api_root(self) -> str:
        """Base URL that endpoints are appended to."""
        return self.base_path + API_VERSION

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "ConnectorConfig":
        """
        Build a config from a legacy settings mapping.

        The mapping uses the keys ``path``, ``user``, ``pass`` and the optional
        ``dataType`` (defaults to 'json').

        Raises:
            ConfigurationError: If settings is not a mapping or any value is invalid.
        """
        if not isinstance(settings, Mapping):
            raise ConfigurationError(
                "Connector must be initialized with a settings mapping"
            )
        data_type = settings.get("dataType")
        return cls(
            base_path=settings.get("path"),
            username=settings.get("user"),
            token=settings.get("pass"),
            body_format=BodyFormat.JSON if data_type is None else data_type,
        )


__all__ = [
    "API_VERSION",
    "BodyFormat",
    "ConnectorConfig",
    "encode_credential",
]
