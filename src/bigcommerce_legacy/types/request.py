# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request types for the BigCommerce legacy connector.

A RequestDescriptor is built fresh for every call and handed to a transport;
nothing in it is shared between requests.
"""

from dataclasses import dataclass, field
from enum import Enum


class HttpMethod(Enum):
    """HTTP verbs supported by the legacy API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Fully specified HTTP request, ready for dispatch.

    Attributes:
        method: HTTP verb
        url: Absolute URL (base path + API version + endpoint)
        headers: Authorization, Accept and Content-Type headers
        body: Serialized payload, or None when the request has no body
    """

    method: HttpMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None


__all__ = ["HttpMethod", "RequestDescriptor"]
