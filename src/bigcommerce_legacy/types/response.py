# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Response types produced by transports and returned by the connector."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ResponseEnvelope:
    """Completed HTTP response as reported by a transport."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    raw_body: str = ""


@dataclass
class ApiResponse:
    """
    Successful API response together with its parsed body.

    Attributes:
        envelope: The raw response (status, headers, text)
        body: Parsed JSON value, or the raw text for XML connectors
    """

    envelope: ResponseEnvelope
    body: Any

    @property
    def status_code(self) -> int:
        return self.envelope.status_code

    @property
    def headers(self) -> dict[str, str]:
        return self.envelope.headers


__all__ = ["ApiResponse", "ResponseEnvelope"]
