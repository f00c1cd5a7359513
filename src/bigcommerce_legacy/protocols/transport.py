# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for HTTP transport integration."""

from typing import Protocol, runtime_checkable

from ..types.request import RequestDescriptor
from ..types.response import ResponseEnvelope


@runtime_checkable
class TransportProtocol(Protocol):
    """
    Minimal protocol for dispatching a built request.

    The connector only needs one capability from the HTTP layer: send a
    RequestDescriptor and report the completed response. Status handling and
    body parsing stay in the connector, so a transport must return every
    response it receives, including non-200 ones.

    Implementations raise TransportError when no response is obtained.
    """

    async def send(self, request: RequestDescriptor) -> ResponseEnvelope:
        """Dispatch the request and return the completed response."""
        ...
