# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Base Transport for the BigCommerce Legacy Connector

This module provides the BaseTransport abstract class that concrete HTTP
transports derive from. It adds lifecycle handling (aclose and async
context manager support) on top of TransportProtocol.
"""

import abc
from types import TracebackType

from ..types.request import RequestDescriptor
from ..types.response import ResponseEnvelope


class BaseTransport(abc.ABC):
    """
    Abstract base class for connector transports.

    Subclasses implement send() and, when they hold network resources,
    aclose(). A transport must report every completed response, whatever
    its status code, and raise TransportError only when no response was
    obtained.
    """

    @abc.abstractmethod
    async def send(self, request: RequestDescriptor) -> ResponseEnvelope:
        """
        Dispatch a request.

        Args:
            request: The fully built request

        Returns:
            The completed response

        Raises:
            TransportError: If the request could not be completed
        """
        pass

    async def aclose(self) -> None:
        """Release any resources held by the transport."""
        return None

    async def __aenter__(self) -> "BaseTransport":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()
