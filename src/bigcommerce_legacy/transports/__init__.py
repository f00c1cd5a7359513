# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Transport implementations for dispatching connector requests.

Available transports:
- BaseTransport: Abstract base class with lifecycle handling
- HttpxTransport: Transport backed by httpx.AsyncClient
"""

from bigcommerce_legacy.transports.base import BaseTransport
from bigcommerce_legacy.transports.http import HttpxTransport

__all__ = [
    "BaseTransport",
    "HttpxTransport",
]
