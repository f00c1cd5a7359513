# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Core data types for the BigCommerce legacy connector.

This module provides:
- HttpMethod: Supported HTTP verbs
- RequestDescriptor: A built request, ready for a transport
- ResponseEnvelope: A completed response as seen by a transport
- ApiResponse: A successful response with its parsed body
"""

from .request import HttpMethod, RequestDescriptor
from .response import ApiResponse, ResponseEnvelope

__all__ = [
    "ApiResponse",
    "HttpMethod",
    "RequestDescriptor",
    "ResponseEnvelope",
]
