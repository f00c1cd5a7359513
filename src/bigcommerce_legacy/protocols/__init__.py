# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for pluggable connector components.

Available protocols:
- TransportProtocol: Interface for HTTP transports that dispatch built requests
"""

from .transport import TransportProtocol

__all__ = ["TransportProtocol"]
