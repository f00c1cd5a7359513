# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Response normalization for the BigCommerce legacy API.

Only HTTP 200 counts as success. JSON bodies are parsed; XML bodies are
returned as raw text. Any other status raises ApiError with the body kept
verbatim.
"""

import json
import logging
from typing import Any

from .config import BodyFormat
from .exceptions import ApiError, ParseError
from .types.response import ResponseEnvelope

logger = logging.getLogger(__name__)

SUCCESS_STATUS = 200


def normalize_response(
    body_format: BodyFormat,
    envelope: ResponseEnvelope,
    method: str | None = None,
    url: str | None = None,
) -> Any:
    """
    Validate a completed response and return its parsed body.

    Args:
        body_format: Body format configured on the connector
        envelope: The completed response
        method: Request method, used for error context only
        url: Request URL, used for error context only

    Returns:
        The decoded JSON value, or the raw text for XML

    Raises:
        ApiError: If the status code is not 200
        ParseError: If a JSON body cannot be decoded
    """
    if envelope.status_code != SUCCESS_STATUS:
        logger.warning(
            f"BigCommerce API returned HTTP {envelope.status_code}"
            + (f" for {method} {url}" if method and url else "")
        )
        raise ApiError(
            status_code=envelope.status_code,
            body=envelope.raw_body,
            method=method,
            url=url,
        )

    if body_format is BodyFormat.JSON:
        return parse_json(envelope.raw_body)
    return envelope.raw_body


def parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as e:
        raise ParseError(
            f"Response body is not valid JSON: {e}",
            body_format=BodyFormat.JSON.value,
            body=text,
        ) from e


__all__ = ["SUCCESS_STATUS", "normalize_response", "parse_json"]
