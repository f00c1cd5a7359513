# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request building for the BigCommerce legacy API.

Turns a ConnectorConfig, an HTTP method, an endpoint and an optional payload
into a RequestDescriptor. Everything here is a pure function of its inputs.

XML payloads follow the single-root convention used by the legacy API: a
mapping with exactly one key becomes the document root, e.g.
``{"product": {"inventory_level": 900}}`` renders as
``<product><inventory_level>900</inventory_level></product>``. Any other
mapping is wrapped in a ``<root>`` element.
"""

import json
import math
import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from .config import BodyFormat, ConnectorConfig
from .exceptions import RequestError, SerializationError
from .types.request import HttpMethod, RequestDescriptor

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
DEFAULT_XML_ROOT = "root"

_XML_NAME = re.compile(r"[^\W\d][\w.\-]*")
_XML_INVALID_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def build_headers(config: ConnectorConfig) -> dict[str, str]:
    """Headers sent with every request."""
    media_type = config.body_format.media_type
    return {
        "Authorization": f"Basic {config.encoded_credential}",
        "Accept": media_type,
        "Content-Type": media_type,
    }


def build_url(config: ConnectorConfig, endpoint: str) -> str:
    """Absolute URL for an endpoint; the endpoint must start with '/'."""
    return config.api_root + endpoint


def parse_method(method: HttpMethod | str) -> HttpMethod:
    """Resolve an HttpMethod from a member or a case-insensitive verb name."""
    if isinstance(method, HttpMethod):
        return method
    if isinstance(method, str):
        try:
            return HttpMethod(method.upper())
        except ValueError:
            pass
    raise RequestError(f"Unsupported HTTP method: {method!r}", method=method)


def build_request(
    config: ConnectorConfig,
    method: HttpMethod | str,
    endpoint: str,
    payload: Any = None,
) -> RequestDescriptor:
    """
    Build the request for one API call.

    Args:
        config: Store configuration
        method: HTTP verb, as an HttpMethod or its name
        endpoint: Resource path with a leading '/', e.g. '/products'
        payload: Mapping to send as the body, or None for no body

    Returns:
        A RequestDescriptor ready for dispatch

    Raises:
        SerializationError: If the payload cannot be encoded in the body format
        RequestError: If method is not a supported HTTP verb
    """
    method = parse_method(method)

    body = None if payload is None else serialize_payload(payload, config.body_format)
    return RequestDescriptor(
        method=method,
        url=build_url(config, endpoint),
        headers=build_headers(config),
        body=body,
    )


def serialize_payload(payload: Any, body_format: BodyFormat) -> str:
    """Encode a payload as JSON or XML text."""
    text = to_json(payload) if body_format is BodyFormat.JSON else to_xml(payload)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise SerializationError(
            f"Payload cannot be encoded as UTF-8: {e}", body_format=body_format.value
        ) from e
    return text


def to_json(payload: Any) -> str:
    try:
        return json.dumps(payload, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"Payload is not JSON serializable: {e}", body_format="json"
        ) from e


def to_xml(payload: Any) -> str:
    """
    Encode a mapping as a single-root XML document.

    Mapping keys become element names, nested mappings become child elements,
    list values repeat their element once per item and scalars become text.
    None renders as an empty element and booleans as 'true'/'false'.
    """
    if not isinstance(payload, Mapping):
        raise SerializationError(
            f"XML payload must be a mapping, got {type(payload).__name__}",
            body_format="xml",
        )

    if len(payload) == 1:
        root_name, content = next(iter(payload.items()))
        if isinstance(content, list):
            root_name, content = DEFAULT_XML_ROOT, payload
    else:
        root_name, content = DEFAULT_XML_ROOT, payload

    root = ET.Element(_element_name(root_name))
    _fill_element(root, content)
    return XML_DECLARATION + "\n" + ET.tostring(root, encoding="unicode")


def _element_name(key: Any) -> str:
    if not isinstance(key, str) or not _XML_NAME.fullmatch(key):
        raise SerializationError(
            f"{key!r} is not a valid XML element name", body_format="xml"
        )
    return key


def _fill_element(element: ET.Element, value: Any) -> None:
    if isinstance(value, Mapping):
        for key, child_value in value.items():
            name = _element_name(key)
            items = child_value if isinstance(child_value, list) else [child_value]
            for item in items:
                if isinstance(item, list):
                    raise SerializationError(
                        f"Nested list under {name!r} cannot be represented in XML",
                        body_format="xml",
                    )
                _fill_element(ET.SubElement(element, name), item)
    else:
        element.text = _text(value)


def _text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (float, Decimal)):
        finite = value.is_finite() if isinstance(value, Decimal) else math.isfinite(value)
        if not finite:
            raise SerializationError(
                f"Non-finite number {value!r} cannot be encoded", body_format="xml"
            )
        return str(value)
    if isinstance(value, str):
        if _XML_INVALID_CHARS.search(value):
            raise SerializationError(
                "Text contains characters not allowed in XML", body_format="xml"
            )
        return value
    raise SerializationError(
        f"Cannot encode {type(value).__name__} as XML text", body_format="xml"
    )


__all__ = [
    "DEFAULT_XML_ROOT",
    "XML_DECLARATION",
    "build_headers",
    "build_request",
    "build_url",
    "parse_method",
    "serialize_payload",
    "to_json",
    "to_xml",
]
