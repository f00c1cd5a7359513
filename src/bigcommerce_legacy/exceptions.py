# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the BigCommerce legacy connector.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from ConnectorError, making it easy to catch
every connector-related failure with a single except clause.
"""


class ConnectorError(Exception):
    """Base exception for all connector errors.

    Example:
        try:
            products = await api.get("/products")
        except ConnectorError as e:
            logger.error(f"BigCommerce call failed: {e}")
    """

    pass


class ConfigurationError(ConnectorError):
    """Raised when connector settings are missing or invalid.

    Raised synchronously while building a ConnectorConfig, before any
    transport exists and before any request is sent.

    Attributes:
        field: Name of the offending setting (e.g. 'username'), or None
            when the problem is not tied to a single setting.

    Example:
        try:
            api = Connector.create(base_path, username, token, body_format="csv")
        except ConfigurationError as e:
            raise SystemExit(f"Bad BigCommerce settings ({e.field}): {e}")
    """

    def __init__(self, message: str = "", field: str | None = None):
        super().__init__(message)
        self.field = field


class SerializationError(ConnectorError):
    """Raised when a request payload cannot be encoded.

    Raised before dispatch, so a SerializationError guarantees nothing was
    sent to the store.

    Attributes:
        body_format: The body format ('json' or 'xml') that was being produced.
    """

    def __init__(self, message: str = "", body_format: str | None = None):
        super().__init__(message)
        self.body_format = body_format


class TransportError(ConnectorError):
    """Raised when no HTTP response could be obtained.

    Wraps DNS failures, refused or reset connections, TLS problems and
    timeouts. The original exception is kept on ``cause`` and is also the
    ``__cause__`` of this exception.

    Attributes:
        cause: The underlying transport exception.
        method: HTTP method of the failed request, if known.
        url: Target URL of the failed request, if known.

    Example:
        try:
            await api.get("/orders")
        except TransportError as e:
            logger.warning(f"Store unreachable: {e.cause!r}")
    """

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        method: str | None = None,
        url: str | None = None,
    ):
        super().__init__(message)
        self.cause = cause
        self.method = method
        self.url = url


class ParseError(ConnectorError):
    """Raised when a successful response body is malformed for the body format.

    Attributes:
        body_format: The body format the response was parsed as.
        body: The raw response text that failed to parse.
    """

    def __init__(
        self,
        message: str,
        body_format: str | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.body_format = body_format
        self.body = body


class ApiError(ConnectorError):
    """Raised when the store answers with any status other than 200.

    The response body is kept verbatim so callers can read BigCommerce's own
    error description. No status code is treated specially: 401, 404, 429
    and 500 all surface as ApiError.

    Attributes:
        status_code: HTTP status code returned by the store.
        body: Raw response body text, unmodified.
        method: HTTP method of the request, if known.
        url: Request URL, if known.

    Example:
        try:
            await api.get("/products/1999")
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise
    """

    def __init__(
        self,
        status_code: int,
        body: str,
        method: str | None = None,
        url: str | None = None,
    ):
        target = f" for {method} {url}" if method and url else ""
        super().__init__(f"BigCommerce API returned HTTP {status_code}{target}")
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url


class RequestError(ConnectorError):
    """Raised when a request cannot be built from the call's arguments.

    Raised before dispatch, e.g. for an HTTP verb the legacy API does not
    support.

    Attributes:
        method: The rejected method value.
    """

    def __init__(self, message: str = "", method: object = None):
        super().__init__(message)
        self.method = method
