"""Switchyard exception hierarchy.

Shared across Route, Registry, Dispatcher, and middleware so every module
raises and catches the same types.

Two families matter to a host:

- ``ConfigurationError`` — raised while routes are being registered.
  Programmer errors; surface them at startup.
- ``DispatchError`` — raised while a request is being handled. Expected,
  recoverable conditions; the host maps them to a protocol response
  (e.g. 400 / 404 / 405). Switchyard never produces status codes itself.
"""

from typing import Any


def _abbreviate(text: str, limit: int = 50) -> str:
    """Keep multi-kilobyte patterns out of exception messages."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


class SwitchyardError(Exception):
    """Base for all switchyard-specific errors."""


class ConfigurationError(SwitchyardError):
    """Raised when router configuration is invalid."""


class InvalidPath(ConfigurationError, ValueError):  # noqa: N818
    """A route pattern could not be parsed.

    Subclasses name the exact rule that was broken so callers and tests
    can tell the cases apart without matching on message text.
    """

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid route path {_abbreviate(path)!r}: {detail}")


class EmptyParameterName(InvalidPath):  # noqa: N818
    """``{}`` segment with nothing between the braces."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "empty parameter names are not allowed")


class InvalidParameterName(InvalidPath):  # noqa: N818
    """Parameter name not matching ``[A-Za-z_][A-Za-z0-9_]*``."""

    def __init__(self, path: str, name: str) -> None:
        self.name = name
        super().__init__(
            path,
            f"invalid parameter name {name!r}: must contain only letters, digits, "
            "and underscores, and start with a letter or underscore",
        )


class DuplicateParameterName(InvalidPath):  # noqa: N818
    """The same parameter name appears twice in one pattern."""

    def __init__(self, path: str, name: str) -> None:
        self.name = name
        super().__init__(path, f"duplicate parameter name {name!r}")


class PathTooLong(InvalidPath):  # noqa: N818
    def __init__(self, path: str, limit: int) -> None:
        self.limit = limit
        super().__init__(path, f"exceeds maximum length of {limit} characters")


class TooManySegments(InvalidPath):  # noqa: N818
    def __init__(self, path: str, limit: int) -> None:
        self.limit = limit
        super().__init__(path, f"exceeds maximum of {limit} segments")


class SegmentTooLong(InvalidPath):  # noqa: N818
    def __init__(self, path: str, segment: str, limit: int) -> None:
        self.segment = segment
        self.limit = limit
        super().__init__(
            path,
            f"segment {_abbreviate(segment)!r} exceeds maximum length of {limit} characters",
        )


class DispatchError(SwitchyardError):
    """A request could not be routed.

    Carries the attempted method and path (and the request itself) for
    logging. No sanitization is performed — redact before showing
    ``str(exc)`` to an end user.
    """

    def __init__(self, message: str, *, method: str, path: str, request: Any = None) -> None:
        self.method = method
        self.path = path
        self.request = request
        super().__init__(message)


class UnrecognizedVerb(DispatchError, ValueError):  # noqa: N818
    """The request method is not one of the known HTTP verbs."""

    def __init__(self, method: str, *, path: str = "", request: Any = None) -> None:
        super().__init__(
            f"Unrecognized HTTP verb: {method!r}",
            method=method,
            path=path,
            request=request,
        )


class HandlerNotFound(DispatchError, LookupError):  # noqa: N818
    """No registered route matched the request's verb and path."""

    def __init__(self, method: str, path: str, *, request: Any = None) -> None:
        super().__init__(
            f"Handler not found for {method} {path!r}",
            method=method,
            path=path,
            request=request,
        )


class NoMatchState(SwitchyardError, RuntimeError):  # noqa: N818
    """Parameters were read without a preceding successful ``matches()`` call."""

    def __init__(self, detail: str = "matches() not called or last call failed") -> None:
        super().__init__(detail)
