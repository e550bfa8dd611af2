"""Immutable HTTP request.

A reference carrier for hosts that don't bring their own request type.
Switchyard itself only reads ``method`` and ``path`` (see
``switchyard._internal.types.RequestLike``); any object exposing those two
attributes can be dispatched.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from switchyard.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Middleware that needs to change the request builds a new one with
    the ``with_*()`` helpers and passes that to the next handler.

    ``path_params`` is filled in by the dispatcher right before the
    terminal handler runs; middleware always sees it empty.
    """

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
    path_params: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    body: bytes = b""
    # Free-form per-request data for middleware -> handler hand-off
    attributes: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def build(
        cls,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        body: bytes = b"",
    ) -> Request:
        """Convenience constructor taking headers as a plain mapping."""
        return cls(
            method=method,
            path=path,
            headers=Headers.from_mapping(headers or {}),
            body=body,
        )

    # -- Chainable transformations --

    def with_path(self, path: str) -> Request:
        """Return a new Request for a different path."""
        return replace(self, path=path)

    def with_method(self, method: str) -> Request:
        """Return a new Request with a different method string."""
        return replace(self, method=method)

    def with_header(self, name: str, value: str) -> Request:
        """Return a new Request with an additional header."""
        return replace(self, headers=self.headers.with_value(name, value))

    def with_path_params(self, params: Mapping[str, str]) -> Request:
        """Return a new Request carrying the captured route parameters."""
        return replace(self, path_params=MappingProxyType(dict(params)))

    def with_attribute(self, name: str, value: Any) -> Request:
        """Return a new Request with one more entry in ``attributes``."""
        return replace(self, attributes=MappingProxyType({**self.attributes, name: value}))
