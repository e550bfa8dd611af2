"""Shared type aliases used across switchyard modules."""

from collections.abc import Callable
from typing import Any, Protocol, TypeAlias, runtime_checkable


@runtime_checkable
class RequestLike(Protocol):
    """The only shape switchyard reads from a request: method and path.

    Anything else (headers, query, body) belongs to handlers.
    """

    @property
    def method(self) -> str: ...

    @property
    def path(self) -> str: ...


# Plain request-handling function: (request) -> response
HandlerFunc: TypeAlias = Callable[[Any], Any]
