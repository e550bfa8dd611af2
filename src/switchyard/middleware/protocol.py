"""Middleware protocol and the function adapter.

A middleware is any object with::

    def process(self, request, handler) -> response: ...

No base class required. The framework checks the shape, not the lineage.
``handler`` is the next layer inward (another middleware, or the route
handler at the center). A middleware may:

- call ``handler.handle(request)`` and return the result as-is,
- call it with a modified or replacement request,
- return a response without calling it at all (short-circuit),
- let exceptions from itself or the inner handler propagate.

Plain functions can be used too, with a ``next`` callable instead of a
handler object::

    def timing(request, next):
        start = time.monotonic()
        response = next(request)
        return response.with_header("X-Time", f"{time.monotonic() - start:.3f}")

    dispatcher.add(timing)   # wrapped in CallableMiddleware
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeAlias, runtime_checkable

from switchyard.handlers import Handler

# The next handler in the chain, as seen by function middleware
Next: TypeAlias = Callable[[Any], Any]

# Function middleware: (request, next) -> response
MiddlewareFunc: TypeAlias = Callable[[Any, Next], Any]


@runtime_checkable
class Middleware(Protocol):
    """Protocol for switchyard middleware.

    Accepts any object with a ``process`` method::

        class RequireJSON:
            def process(self, request, handler):
                if request.headers.get("content-type") != "application/json":
                    return Response("expected JSON", status=415)
                return handler.handle(request)
    """

    def process(self, request: Any, handler: Handler) -> Any: ...


class CallableMiddleware:
    """Adapts a ``(request, next) -> response`` function to ``Middleware``."""

    __slots__ = ("func",)

    def __init__(self, func: MiddlewareFunc) -> None:
        self.func = func

    def process(self, request: Any, handler: Handler) -> Any:
        return self.func(request, handler.handle)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"CallableMiddleware({name})"


def as_middleware(obj: Any) -> Middleware:
    """Return *obj* if it already has ``process()``, else wrap a callable."""
    if isinstance(obj, Middleware):
        return obj
    if callable(obj):
        return CallableMiddleware(obj)
    msg = f"Expected a middleware or a callable, got {type(obj).__name__}"
    raise TypeError(msg)
