"""Middleware — Protocol-based, no inheritance required.

A middleware is any object with ``process(request, handler) -> response``,
or a plain function ``(request, next) -> response``.

Built-in middleware:
    RequestLogger -- Log method, path, status, and elapsed time per request
"""

from switchyard.middleware.builtin import RequestLogger
from switchyard.middleware.protocol import (
    CallableMiddleware,
    Middleware,
    MiddlewareFunc,
    Next,
    as_middleware,
)

__all__ = [
    "CallableMiddleware",
    "Middleware",
    "MiddlewareFunc",
    "Next",
    "RequestLogger",
    "as_middleware",
]
