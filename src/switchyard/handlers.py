"""Handler protocol and the callable wrapper.

Everything the dispatcher invokes — the located route handler and every
layer of the middleware chain — satisfies one contract::

    handler.handle(request) -> response

Plain functions are adapted with ``CallableHandler``.
"""

from typing import Any, Protocol, runtime_checkable

from switchyard._internal.types import HandlerFunc


@runtime_checkable
class Handler(Protocol):
    def handle(self, request: Any) -> Any: ...


class CallableHandler:
    """Adapts a ``(request) -> response`` function to the Handler contract.

    The wrapped function is called as-is; whatever it raises reaches the
    caller unchanged.
    """

    __slots__ = ("func",)

    def __init__(self, func: HandlerFunc) -> None:
        self.func = func

    def handle(self, request: Any) -> Any:
        return self.func(request)

    def __call__(self, request: Any) -> Any:
        return self.func(request)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"CallableHandler({name})"


def as_handler(obj: Any) -> Handler:
    """Return *obj* if it already has ``handle()``, else wrap a callable.

    Raises ``TypeError`` for anything that is neither.
    """
    if isinstance(obj, Handler):
        return obj
    if callable(obj):
        return CallableHandler(obj)
    msg = f"Expected a handler or a callable, got {type(obj).__name__}"
    raise TypeError(msg)
