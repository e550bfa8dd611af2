"""Route protocols.

A route is any object with a ``match(path)`` method returning the captured
parameters on success or ``None`` on failure. No base class required.
``Route`` and ``StaticRoute`` are the built-in implementations.

Routes written against the two-step contract, ``matches(path) -> bool``
followed by ``get_parameters()``, are accepted too and adapted on
registration by ``as_route``.
"""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class RouteLike(Protocol):
    def match(self, path: str) -> Mapping[str, str] | None: ...


@runtime_checkable
class StatefulRouteLike(Protocol):
    def matches(self, path: str) -> bool: ...

    def get_parameters(self) -> Mapping[str, str]: ...


class StatefulRouteAdapter:
    """Presents a ``matches``/``get_parameters`` route as a ``RouteLike``.

    Only as thread-safe as the wrapped route's own match state.
    """

    __slots__ = ("route",)

    def __init__(self, route: StatefulRouteLike) -> None:
        self.route = route

    def match(self, path: str) -> Mapping[str, str] | None:
        if not self.route.matches(path):
            return None
        return self.route.get_parameters()

    def __repr__(self) -> str:
        return repr(self.route)


def as_route(obj: object) -> RouteLike:
    """Return *obj* as a ``RouteLike``, adapting two-step routes.

    Raises ``TypeError`` for anything that has neither ``match`` nor the
    ``matches``/``get_parameters`` pair.
    """
    if isinstance(obj, RouteLike):
        return obj
    if isinstance(obj, StatefulRouteLike):
        return StatefulRouteAdapter(obj)
    msg = (
        f"Expected a route with match(path) or matches(path) and "
        f"get_parameters(), got {type(obj).__name__}"
    )
    raise TypeError(msg)
