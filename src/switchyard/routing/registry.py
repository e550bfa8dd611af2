"""Per-verb route registry.

Routes are stored in one bucket per verb, in registration order. Lookup
resolves the request's verb, then scans that bucket and returns the first
route whose pattern matches the path. First match wins, so register the
more specific route first::

    registry.add_route(Verb.GET, Route.parse("/users/profile"), profile)
    registry.add_route(Verb.GET, Route.parse("/users/{id}"), show_user)

The scan is linear in the number of routes for the verb. Route tables are
built once at startup and stay small; a prefix index (trie or radix tree)
keyed on literal segments is where to start if lookup ever shows up in a
profile.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Protocol, Self, runtime_checkable

from switchyard._internal.types import RequestLike
from switchyard.errors import HandlerNotFound, UnrecognizedVerb
from switchyard.handlers import Handler, as_handler
from switchyard.http.verb import Verb
from switchyard.routing.protocol import RouteLike, as_route

logger = logging.getLogger("switchyard.routing")


@runtime_checkable
class Locator(Protocol):
    """What the dispatcher needs from a registry. No base class required."""

    def locate(self, request: RequestLike) -> Handler: ...

    def add_route(self, verb: Verb, route: RouteLike, handler: Any) -> Self: ...


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One registration: a verb, a route pattern, and its handler."""

    verb: Verb
    route: RouteLike
    handler: Handler


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful lookup."""

    entry: RouteEntry
    path_params: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def handler(self) -> Handler:
        return self.entry.handler

    @property
    def route(self) -> RouteLike:
        return self.entry.route


class Registry:
    """Verb-bucketed route table with first-match-wins lookup.

    Usage::

        registry = Registry()
        registry.add_route(Verb.GET, Route.parse("/users/{id}"), show_user)
        handler = registry.locate(request)

    Not synchronized: finish registering before concurrent lookups start.
    Lookups themselves mutate nothing and are safe to run in parallel.
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        # A verb is absent until its first registration
        self._routes: dict[Verb, list[RouteEntry]] = {}

    def add_route(self, verb: Verb, route: Any, handler: Any) -> Self:
        """Append a route to *verb*'s bucket. Plain callables are wrapped.

        Routes that only offer ``matches()``/``get_parameters()`` are adapted;
        anything else raises ``TypeError`` here rather than at lookup.

        No duplicate or conflict detection: a later route for the same
        verb is simply another candidate, tried after the earlier ones.
        """
        entry = RouteEntry(verb=verb, route=as_route(route), handler=as_handler(handler))
        self._routes.setdefault(verb, []).append(entry)
        logger.debug("Registered %s %r -> %r", verb, route, entry.handler)
        return self

    def match(self, request: RequestLike) -> RouteMatch:
        """Find the first route matching the request's verb and path.

        Raises ``UnrecognizedVerb`` if the method isn't a known verb.
        Raises ``HandlerNotFound`` if the verb has no routes or none match.
        """
        method = request.method
        path = request.path

        verb = Verb.try_from(method)
        if verb is None:
            raise UnrecognizedVerb(method, path=path, request=request)

        bucket = self._routes.get(verb)
        if bucket is None:
            logger.debug("No routes registered for %s (path %r)", verb, path)
            raise HandlerNotFound(method, path, request=request)

        for entry in bucket:
            params = entry.route.match(path)
            if params is not None:
                return RouteMatch(entry=entry, path_params=MappingProxyType(dict(params)))

        logger.debug("No %s route matched %r (%d candidates)", verb, path, len(bucket))
        raise HandlerNotFound(method, path, request=request)

    def locate(self, request: RequestLike) -> Handler:
        """Return the handler for *request*. Same errors as ``match()``."""
        return self.match(request).handler

    # -- Introspection --

    @property
    def routes(self) -> list[RouteEntry]:
        """All registrations, grouped by verb in enum order, then in
        registration order within each verb."""
        return [entry for verb in Verb if verb in self._routes for entry in self._routes[verb]]

    def routes_for(self, verb: Verb) -> tuple[RouteEntry, ...]:
        return tuple(self._routes.get(verb, ()))

    def __contains__(self, verb: object) -> bool:
        return verb in self._routes

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self.routes)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._routes.values())
