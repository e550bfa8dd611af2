"""Routing — tokenized route patterns and the per-verb registry.

Routes are registered during setup; lookup is a first-match-wins scan
over the routes for the request's verb.
"""

from switchyard.routing.protocol import RouteLike, StatefulRouteAdapter, as_route
from switchyard.routing.registry import Locator, Registry, RouteEntry, RouteMatch
from switchyard.routing.route import PathSegment, Route, StaticRoute, parse_path

__all__ = [
    "Locator",
    "PathSegment",
    "Registry",
    "Route",
    "RouteEntry",
    "RouteLike",
    "RouteMatch",
    "StatefulRouteAdapter",
    "StaticRoute",
    "as_route",
    "parse_path",
]
