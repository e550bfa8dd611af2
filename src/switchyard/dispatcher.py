"""Dispatcher — the front controller.

Owns a route locator and an ordered middleware list. For each request it
locates the handler, wraps it in the middleware chain, and invokes it.

Lifecycle is configure-then-serve: register routes and middleware at
startup, then call ``handle()`` for each request. Registration is not
synchronized; finish it before serving concurrent requests.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Self

from switchyard._internal.types import RequestLike
from switchyard.config import RouterConfig
from switchyard.handlers import Handler
from switchyard.http.request import Request
from switchyard.http.verb import Verb
from switchyard.middleware.protocol import Middleware, as_middleware
from switchyard.routing.protocol import RouteLike, StatefulRouteLike, as_route
from switchyard.routing.registry import Locator, Registry
from switchyard.routing.route import Route

logger = logging.getLogger("switchyard.dispatch")


class _MiddlewareLink:
    """One layer of the onion: hands the request to a middleware together
    with the next layer inward."""

    __slots__ = ("inner", "middleware")

    def __init__(self, middleware: Middleware, inner: Handler) -> None:
        self.middleware = middleware
        self.inner = inner

    def handle(self, request: Any) -> Any:
        return self.middleware.process(request, self.inner)


class _BoundHandler:
    """The located handler plus the parameters its route captured.

    Delivers ``path_params`` to the handler on a ``Request``; any other
    request type passes through unchanged.
    """

    __slots__ = ("handler", "path_params")

    def __init__(self, handler: Handler, path_params: Mapping[str, str]) -> None:
        self.handler = handler
        self.path_params = path_params

    def handle(self, request: Any) -> Any:
        if isinstance(request, Request):
            request = request.with_path_params(self.path_params)
        return self.handler.handle(request)


class Dispatcher:
    """The switchyard front controller.

    Usage::

        app = Dispatcher()
        app.get("/users/{id}", show_user).post("/users", create_user)
        app.add(RequestLogger())

        response = app.handle(Request.build("GET", "/users/42"))

    Any object with ``locate()`` and ``add_route()`` can stand in for the
    default ``Registry``.
    """

    __slots__ = ("_locator", "_middleware", "config")

    def __init__(self, locator: Locator | None = None, *, config: RouterConfig | None = None) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._locator: Locator = locator if locator is not None else Registry()
        self._middleware: list[Middleware] = []

    @property
    def locator(self) -> Locator:
        return self._locator

    @property
    def middleware(self) -> tuple[Middleware, ...]:
        return tuple(self._middleware)

    # -- Route registration --

    def add_route(
        self, verb: Verb | str, route: str | RouteLike | StatefulRouteLike, handler: Any
    ) -> Self:
        """Register *handler* for *verb* and *route*.

        A string route is parsed with ``Route.parse()`` and may raise
        ``InvalidPath``. A route object is stored as given, or adapted if it
        only has ``matches()``/``get_parameters()``; any other object raises
        ``TypeError``. A string verb is resolved like a request method and
        may raise ``UnrecognizedVerb``.
        """
        if not isinstance(verb, Verb):
            verb = Verb.from_method(verb)
        if isinstance(route, str):
            route = Route.parse(route, self.config)
        else:
            route = as_route(route)
        self._locator.add_route(verb, route, handler)
        return self

    def get(self, path: str, handler: Any) -> Self:
        return self.add_route(Verb.GET, path, handler)

    def post(self, path: str, handler: Any) -> Self:
        return self.add_route(Verb.POST, path, handler)

    def put(self, path: str, handler: Any) -> Self:
        return self.add_route(Verb.PUT, path, handler)

    def patch(self, path: str, handler: Any) -> Self:
        return self.add_route(Verb.PATCH, path, handler)

    def delete(self, path: str, handler: Any) -> Self:
        return self.add_route(Verb.DELETE, path, handler)

    def route(
        self,
        path: str,
        *,
        methods: Verb | str | Iterable[Verb | str] = ("GET",),
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a route handler via decorator.

        Args:
            path: Route pattern. Use ``{name}`` for path parameters.
            methods: Verb or verbs to register for. A single ``"POST"`` or
                ``Verb.POST`` counts as one verb. Defaults to ``("GET",)``.
        """
        if isinstance(methods, (str, Verb)):
            methods = (methods,)
        # Parse once so a bad pattern fails at decoration time, before any
        # verb is registered.
        parsed = Route.parse(path, self.config)
        verbs = [m if isinstance(m, Verb) else Verb.from_method(m) for m in methods]

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            for verb in verbs:
                self.add_route(verb, parsed, func)
            return func

        return decorator

    # -- Middleware --

    def add(self, middleware: Middleware | Callable[..., Any]) -> Self:
        """Append a middleware. The first one added runs outermost."""
        self._middleware.append(as_middleware(middleware))
        return self

    # -- Dispatch --

    def handle(self, request: RequestLike) -> Any:
        """Route *request* through the middleware chain to its handler.

        ``UnrecognizedVerb`` and ``HandlerNotFound`` from the locator, and
        anything raised by middleware or handlers, propagate unchanged.
        """
        handler = self._locate(request)

        if not self._middleware:
            return handler.handle(request)

        # Fold right-to-left so the first-added middleware is the outermost
        chain: Handler = handler
        for mw in reversed(self._middleware):
            chain = _MiddlewareLink(mw, chain)

        if self.config.debug:
            logger.debug(
                "Dispatching %s %s through %d middleware",
                request.method,
                request.path,
                len(self._middleware),
            )
        return chain.handle(request)

    def __call__(self, request: RequestLike) -> Any:
        return self.handle(request)

    def _locate(self, request: RequestLike) -> Handler:
        # match() stands in for locate() only while locate() is Registry's own
        locator = self._locator
        if not isinstance(locator, Registry) or type(locator).locate is not Registry.locate:
            return locator.locate(request)

        match = locator.match(request)
        if self.config.debug:
            logger.debug(
                "Located %s %s -> %r %s",
                request.method,
                request.path,
                match.route,
                dict(match.path_params),
            )
        if match.path_params:
            return _BoundHandler(match.handler, match.path_params)
        return match.handler
