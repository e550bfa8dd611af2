"""Switchyard — a small synchronous HTTP request router.

Maps a request's verb and path to a registered handler, passing it through
an ordered middleware chain on the way.

Basic usage::

    from switchyard import Dispatcher, Request, Response

    app = Dispatcher()

    def show_user(request):
        return Response(f"user {request.path_params['id']}")

    app.get("/users/{id}", show_user)

    response = app.handle(Request.build("GET", "/users/42"))

Hosts translate the dispatch errors into protocol responses::

    try:
        response = app.handle(request)
    except HandlerNotFound:
        response = Response("Not Found", status=404)
    except UnrecognizedVerb:
        response = Response("Bad Request", status=400)
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "CallableHandler",
    "CallableMiddleware",
    "ConfigurationError",
    "DispatchError",
    "Dispatcher",
    "Handler",
    "HandlerNotFound",
    "InvalidPath",
    "Middleware",
    "NoMatchState",
    "Registry",
    "Request",
    "RequestLogger",
    "Response",
    "Route",
    "RouterConfig",
    "StaticRoute",
    "SwitchyardError",
    "UnrecognizedVerb",
    "Verb",
]

# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "CallableHandler": "switchyard.handlers",
    "CallableMiddleware": "switchyard.middleware.protocol",
    "ConfigurationError": "switchyard.errors",
    "DispatchError": "switchyard.errors",
    "Dispatcher": "switchyard.dispatcher",
    "Handler": "switchyard.handlers",
    "HandlerNotFound": "switchyard.errors",
    "InvalidPath": "switchyard.errors",
    "Middleware": "switchyard.middleware.protocol",
    "NoMatchState": "switchyard.errors",
    "Registry": "switchyard.routing.registry",
    "Request": "switchyard.http.request",
    "RequestLogger": "switchyard.middleware.builtin",
    "Response": "switchyard.http.response",
    "Route": "switchyard.routing.route",
    "RouterConfig": "switchyard.config",
    "StaticRoute": "switchyard.routing.route",
    "SwitchyardError": "switchyard.errors",
    "UnrecognizedVerb": "switchyard.errors",
    "Verb": "switchyard.http.verb",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import switchyard`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
