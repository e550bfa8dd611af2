"""Users API — routes, middleware, and host-side error mapping.

Demonstrates:
- Parameterized routes and first-match-wins precedence
- Function middleware (timing — adds X-Response-Time header)
- Class middleware (API key check that short-circuits with 401)
- A host ``serve()`` that turns dispatch errors into 404 / 400 responses

Run:
    cd examples/users_api && python app.py
"""

import logging
import time
from typing import Any

from switchyard import Dispatcher, HandlerNotFound, Request, Response, UnrecognizedVerb
from switchyard.handlers import Handler
from switchyard.middleware import Next, RequestLogger

app = Dispatcher()

USERS: dict[str, dict[str, str]] = {
    "1": {"id": "1", "name": "Ada"},
    "2": {"id": "2", "name": "Grace"},
}


# ---------------------------------------------------------------------------
# Function middleware — timing
# ---------------------------------------------------------------------------


def timing(request: Request, next: Next) -> Any:
    """Add X-Response-Time header to every response."""
    start = time.monotonic()
    response = next(request)
    elapsed = time.monotonic() - start
    if isinstance(response, Response):
        return response.with_header("X-Response-Time", f"{elapsed:.3f}s")
    return response


# ---------------------------------------------------------------------------
# Class middleware — API key
# ---------------------------------------------------------------------------


class RequireApiKey:
    """Reject requests without the expected ``X-Api-Key`` header."""

    def __init__(self, key: str) -> None:
        self.key = key

    def process(self, request: Request, handler: Handler) -> Any:
        if request.headers.get("x-api-key") != self.key:
            return Response("Unauthorized").with_status(401)
        return handler.handle(request.with_attribute("authenticated", True))


# ---------------------------------------------------------------------------
# Middleware stack (first added runs outermost)
# ---------------------------------------------------------------------------

app.add(RequestLogger())
app.add(timing)
app.add(RequireApiKey("s3cret"))


# ---------------------------------------------------------------------------
# Routes — the literal /users/me goes before /users/{id}
# ---------------------------------------------------------------------------


@app.route("/users/me")
def me(request: Request) -> Response:
    return Response("you")


@app.route("/users/{id}")
def show_user(request: Request) -> Response:
    user = USERS.get(request.path_params["id"])
    if user is None:
        return Response("No such user").with_status(404)
    return Response(user["name"])


@app.route("/users", methods=["POST"])
def create_user(request: Request) -> Response:
    new_id = str(len(USERS) + 1)
    USERS[new_id] = {"id": new_id, "name": request.body.decode("utf-8")}
    return Response(new_id).with_status(201)


# ---------------------------------------------------------------------------
# Host — switchyard raises, the host decides what the client sees
# ---------------------------------------------------------------------------


def serve(request: Request) -> Response:
    try:
        return app.handle(request)
    except HandlerNotFound:
        return Response("Not Found").with_status(404)
    except UnrecognizedVerb:
        return Response("Bad Request").with_status(400)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    headers = {"X-Api-Key": "s3cret"}
    for method, path in [("GET", "/users/1"), ("GET", "/users/me"), ("GET", "/nope"), ("FOO", "/")]:
        response = serve(Request.build(method, path, headers=headers))
        print(method, path, response.status, response.text)
