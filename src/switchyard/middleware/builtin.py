"""Built-in middleware: request logging.

Logs one line per request on the way out, with the elapsed time. Opt-in;
the dispatcher never logs handler outcomes on its own.
"""

import logging
import time
from typing import Any

from switchyard.handlers import Handler

logger = logging.getLogger("switchyard.middleware")


class RequestLogger:
    """Log method, path, and elapsed time for every request it wraps.

    Successful requests are logged at ``level`` (INFO by default). A request
    whose inner handler raises is logged at WARNING and the exception is
    re-raised untouched.

    Usage::

        dispatcher.add(RequestLogger())
        dispatcher.add(RequestLogger(logging.getLogger("myapp.access")))
    """

    __slots__ = ("level", "logger")

    def __init__(self, log: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self.logger = log or logger
        self.level = level

    def process(self, request: Any, handler: Handler) -> Any:
        method = getattr(request, "method", "?")
        path = getattr(request, "path", "?")
        start = time.perf_counter()
        try:
            response = handler.handle(request)
        except Exception as exc:
            elapsed_ms = (time.perf_counter() - start) * 1000
            self.logger.warning(
                "%s %s failed after %.1fms: %s", method, path, elapsed_ms, type(exc).__name__
            )
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        status = getattr(response, "status", None)
        if status is None:
            self.logger.log(self.level, "%s %s (%.1fms)", method, path, elapsed_ms)
        else:
            self.logger.log(self.level, "%s %s %s (%.1fms)", method, path, status, elapsed_ms)
        return response
