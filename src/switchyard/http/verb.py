"""HTTP verbs recognized by the router.

A closed set. Anything else a client sends is rejected at dispatch time
with ``UnrecognizedVerb``.

Resolution policy: method strings are upper-cased before lookup, so
``"get"``, ``"Get"`` and ``"GET"`` all resolve to ``Verb.GET``. This is the
only resolution path; the registry and dispatcher both go through it.
"""

from __future__ import annotations

from enum import Enum

from switchyard.errors import UnrecognizedVerb


class Verb(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    TRACE = "TRACE"
    CONNECT = "CONNECT"

    @classmethod
    def try_from(cls, method: str) -> Verb | None:
        """Return the matching verb, or ``None`` if *method* is unknown."""
        if not isinstance(method, str):
            return None
        try:
            return cls(method.upper())
        except ValueError:
            return None

    @classmethod
    def from_method(cls, method: str) -> Verb:
        """Return the matching verb. Raises ``UnrecognizedVerb`` if unknown."""
        verb = cls.try_from(method)
        if verb is None:
            raise UnrecognizedVerb(str(method))
        return verb

    def __str__(self) -> str:
        return self.value
