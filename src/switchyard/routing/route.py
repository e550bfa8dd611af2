"""Tokenized route patterns.

A pattern is a ``/``-delimited string. Each segment is either a literal
(matched by exact string equality) or a parameter written ``{name}``::

    route = Route.parse("user/{id}/groups")
    route.match("user/12/groups")   # {"id": "12"}
    route.match("user/12")          # None — segment count differs

Splitting keeps empty segments, so leading and trailing slashes are
significant: ``"/a"`` is ``("", "a")`` and ``"a/"`` is ``("a", "")``.

Captured values are the raw path substrings: never percent-decoded,
type-converted, or validated. That is the handler's job.
"""

from __future__ import annotations

import re
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from switchyard.config import RouterConfig
from switchyard.errors import (
    DuplicateParameterName,
    EmptyParameterName,
    InvalidParameterName,
    InvalidPath,
    NoMatchState,
    PathTooLong,
    SegmentTooLong,
    TooManySegments,
)

PATH_SEPARATOR = "/"

_PARAM_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_DEFAULT_CONFIG = RouterConfig()


def is_parameter(segment: str) -> bool:
    """True for ``{...}`` segments. A lone ``{id`` or ``id}`` is a literal."""
    return len(segment) >= 2 and segment[0] == "{" and segment[-1] == "}"


def split_path(path: str) -> list[str]:
    """Split on ``/``, keeping empty segments."""
    return path.split(PATH_SEPARATOR)


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Literal:  ``users``  (is_param=False)
    Param:    ``{id}``   (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None

    @classmethod
    def of(cls, raw: str) -> PathSegment:
        if is_parameter(raw):
            return cls(value=raw, is_param=True, param_name=raw[1:-1])
        return cls(value=raw)


def parse_path(path: str, config: RouterConfig | None = None) -> list[str]:
    """Split and validate a route pattern. Returns the raw segments.

    Raises a subclass of ``InvalidPath`` naming the first rule broken.
    """
    cfg = config or _DEFAULT_CONFIG

    if len(path) > cfg.max_path_length:
        raise PathTooLong(path, cfg.max_path_length)

    segments = split_path(path)
    if len(segments) > cfg.max_segments:
        raise TooManySegments(path, cfg.max_segments)

    seen: set[str] = set()
    for segment in segments:
        if len(segment) > cfg.max_segment_length:
            raise SegmentTooLong(path, segment, cfg.max_segment_length)

        if not is_parameter(segment):
            continue

        name = segment[1:-1]
        if not name:
            raise EmptyParameterName(path)
        if not _PARAM_NAME.fullmatch(name):
            raise InvalidParameterName(path, name)
        if name in seen:
            raise DuplicateParameterName(path, name)
        seen.add(name)

    return segments


class BaseRoute:
    """Shared match-then-fetch API on top of a pure ``match()``.

    ``match(path)`` is the primary, stateless API: it returns the captured
    parameters or ``None``. ``matches(path)`` wraps it for callers that want
    a boolean, remembering the captured parameters for ``get_parameters()``.
    The remembered state is thread-local, so concurrent dispatch against a
    shared route never sees another thread's parameters.
    """

    __slots__ = ("_state",)

    def __init__(self) -> None:
        self._state = threading.local()

    def match(self, path: str) -> dict[str, str] | None:
        raise NotImplementedError

    def matches(self, path: str) -> bool:
        params = self.match(path)
        self._state.params = params
        return params is not None

    @property
    def parameters(self) -> Mapping[str, str]:
        """Parameters captured by the last successful ``matches()`` call.

        Raises ``NoMatchState`` if ``matches()`` was never called on this
        thread or the most recent call returned False.
        """
        params = getattr(self._state, "params", None)
        if params is None:
            raise NoMatchState
        return params

    def get_parameters(self) -> Mapping[str, str]:
        return self.parameters


class Route(BaseRoute):
    """A tokenized route pattern.

    Build one from a pattern string with ``Route.parse()``, which validates
    parameter names and enforces the length limits in ``RouterConfig``.

    Calling ``Route(segments)`` directly with a pre-split list skips every
    limit and name check; it only insists that each segment is a string.
    It exists for internal and test use. An empty ``{}`` segment slipped in
    this way is reported when the route is first matched.
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: Iterable[Any]) -> None:
        super().__init__()
        raw = list(segments)
        for segment in raw:
            if not isinstance(segment, str):
                raise InvalidPath(repr(raw), f"{segment!r} is an invalid url token")
        self._segments: tuple[PathSegment, ...] = tuple(PathSegment.of(s) for s in raw)

    @classmethod
    def parse(cls, path: str, config: RouterConfig | None = None) -> Route:
        """Create a Route from a pattern string, validating it first."""
        return cls(parse_path(path, config))

    # -- Matching --

    def match(self, path: str) -> dict[str, str] | None:
        """Match *path* against this pattern in one pass.

        Returns the captured parameters (empty dict for an all-literal
        pattern), or ``None`` if the path doesn't match. Segment counts
        must be equal; parameter segments capture anything, literal
        segments must be identical.
        """
        parts = split_path(path)
        if len(parts) != len(self._segments):
            return None

        params: dict[str, str] = {}
        for segment, part in zip(self._segments, parts, strict=True):
            if segment.is_param:
                if not segment.param_name:
                    raise EmptyParameterName(self.path)
                params[segment.param_name] = part
            elif segment.value != part:
                return None
        return params

    # -- Introspection --

    @property
    def segments(self) -> tuple[PathSegment, ...]:
        return self._segments

    @property
    def path(self) -> str:
        """The pattern string this route was built from."""
        return PATH_SEPARATOR.join(s.value for s in self._segments)

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(s.param_name for s in self._segments if s.is_param and s.param_name)

    def __repr__(self) -> str:
        return f"Route({self.path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)


class StaticRoute(BaseRoute):
    """A route that matches only one exact path string. No parameters."""

    __slots__ = ("_path",)

    def __init__(self, path: str) -> None:
        super().__init__()
        self._path = path

    def match(self, path: str) -> dict[str, str] | None:
        if path == self._path:
            return {}
        return None

    @property
    def path(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"StaticRoute({self._path!r})"
