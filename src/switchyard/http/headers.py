"""Case-insensitive request headers.

Names are folded to lower case on the way in. Each name keeps every value
it was given, in order; plain lookup returns the first one.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Immutable header mapping keyed by lower-cased name."""

    __slots__ = ("_values",)

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        values: dict[str, tuple[str, ...]] = {}
        for name, value in pairs:
            key = name.lower()
            values[key] = (*values.get(key, ()), value)
        self._values = values

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> Headers:
        return cls(mapping.items())

    def __getitem__(self, key: str) -> str:
        if not isinstance(key, str) or key.lower() not in self._values:
            raise KeyError(key)
        return self._values[key.lower()][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        first = {key: values[0] for key, values in self._values.items()}
        return f"Headers({first!r})"

    def get_all(self, key: str) -> tuple[str, ...]:
        """Every value sent for *key*, empty if absent."""
        return self._values.get(key.lower(), ())

    def with_value(self, name: str, value: str) -> Headers:
        """Return new Headers with one more value for *name*."""
        pairs = [(key, v) for key, values in self._values.items() for v in values]
        return Headers([*pairs, (name, value)])
