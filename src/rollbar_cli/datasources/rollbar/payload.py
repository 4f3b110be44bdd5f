"""Safe traversal of decoded JSON payloads.

Occurrence payloads differ between notifier SDKs and versions, so nothing
about their shape can be assumed. ``Node`` wraps one decoded JSON value
(``None``, bool, number, string, list or dict) or the absence of one, and
every accessor returns another ``Node`` instead of raising::

    Node(data).get("body").get("message").get("body")

A key whose value is JSON ``null`` is *present* with value ``None``; only a
missing key (or a step through the wrong type) is absent.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, TypeAlias

JSONValue: TypeAlias = (
    None | bool | int | float | str | list["JSONValue"] | dict[str, "JSONValue"]
)

_ABSENT: Any = object()


class Node:
    """A JSON value, or nothing."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = _ABSENT) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Node({self._value!r})" if self.present else "Node(<absent>)"

    @property
    def present(self) -> bool:
        return self._value is not _ABSENT

    @property
    def value(self) -> JSONValue:
        """The wrapped value; ``None`` when absent (check ``present`` first)."""
        return None if self._value is _ABSENT else self._value  # type: ignore[no-any-return]

    def mapping(self) -> Mapping[str, JSONValue] | None:
        return self._value if isinstance(self._value, Mapping) else None

    def sequence(self) -> list[JSONValue] | None:
        return self._value if isinstance(self._value, list) else None

    def get(self, key: str) -> Node:
        """Child under ``key``; absent unless this is a mapping holding ``key``."""
        mapping = self.mapping()
        if mapping is None or key not in mapping:
            return Node()
        return Node(mapping[key])

    def first(self) -> Node:
        """First element of a non-empty list, else absent."""
        seq = self.sequence()
        return Node(seq[0]) if seq else Node()

    def children(self) -> Iterator[Node]:
        """Elements of a list, in order. Nothing for any other value."""
        for element in self.sequence() or ():
            yield Node(element)
