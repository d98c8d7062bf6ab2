"""Persistent variable bindings shared by both engines."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from .errors import UnboundVariable
from .values import Value


# Overlay chains shorter than this are never compacted, whatever the base size.
_MIN_CHAIN = 8


class _Binding:
    """One overlay link: ``name`` rebound to ``value`` on top of ``parent``."""

    __slots__ = ("name", "value", "parent")

    def __init__(self, name: str, value: Value, parent: _Binding | None) -> None:
        self.name = name
        self.value = value
        self.parent = parent


class Environment(Mapping[str, Value]):
    """Immutable mapping from identifier to Value.

    ``assign`` returns a new Environment and leaves the receiver valid and
    unchanged. Internally an environment is a base dict that is never
    mutated after construction, plus a chain of single-binding overlays
    shared between versions. Once the chain outgrows the base it is folded
    into a fresh base, so an update costs amortised constant time and a
    lookup walks at most ``max(_MIN_CHAIN, len(base))`` links.
    """

    __slots__ = ("_base", "_overlay", "_depth")

    def __init__(self, bindings: Mapping[str, Value] | None = None) -> None:
        self._base: dict[str, Value] = dict(bindings) if bindings else {}
        self._overlay: _Binding | None = None
        self._depth = 0

    @classmethod
    def from_mapping(cls, bindings: Mapping[str, Value]) -> Environment:
        return cls(bindings)

    @classmethod
    def _derive(
        cls, base: dict[str, Value], overlay: _Binding | None, depth: int
    ) -> Environment:
        env = cls.__new__(cls)
        env._base = base
        env._overlay = overlay
        env._depth = depth
        return env

    # -- Lookup ---------------------------------------------------------

    def lookup(self, name: str) -> Value:
        link = self._overlay
        while link is not None:
            if link.name == name:
                return link.value
            link = link.parent
        try:
            return self._base[name]
        except KeyError:
            raise UnboundVariable(name) from None

    def __getitem__(self, name: str) -> Value:
        return self.lookup(name)

    def __contains__(self, name: object) -> bool:
        link = self._overlay
        while link is not None:
            if link.name == name:
                return True
            link = link.parent
        return name in self._base

    # -- Update ---------------------------------------------------------

    def assign(self, name: str, value: Value) -> Environment:
        """Return a copy of this environment with *name* rebound to *value*."""
        overlay = _Binding(name, value, self._overlay)
        depth = self._depth + 1
        if depth > max(_MIN_CHAIN, len(self._base)):
            return Environment._derive(_flatten(self._base, overlay), None, 0)
        return Environment._derive(self._base, overlay, depth)

    # -- Mapping protocol -----------------------------------------------

    def to_dict(self) -> dict[str, Value]:
        if self._overlay is None:
            return dict(self._base)
        return _flatten(self._base, self._overlay)

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_dict())

    def __len__(self) -> int:
        if self._overlay is None:
            return len(self._base)
        return len(self.to_dict())

    def __repr__(self) -> str:
        return f"Environment({self.to_dict()!r})"

    def __str__(self) -> str:
        bindings = self.to_dict()
        inner = ", ".join(f"{k}: {bindings[k]}" for k in sorted(bindings))
        return "{" + inner + "}"


def _flatten(base: dict[str, Value], overlay: _Binding | None) -> dict[str, Value]:
    """Fold an overlay chain onto a copy of *base*; nearer links win."""
    pending: list[_Binding] = []
    while overlay is not None:
        pending.append(overlay)
        overlay = overlay.parent
    merged = dict(base)
    for link in reversed(pending):
        merged[link.name] = link.value
    return merged


def as_environment(bindings: Any = None) -> Environment:
    """Accept an Environment as-is, or wrap a plain mapping (or None)."""
    if isinstance(bindings, Environment):
        return bindings
    if bindings is None:
        return Environment()
    return Environment(bindings)
