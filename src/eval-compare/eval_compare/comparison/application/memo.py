"""IdentityMemo — caches the last derived value keyed on its source's identity."""

from collections.abc import Callable
from typing import Generic, TypeVar

S = TypeVar("S")
V = TypeVar("V")


class IdentityMemo(Generic[S, V]):
    """Recompute only when called with a different source object.

    Identity, not equality, decides: an equal but distinct collection is a new
    generation and triggers recomputation. The source is held so its id
    cannot be reused while cached.
    """

    def __init__(self, compute: Callable[[S], V]) -> None:
        self._compute = compute
        self._source: S | None = None
        self._value: V | None = None
        self._cached = False

    def get(self, source: S) -> V:
        if not self._cached or self._source is not source:
            self._value = self._compute(source)
            self._source = source
            self._cached = True
        return self._value  # type: ignore[return-value]

    def clear(self) -> None:
        self._source = None
        self._value = None
        self._cached = False
