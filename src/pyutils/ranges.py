"""Integer ranges.

`Range` is an immutable ``(start, stop, step)`` triple that yields integers
lazily. It holds no iteration state of its own, so the same value can be
traversed any number of times, including concurrently.

Examples:
    ```py
    list(Range(5))          # [0, 1, 2, 3, 4]
    list(Range(2, 10, 3))   # [2, 5, 8]
    list(Range(5, 0, -2))   # [5, 3, 1]
    list(Range(3, 3))       # []
    ```
"""

from collections.abc import Iterator
from typing import Any, overload

__all__ = ["Range"]

# Marks an omitted stop, so an explicit None still fails the type check.
_MISSING: Any = object()


class Range:
    """A lazy, finite, restartable sequence of integers.

    Iteration starts at ``start`` and advances by ``step``, stopping strictly
    before reaching or passing ``stop``: while ``current < stop`` for a
    positive step, while ``current > stop`` for a negative one.

    Construct with ``Range(stop)`` (same as ``Range(0, stop, 1)``) or
    ``Range(start, stop, step=1)``.

    Raises:
        TypeError: If a bound is not an integer.
        ValueError: If ``step`` is zero.
    """

    __slots__ = ("_start", "_stop", "_step")

    @overload
    def __init__(self, stop: int, /) -> None: ...
    @overload
    def __init__(self, start: int, stop: int, step: int = 1, /) -> None: ...
    def __init__(self, start: int, stop: Any = _MISSING, step: int = 1, /) -> None:
        if stop is _MISSING:
            start, stop = 0, start
        for name, value in (("start", start), ("stop", stop), ("step", step)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"Range {name} must be an integer, not {type(value).__name__}"
                )
        if step == 0:
            raise ValueError("Range step must not be zero")
        self._start = start
        self._stop = stop
        self._step = step

    @property
    def start(self) -> int:
        """First value produced (if the range is not empty)."""
        return self._start

    @property
    def stop(self) -> int:
        """Exclusive bound."""
        return self._stop

    @property
    def step(self) -> int:
        """Increment between consecutive values; never zero."""
        return self._step

    def __iter__(self) -> Iterator[int]:
        current, stop, step = self._start, self._stop, self._step
        if step > 0:
            while current < stop:
                yield current
                current += step
        else:
            while current > stop:
                yield current
                current += step

    def __len__(self) -> int:
        if self._step > 0:
            span = self._stop - self._start
        else:
            span = self._start - self._stop
        if span <= 0:
            return 0
        return -(-span // abs(self._step))

    def __contains__(self, value: object) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        offset = value - self._start
        if offset % self._step:
            return False
        return 0 <= offset // self._step < len(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Range({self._start}, {self._stop}, {self._step})"

    def _key(self) -> tuple[int, ...]:
        # Two ranges are equal when they produce the same values.
        length = len(self)
        if length == 0:
            return ()
        if length == 1:
            return (self._start,)
        return (self._start, length, self._step)
