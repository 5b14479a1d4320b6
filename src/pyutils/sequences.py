"""Sequence helpers.

Every helper accepts any iterable as its "ordered sequence" input and returns
a new ``list``; inputs are never modified or aliased. Empty inputs degrade
gracefully (empty lists, ``False``/``True`` for ``any``/``all``, ``None`` for
``find_index``), with one exception: ``max`` and ``min`` raise
:class:`~pyutils.errors.EmptyContainerError`.

The module reuses builtin names (``map``, ``zip``, ``sum``...).
Import it as a namespace (``from pyutils import sequences as seq``) or import
the names you need explicitly.
"""

# pylint: disable=redefined-builtin

import builtins
import functools
import itertools
import operator
from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence, Sized
from typing import Any, TypeVar

from pyutils.errors import EmptyContainerError

__all__ = [
    "len",
    "enumerate",
    "zip",
    "map",
    "filter",
    "chain",
    "product",
    "accumulate_prefix",
    "chunk",
    "take",
    "drop",
    "any",
    "all",
    "find_index",
    "contains",
    "unique",
    "sorted",
    "reversed",
    "reversed_view",
    "sum",
    "max",
    "min",
    "clamp",
]

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
H = TypeVar("H", bound=Hashable)


# =============================================================================
# Size
# =============================================================================


def len(seq: Iterable[Any]) -> int:
    """Return the number of elements in ``seq``.

    Sized containers report their size directly; other iterables are counted
    by consuming them.
    """
    if isinstance(seq, Sized):
        return builtins.len(seq)
    return builtins.sum(1 for _ in seq)


# =============================================================================
# Transformation
# =============================================================================


def enumerate(seq: Iterable[T]) -> list[tuple[int, T]]:
    """Pair each element with its index, starting at 0."""
    return list(builtins.enumerate(seq))


def zip(a: Iterable[T], b: Iterable[U]) -> list[tuple[T, U]]:
    """Pair elements of ``a`` and ``b`` positionally, truncating to the shorter."""
    return list(builtins.zip(a, b))


def map(f: Callable[[T], R], seq: Iterable[T]) -> list[R]:
    """Apply ``f`` to every element, in order."""
    return [f(x) for x in seq]


def filter(pred: Callable[[T], Any], seq: Iterable[T]) -> list[T]:
    """Keep the elements for which ``pred`` is truthy, in order."""
    return [x for x in seq if pred(x)]


def chain(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Return the elements of ``a`` followed by those of ``b``."""
    return list(itertools.chain(a, b))


def product(a: Iterable[T], b: Iterable[U]) -> list[tuple[T, U]]:
    """Return every ``(x, y)`` pair with ``x`` from ``a`` (outer) and ``y`` from ``b``."""
    return list(itertools.product(a, b))


def accumulate_prefix(seq: Iterable[T]) -> list[T]:
    """Return the running sums of ``seq``.

    The first element is the first input element, each following one adds
    the next input element: ``[1, 2, 3]`` gives ``[1, 3, 6]``.
    """
    return list(itertools.accumulate(seq, operator.add))


def chunk(seq: Iterable[T], size: int) -> list[list[T]]:
    """Split ``seq`` into consecutive groups of ``size`` elements.

    The last group holds the remainder and may be shorter.

    Args:
        seq: Elements to group.
        size: Maximum group length; must be positive.

    Returns:
        The groups, in order. Empty input gives an empty list.

    Raises:
        ValueError: If ``size`` is not positive.
    """
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    iterator = iter(seq)
    return list(iter(lambda: list(itertools.islice(iterator, size)), []))


def take(seq: Iterable[T], n: int) -> list[T]:
    """Return the first ``n`` elements; ``n`` is clamped to ``[0, len(seq)]``."""
    return list(itertools.islice(seq, builtins.max(n, 0)))


def drop(seq: Iterable[T], n: int) -> list[T]:
    """Return all but the first ``n`` elements; ``n`` is clamped to ``[0, len(seq)]``."""
    return list(itertools.islice(seq, builtins.max(n, 0), None))


# =============================================================================
# Queries
# =============================================================================


def any(seq: Iterable[Any]) -> bool:
    """Return True if some element is truthy (False for an empty sequence)."""
    return builtins.any(seq)


def all(seq: Iterable[Any]) -> bool:
    """Return True if every element is truthy (True for an empty sequence)."""
    return builtins.all(seq)


def find_index(seq: Iterable[T], value: T) -> int | None:
    """Return the index of the first element equal to ``value``, or ``None``."""
    for index, item in builtins.enumerate(seq):
        if item == value:
            return index
    return None


def contains(seq: Iterable[T], value: T) -> bool:
    """Return True if some element equals ``value``."""
    return find_index(seq, value) is not None


# =============================================================================
# Reordering
# =============================================================================


def unique(seq: Iterable[H]) -> list[H]:
    """Drop repeated elements, keeping the first occurrence of each.

    Elements must be hashable.
    """
    seen: set[H] = set()
    out: list[H] = []
    for item in seq:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def sorted(seq: Iterable[T], key: Callable[[T], Any] | None = None) -> list[T]:
    """Return an ascending, stable-sorted copy of ``seq``."""
    return builtins.sorted(seq, key=key)  # type: ignore[type-var, arg-type]


def reversed(seq: Iterable[T]) -> list[T]:
    """Return a copy of ``seq`` in reverse order."""
    out = list(seq)
    out.reverse()
    return out


def reversed_view(seq: Sequence[T]) -> Iterator[T]:
    """Iterate ``seq`` back to front without copying it.

    The view reads ``seq`` lazily, so it reflects later changes to a mutable
    sequence.
    """
    return builtins.reversed(seq)


# =============================================================================
# Aggregation
# =============================================================================


def sum(seq: Iterable[Any], init: Any = 0) -> Any:
    """Fold ``seq`` with ``+`` from the left, starting at ``init``.

    Unlike the builtin, strings are accepted: ``sum(["a", "b"], "")`` is
    ``"ab"``.
    """
    return functools.reduce(operator.add, seq, init)


def max(seq: Iterable[T]) -> T:
    """Return the largest element (the first one, on ties).

    Raises:
        EmptyContainerError: If ``seq`` is empty.
    """
    items = list(seq)
    if not items:
        raise EmptyContainerError("max")
    return builtins.max(items)  # type: ignore[type-var]


def min(seq: Iterable[T]) -> T:
    """Return the smallest element (the first one, on ties).

    Raises:
        EmptyContainerError: If ``seq`` is empty.
    """
    items = list(seq)
    if not items:
        raise EmptyContainerError("min")
    return builtins.min(items)  # type: ignore[type-var]


def clamp(v: T, lo: T, hi: T) -> T:
    """Bound ``v`` to ``[lo, hi]``.

    Computed as ``min(hi, max(lo, v))``; when ``lo > hi`` the result is ``hi``.
    """
    return builtins.min(hi, builtins.max(lo, v))  # type: ignore[type-var]
