"""Mapping helpers."""

from collections.abc import Mapping
from typing import TypeVar

from pyutils.strings import join, to_str

__all__ = ["get", "join_map"]

K = TypeVar("K")
V = TypeVar("V")


def get(mapping: Mapping[K, V], key: K) -> V | None:
    """Return the value stored under ``key``, or ``None`` when it is missing."""
    return mapping.get(key)


def join_map(mapping: Mapping[K, V], sep: str = ",", eq: str = "=") -> str:
    """Render ``mapping`` as ``"k1=v1,k2=v2"``.

    Entries appear in ascending key order, so the output does not depend on
    insertion order.

    Args:
        mapping: Mapping with orderable keys.
        sep: Separator between entries.
        eq: Separator between a key and its value.

    Returns:
        The rendered entries; ``""`` for an empty mapping.
    """
    parts = [
        to_str(key) + eq + to_str(mapping[key])
        for key in sorted(mapping)  # type: ignore[type-var]
    ]
    return join(parts, sep)
