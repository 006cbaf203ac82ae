"""Find-first-or-default helper shared by the derivation steps."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")
D = TypeVar("D")


def lookup(items: Iterable[T], predicate: Callable[[T], bool], default: D) -> T | D:
    """Return the first item satisfying ``predicate``, else ``default``."""
    for item in items:
        if predicate(item):
            return item
    return default
