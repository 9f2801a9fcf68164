"""Combinators over plain ``Optional[T]`` values.

Here absence is ``None`` and a present value is the value itself, with no
wrapper. This suits code that already models optional fields as
``Optional[T]``, at one cost: a ``T`` that legitimately contains ``None`` is
indistinguishable from absence. ``map`` and ``chain`` collapse such results
into ``absent`` silently. Use :mod:`maybepy.option` when that matters.
"""
from __future__ import annotations
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Nullable = Optional

absent: None = None


def present(value: T) -> Optional[T]:
    return value


def is_present(m: Optional[Any]) -> bool:
    return m is not None


def is_absent(m: Optional[Any]) -> bool:
    return m is None


def value_or(fallback: T, m: Optional[T]) -> T:
    return fallback if m is None else m


def map(f: Callable[[T], U], m: Optional[T]) -> Optional[U]:
    return None if m is None else f(m)


def chain(f: Callable[[T], Optional[U]], m: Optional[T]) -> Optional[U]:
    # same as map: f already returns an optional, there is nothing to wrap
    return None if m is None else f(m)


def and_(left: Optional[Any], right: Optional[U]) -> Optional[U]:
    return None if left is None else right


def or_(left: Optional[T], right: Optional[T]) -> Optional[T]:
    return right if left is None else left
