"""Optional values as a two-variant sum type.

``Some(value)`` marks a present value, ``NOTHING`` is the single absent value.
Since absence is its own object, ``Some(None)`` is a perfectly good present
value and never collapses into ``NOTHING``.

Every operation is available both as a method and as a module-level function
taking the optional value last::

    map(lambda x: x * 2, present(4))   # Some(value=8)
    value_or(0, chain(lookup, absent))  # 0
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    __slots__ = ()

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NOTHING

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return NOTHING

    chain = flat_map

    def value_or(self, fallback: U) -> T | U:
        return self.value if self.is_some() else fallback  # type: ignore[attr-defined]

    get_or_else = value_or

    def and_(self, other: "Option[U]") -> "Option[U]":
        return other if self.is_some() else NOTHING

    def or_(self, other: "Option[T]") -> "Option[T]":
        return self if self.is_some() else other

    def to_nullable(self) -> Optional[T]:
        return self.value if self.is_some() else None  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True


class _Nothing(Option[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "Nothing"
    def is_some(self) -> bool: return False
    def __reduce__(self) -> str: return "NOTHING"


NOTHING: Option[Any] = _Nothing()
absent: Option[Any] = NOTHING


def present(value: T) -> Option[T]:
    return Some(value)


def is_present(m: Option[Any]) -> bool:
    return m.is_some()


def is_absent(m: Option[Any]) -> bool:
    return m.is_none()


def value_or(fallback: U, m: Option[T]) -> T | U:
    """Turn ``m`` into a plain value, using ``fallback`` when it is absent."""
    return m.value_or(fallback)


def map(f: Callable[[T], U], m: Option[T]) -> Option[U]:
    """Apply ``f`` to the held value. ``f`` is never called on ``NOTHING``."""
    return m.map(f)


def chain(f: Callable[[T], Option[U]], m: Option[T]) -> Option[U]:
    """Sequence a computation that may itself produce ``NOTHING``.

    The result of ``f`` is returned as is, so nested lookups stay flat::

        chain(lambda user: user.params, present(user))
    """
    return m.flat_map(f)


def and_(left: Option[Any], right: Option[U]) -> Option[U]:
    return left.and_(right)


def or_(left: Option[T], right: Option[T]) -> Option[T]:
    return left.or_(right)


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NOTHING


def to_nullable(m: Option[T]) -> Optional[T]:
    return m.to_nullable()
