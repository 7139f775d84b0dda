"""Option[T]: Some and Nothing variants.

Used wherever a value may legitimately be absent: optional record fields
and collaborators that a :class:`~logbus.BusLogger` may or may not have.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Iterator, NoReturn, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclasses.dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """Option holding a value."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:  # noqa: ARG002
        return self.value

    def map(self, func: Callable[[T], U]) -> "Some[U]":
        return Some(func(self.value))

    def __iter__(self) -> Iterator[T]:
        yield self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Nothing(Generic[T]):
    """Empty option."""

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError("Called unwrap() on Nothing")

    def unwrap_or(self, default: U) -> U:
        return default

    def map(self, func: Callable[[T], U]) -> "Nothing[U]":  # noqa: ARG002
        return NOTHING

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __repr__(self) -> str:
        return "Nothing"


NOTHING: Nothing[Any] = Nothing()

type Option[T] = Some[T] | Nothing[T]


def maybe(value: T | None) -> Option[T]:
    """Lift a nullable value: ``None`` becomes :data:`NOTHING`."""
    if value is None:
        return NOTHING
    return Some(value)


__all__ = ["NOTHING", "Nothing", "Option", "Some", "maybe"]
