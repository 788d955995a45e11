from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Generic, TypeVar

from .sequence import STOP, SequenceView, Stop

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")
E = TypeVar("E")

_NO_VALUE: Final[Any] = object()


@dataclass(frozen=True, slots=True)
class Present(SequenceView[T]):
    value: T

    @property
    def present(self) -> bool:
        return True

    def _elements(self) -> tuple[T, ...]:
        return (self.value,)

    def builder(self) -> OptionBuilder[T]:
        return OptionBuilder(self)


@dataclass(frozen=True, slots=True)
class Absent(SequenceView[Any]):
    @property
    def present(self) -> bool:
        return False

    def _elements(self) -> tuple[Any, ...]:
        return ()

    def builder(self) -> OptionBuilder[Any]:
        return OptionBuilder(self)


Option = Present[T] | Absent


@dataclass(frozen=True, slots=True)
class OptionBuilder(Generic[T]):
    """Accumulator that materialises a fold into an ``Option``.

    Every pushed item becomes the new ``Present``; the last one wins. A concrete
    upstream failure collapses the accumulator to ``Absent`` and halts it.
    """

    acc: Option[T]
    halted: bool = False

    def push(self, item: T) -> OptionBuilder[T]:
        if self.halted:
            return self
        return OptionBuilder(Present(item))

    def fail(self, error: object) -> OptionBuilder[T]:
        if self.halted:
            return self
        return OptionBuilder(Absent(), halted=True)

    def finish(self) -> Option[T]:
        return self.acc

    def abort(self) -> Stop:
        return STOP


def new(value: T = _NO_VALUE) -> Option[T]:
    if value is _NO_VALUE:
        return Absent()
    return Present(value)


def present(value: T) -> Option[T]:
    return Present(value)


def absent() -> Option[Any]:
    return Absent()


def or_else(first: Option[T], second: Option[T]) -> Option[T]:
    """Return ``first`` if it holds a value, otherwise ``second``."""
    if isinstance(first, Present):
        return first
    return second


def or_else_lazy(first: Option[T], second: Callable[[], Option[T]]) -> Option[T]:
    if isinstance(first, Present):
        return first
    return second()


def to_result(option: Option[T], error: E) -> Result[T, E]:
    """``Present(v)`` becomes ``Success(v)``; ``Absent`` becomes ``Failure(error)``."""
    from .result import Failure, Success  # local import to avoid cycles at load

    if isinstance(option, Present):
        return Success(option.value)
    return Failure(error)


to_right = to_result
