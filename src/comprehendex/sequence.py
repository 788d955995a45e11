"""Zero-or-one element sequence view and the builder protocol that folds back into it.

Containers expose two faces. Their value API (construction, equality, ``ok`` /
``present``) lives on the variant classes; the sequence face (``len``, ``in``,
iteration, indexing and slicing, ``reduce``) comes from :class:`SequenceView`.

The reverse direction is a :class:`Builder`: an immutable accumulator that a fold
pushes emitted elements into and finally ``finish``es into a concrete value.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, overload, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@dataclass(frozen=True, slots=True)
class Stop:
    """Opaque marker returned by :meth:`Builder.abort`."""

    def __repr__(self) -> str:
        return "STOP"


STOP: Stop = Stop()


@runtime_checkable
class Builder(Protocol[T_co]):
    @property
    def halted(self) -> bool: ...

    def push(self, item: Any) -> Builder[T_co]: ...

    def fail(self, error: Any) -> Builder[T_co]: ...

    def finish(self) -> T_co: ...

    def abort(self) -> Stop: ...


@runtime_checkable
class Collectable(Protocol[T_co]):
    def builder(self) -> Builder[T_co]: ...


Folder = Callable[[Any, Builder[Any]], Builder[Any]]


class SequenceView(Sequence[T], Generic[T]):
    __slots__ = ()

    @abstractmethod
    def _elements(self) -> tuple[T, ...]:
        raise NotImplementedError

    def __len__(self) -> int:
        return len(self._elements())

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements())

    def __contains__(self, item: object) -> bool:
        return item in self._elements()

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self._elements()[index]

    def reduce(self, builder: Builder[Any], fun: Folder) -> Builder[Any]:
        """Thread each element through ``fun``, stopping once ``builder`` halts."""
        if builder.halted:
            return builder
        element: T
        for element in self._elements():
            builder = fun(element, builder)
            if builder.halted:
                break
        return builder


@dataclass(frozen=True, slots=True)
class ListBuilder(Generic[T]):
    items: tuple[T, ...] = ()
    halted: bool = False

    def push(self, item: T) -> ListBuilder[T]:
        if self.halted:
            return self
        return ListBuilder((*self.items, item))

    def fail(self, error: T) -> ListBuilder[T]:
        # a failing source replaces whatever was collected so far
        if self.halted:
            return self
        return ListBuilder((error,), halted=True)

    def finish(self) -> list[T]:
        return list(self.items)

    def abort(self) -> Stop:
        return STOP
