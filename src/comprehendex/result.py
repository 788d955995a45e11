from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Generic, TypeVar, cast

import jsonschema

from .errors import Error, OutcomeError
from .schema import load_schema
from .sequence import STOP, Builder, Folder, SequenceView, Stop

if TYPE_CHECKING:
    from .option import Option

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")


class Uninitialized(enum.Enum):
    """Payload of the identity ``Failure`` that seeds an accumulation."""

    UNINITIALIZED = "uninitialized"

    def __repr__(self) -> str:
        return "UNINITIALIZED"


UNINITIALIZED: Final = Uninitialized.UNINITIALIZED


@dataclass(frozen=True, slots=True)
class Success(SequenceView[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def _elements(self) -> tuple[T, ...]:
        return (self.value,)

    def builder(self) -> ResultBuilder[T, Any]:
        return ResultBuilder(self)


@dataclass(frozen=True, slots=True)
class Failure(SequenceView[E]):
    value: E | Uninitialized

    @property
    def ok(self) -> bool:
        return False

    @property
    def uninitialized(self) -> bool:
        return self.value is UNINITIALIZED

    def _elements(self) -> tuple[E | Uninitialized, ...]:
        return (self.value,)

    def builder(self) -> ResultBuilder[Any, E]:
        return ResultBuilder(self)

    def reduce(self, builder: Builder[Any], fun: Folder) -> Builder[Any]:
        # a failure binds nothing: it either poisons the fold or, when
        # uninitialized, leaves the accumulator as it was
        if self.uninitialized:
            return builder
        return builder.fail(self.value)


Result = Success[T] | Failure[E]


@dataclass(frozen=True, slots=True)
class ResultBuilder(Generic[T, E]):
    """Accumulator that materialises a fold into a ``Result``.

    Starting from ``Failure(UNINITIALIZED)`` or a ``Success``, each pushed item
    becomes the new ``Success``. The first concrete failure is absorbing: once
    the accumulator holds one, every later push or failure is ignored.
    """

    acc: Result[T, E]

    @property
    def halted(self) -> bool:
        return isinstance(self.acc, Failure) and not self.acc.uninitialized

    def push(self, item: T) -> ResultBuilder[T, E]:
        if self.halted:
            return self
        return ResultBuilder(Success(item))

    def fail(self, error: E | Uninitialized) -> ResultBuilder[T, E]:
        if self.halted or error is UNINITIALIZED:
            return self
        return ResultBuilder(Failure(error))

    def finish(self) -> Result[T, E]:
        return self.acc

    def abort(self) -> Stop:
        return STOP


def success(value: T) -> Result[T, Any]:
    return Success(value)


def failure(value: E) -> Result[Any, E]:
    return Failure(value)


def new() -> Result[Any, Any]:
    return Failure(UNINITIALIZED)


def from_outcome(outcome: Mapping[str, Any] | tuple[str, Any]) -> Result[Any, Any]:
    """Build a ``Result`` from ``{"ok": value}`` or ``{"error": value}``.

    A ``("ok", value)`` / ``("error", value)`` pair is accepted as shorthand for the
    one-key mapping. Anything else raises :class:`OutcomeError`.
    """
    candidate: object = outcome
    if isinstance(outcome, tuple) and len(outcome) == 2 and isinstance(outcome[0], str):
        candidate = {outcome[0]: outcome[1]}
    elif isinstance(outcome, Mapping):
        candidate = dict(outcome)
    try:
        jsonschema.validate(candidate, load_schema())
    except jsonschema.ValidationError as exc:
        logger.debug("rejected outcome %r: %s", outcome, exc.message)
        err: Error = Error(code="outcome", message=exc.message, path=exc.json_path)
        raise OutcomeError(err) from exc
    tag: str
    value: Any
    ((tag, value),) = cast(dict[str, Any], candidate).items()
    if tag == "ok":
        return Success(value)
    return Failure(value)


def or_else(first: Result[T, E], second: Result[T, E]) -> Result[T, E]:
    """Return ``first`` if it is a ``Success``, otherwise ``second``."""
    if isinstance(first, Success):
        return first
    return second


def or_else_lazy(first: Result[T, E], second: Callable[[], Result[T, E]]) -> Result[T, E]:
    if isinstance(first, Success):
        return first
    return second()


def to_option(result: Result[T, E]) -> Option[T]:
    from .option import Absent, Present  # local import to avoid cycles at load

    if isinstance(result, Success):
        return Present(result.value)
    return Absent()
