"""Drive nested folds over iterables, options and results into a builder.

``comprehend(lambda a, b: a * b, [1, 2, 3], success(2), into=new())`` behaves like
``for a in [1, 2, 3] for b in success(2)`` whose output is collected into a
``Result``: plain values accumulate towards ``Success`` of the last one, while the
first concrete ``Failure`` met along the way ends the fold and is returned as is.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from .sequence import Builder, Collectable, Folder, ListBuilder, SequenceView

logger = logging.getLogger(__name__)

Source = Iterable[Any] | Callable[..., Iterable[Any]]


def builder_for(into: object) -> Builder[Any]:
    if into is None:
        return ListBuilder()
    if isinstance(into, list):
        return ListBuilder(tuple(into))
    if isinstance(into, Collectable):
        return into.builder()
    if isinstance(into, Builder):
        return into
    raise TypeError(f"cannot collect into {type(into).__name__}")


def fold(source: Iterable[Any], builder: Builder[Any], fun: Folder) -> Builder[Any]:
    """Thread ``source`` through ``fun`` without consuming past a halt."""
    if isinstance(source, SequenceView):
        return source.reduce(builder, fun)
    if builder.halted:
        return builder
    item: Any
    for item in source:
        builder = fun(item, builder)
        if builder.halted:
            break
    return builder


def _nest(
    body: Callable[..., Any],
    sources: tuple[Source, ...],
    bound: tuple[Any, ...],
    builder: Builder[Any],
) -> Builder[Any]:
    if not sources:
        return builder.push(body(*bound))
    head: Source = sources[0]
    rest: tuple[Source, ...] = sources[1:]
    # a callable source sees the values bound by the sources before it
    source: Iterable[Any] = head(*bound) if callable(head) else head
    return fold(source, builder, lambda item, acc: _nest(body, rest, (*bound, item), acc))


def comprehend(body: Callable[..., Any], *sources: Source, into: object = None) -> Any:
    builder: Builder[Any] = builder_for(into)
    try:
        builder = _nest(body, sources, (), builder)
    except Exception:
        logger.debug("comprehension aborted: %r", builder.abort())
        raise
    if builder.halted:
        logger.debug("comprehension short-circuited with %r", builder)
    return builder.finish()


def collect(iterable: Iterable[Any], into: object = None) -> Any:
    return comprehend(lambda item: item, iterable, into=into)
