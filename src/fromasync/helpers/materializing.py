from collections.abc import (
    AsyncIterable,
    AsyncIterator,
    Awaitable,
    Callable,
    Iterable,
    MutableSequence,
)
from inspect import isawaitable
from logging import Logger, getLogger
from typing import Any, Final, Self, overload

from fromasync.helpers.constructing import make_container
from fromasync.types.errors import SourceTooLong
from fromasync.types.missing import MISSING
from fromasync.utils.pulling import pull

__all__ = (
    "MAX_SAFE_INDEX",
    "Materializable",
    "materialize",
)

MAX_SAFE_INDEX: Final[int] = 2**53 - 1

_logger: Logger = getLogger(__name__)


@overload
async def materialize[Element](
    source: AsyncIterable[Element] | Iterable[Element | Awaitable[Element]],
    /,
) -> list[Element]: ...


@overload
async def materialize[Element, Result](
    source: AsyncIterable[Element] | Iterable[Element | Awaitable[Element]],
    transform: Callable[[Element, int, Any], Result | Awaitable[Result]],
    context: Any = MISSING,
    /,
) -> list[Result]: ...


@overload
async def materialize[Element, Result](
    source: AsyncIterable[Element] | Iterable[Element | Awaitable[Element]],
    transform: Callable[[Element, int, Any], Result | Awaitable[Result]] | None = None,
    context: Any = MISSING,
    /,
    *,
    into: Any,
) -> Any: ...


async def materialize[Element, Result](
    source: AsyncIterable[Element] | Iterable[Element | Awaitable[Element]],
    transform: Callable[[Element, int, Any], Result | Awaitable[Result]] | None = None,
    context: Any = MISSING,
    /,
    *,
    into: Any = MISSING,
) -> Any:
    """
    Collect all elements of a synchronous or asynchronous source into a container.

    Elements are pulled one by one in source order, each optionally passed
    through the transform, and placed in the result container. Nothing runs
    concurrently, every pull and every transform call is awaited before the
    next element is requested. The first exception raised anywhere aborts the
    whole operation and no partial result is returned.

    Parameters
    ----------
    source : AsyncIterable[Element] | Iterable[Element | Awaitable[Element]]
        Source of elements. Asynchronous iterables are drained asynchronously,
        values of synchronous iterables are awaited when awaitable.
    transform : Callable[[Element, int, Any], Result | Awaitable[Result]] | None
        Optional mapping called with element, its index and the context.
        Awaitable results are awaited.
    context : Any
        Binding passed as the third transform argument, MISSING by default.
    into : Any
        Type used to build the result. When it is a class constructible
        without arguments its new instance is filled, a new list is used
        otherwise.

    Returns
    -------
    Any
        Filled container, a list unless a constructible ``into`` was provided.

    Raises
    ------
    SourceTooLong
        If the source produced more elements than MAX_SAFE_INDEX allows.
    Exception
        Any exception raised by the container construction, the source or
        the transform is propagated as is.

    Examples
    --------
    >>> await materialize(range(3))
    [0, 1, 2]
    """
    container: Any = make_container(into)
    elements: AsyncIterator[Element] = pull(source)
    _logger.debug(
        "Materializing %s into %s",
        type(source).__name__,
        type(container).__name__,
    )

    index: int = 0
    async for element in elements:
        if index > MAX_SAFE_INDEX:
            raise SourceTooLong(f"Source exceeded {MAX_SAFE_INDEX} elements")

        value: Any
        if transform is None:
            value = element

        else:
            value = transform(element, index, context)
            if isawaitable(value):
                value = await value

        _place(container, index, value)
        index += 1

    _finalize(container, index)
    _logger.debug(
        "Materialized %d elements into %s",
        index,
        type(container).__name__,
    )
    return container


def _place(
    container: Any,
    index: int,
    value: Any,
) -> None:
    if isinstance(container, MutableSequence):
        if index < len(container):
            container[index] = value

        else:
            container.append(value)

    else:  # array-like
        container[index] = value


def _finalize(
    container: Any,
    length: int,
) -> None:
    if isinstance(container, MutableSequence):
        while len(container) > length:
            del container[-1]

    else:
        container.length = length


class Materializable:
    """
    Mixin adding materialize classmethod returning instances of the class.

    Classes constructible without arguments receive their own instance filled
    with source elements, any other class receives a plain list.

    Examples
    --------
    >>> class Batch(list[int], Materializable): ...
    >>> await Batch.materialize(range(3))
    [0, 1, 2]
    """

    @classmethod
    async def materialize[Element, Result](
        cls,
        source: AsyncIterable[Element] | Iterable[Element | Awaitable[Element]],
        transform: Callable[[Element, int, Any], Result | Awaitable[Result]] | None = None,
        context: Any = MISSING,
        /,
    ) -> Self | list[Any]:
        return await materialize(
            source,
            transform,
            context,
            into=cls,
        )
