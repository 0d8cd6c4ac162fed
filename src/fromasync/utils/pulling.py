from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Iterable, Iterator
from inspect import isawaitable
from typing import cast

__all__ = (
    "AwaitingIterator",
    "pull",
)


class AwaitingIterator[Element](AsyncIterator[Element]):
    """
    Asynchronous view over a synchronous iterator of values or awaitables.

    Each value produced by the wrapped iterator is awaited when it is awaitable
    and delivered as is otherwise. Iteration is strictly sequential, the next
    value is pulled only after the previous one was resolved. The wrapped
    iterator is never closed by this adapter.
    """

    __slots__ = ("_iterator",)

    def __init__(
        self,
        iterator: Iterator[Element | Awaitable[Element]],
        /,
    ) -> None:
        self._iterator: Iterator[Element | Awaitable[Element]] = iterator

    def __aiter__(self) -> AsyncIterator[Element]:
        return self

    async def __anext__(self) -> Element:
        try:
            element: Element | Awaitable[Element] = next(self._iterator)

        except StopIteration:
            raise StopAsyncIteration from None

        if isawaitable(element):
            return await element

        return cast(Element, element)


def pull[Element](
    source: AsyncIterable[Element] | Iterable[Element | Awaitable[Element]],
    /,
) -> AsyncIterator[Element]:
    """
    Select the pulling strategy for given source.

    Parameters
    ----------
    source : AsyncIterable[Element] | Iterable[Element | Awaitable[Element]]
        Source of elements. Anything implementing ``__aiter__`` is iterated
        asynchronously, any other value is iterated synchronously with its
        awaitable values resolved one by one.

    Returns
    -------
    AsyncIterator[Element]
        Iterator delivering resolved elements in source order.

    Raises
    ------
    TypeError
        If the source is not iterable at all.
    """
    if isinstance(source, AsyncIterable):
        return cast(AsyncIterable[Element], source).__aiter__()

    else:
        return AwaitingIterator(iter(source))
