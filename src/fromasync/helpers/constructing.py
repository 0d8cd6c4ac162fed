from collections.abc import MutableSequence
from inspect import Signature, isabstract, signature
from typing import Any

from fromasync.types.missing import is_missing

__all__ = (
    "accepts_elements",
    "is_constructible",
    "make_container",
)


def is_constructible(
    candidate: Any,
    /,
) -> bool:
    """
    Check if given value can be used as a zero-argument constructor.

    The check never instantiates the candidate. Instead its call signature is
    bound without any arguments, so side effects of ``__new__`` or ``__init__``
    are not triggered by the check itself.

    Parameters
    ----------
    candidate : Any
        Value to check, None and MISSING are allowed.

    Returns
    -------
    bool
        True if the candidate is a concrete class accepting zero arguments,
        False otherwise. Classes without an introspectable signature
        (i.e. some builtins) are considered constructible.
    """
    if candidate is None or is_missing(candidate):
        return False

    if not isinstance(candidate, type) or isabstract(candidate):
        return False

    construction: Signature
    try:
        construction = signature(candidate)

    except (TypeError, ValueError):
        return True  # builtin without signature

    try:
        construction.bind()

    except TypeError:
        return False

    return True


def accepts_elements(
    candidate: type[Any],
    /,
) -> bool:
    """
    Check if instances of given class can hold materialized elements.

    Mutable sequences are filled in order. Any other class has to be
    array-like, declaring a ``length`` attribute on the class and
    supporting item assignment.
    """
    if issubclass(candidate, MutableSequence):
        return True

    return hasattr(candidate, "length") and hasattr(candidate, "__setitem__")


def make_container(
    into: Any,
    /,
) -> Any:
    """
    Prepare an empty result container.

    Parameters
    ----------
    into : Any
        Invocation context. When it is a constructible class able to hold
        elements it is called without arguments and any exception raised
        by that call propagates.

    Returns
    -------
    Any
        New instance of ``into`` or a new empty list.
    """
    if is_constructible(into) and accepts_elements(into):
        return into()

    else:
        return []
