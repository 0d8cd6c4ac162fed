from fromasync.helpers import (
    MAX_SAFE_INDEX,
    Materializable,
    accepts_elements,
    is_constructible,
    make_container,
    materialize,
)
from fromasync.types import (
    MISSING,
    Missing,
    SourceTooLong,
    is_missing,
)
from fromasync.utils import (
    AwaitingIterator,
    getenv_bool,
    pull,
    setup_logging,
)

__all__ = (
    "MAX_SAFE_INDEX",
    "MISSING",
    "AwaitingIterator",
    "Materializable",
    "Missing",
    "SourceTooLong",
    "accepts_elements",
    "getenv_bool",
    "is_constructible",
    "is_missing",
    "make_container",
    "materialize",
    "pull",
    "setup_logging",
)
