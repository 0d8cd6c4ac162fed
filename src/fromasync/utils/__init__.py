from fromasync.utils.env import getenv_bool
from fromasync.utils.logs import setup_logging
from fromasync.utils.pulling import AwaitingIterator, pull

__all__ = (
    "AwaitingIterator",
    "getenv_bool",
    "pull",
    "setup_logging",
)
