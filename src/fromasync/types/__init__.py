from fromasync.types.errors import SourceTooLong
from fromasync.types.missing import MISSING, Missing, is_missing

__all__ = (
    "MISSING",
    "Missing",
    "SourceTooLong",
    "is_missing",
)
