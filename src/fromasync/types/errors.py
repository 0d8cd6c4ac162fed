__all__ = ("SourceTooLong",)


class SourceTooLong(OverflowError):
    """
    Exception raised when a source yields more elements than an index can address.

    Materialization counts consumed elements and refuses to continue once the
    counter passes the largest safely representable index, which protects
    against draining infinite sources into a single container.
    """
