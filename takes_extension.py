import logging
from typing import Optional, Protocol, runtime_checkable

from bounded_seekable_reader import BoundedSeekableReader


@runtime_checkable
class ReadSeekStream(Protocol):
    """Any binary stream supporting sequential reads and seeking."""

    def read(self, size: int = -1) -> bytes: ...

    def seek(self, offset: int, whence: int = 0) -> int: ...


def takes(stream: ReadSeekStream, limit: int, logger: Optional[logging.Logger] = None) -> BoundedSeekableReader:
    """
    Wrap a stream in a window of limit bytes starting at its current position.

    Args:
        stream: The source stream to wrap
        limit: Maximum number of bytes readable through the window
        logger: Logger instance for debugging

    Returns:
        A BoundedSeekableReader over the stream

    Raises:
        OSError: If the current position of the stream cannot be queried
    """
    if not isinstance(stream, ReadSeekStream):
        raise TypeError(f"{type(stream).__name__} does not support both read and seek")
    return BoundedSeekableReader(stream, limit, logger)


class TakesMixin:
    """Adds a ``takes`` method to stream classes that already read and seek."""

    def takes(self, limit: int, logger: Optional[logging.Logger] = None) -> BoundedSeekableReader:
        return takes(self, limit, logger)
