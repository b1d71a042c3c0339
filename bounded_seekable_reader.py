import io
import logging
from typing import Optional

from enums import SeekOrigin
from exceptions import EndOfWindowException, UnsupportedSeekException


class BoundedSeekableReader(io.RawIOBase):
    """
    A stream wrapper that limits reads to a window of another stream,
    starting at the source stream's position when the wrapper is created.

    Seek offsets are *identical* to those of the wrapped stream, so
    ``seek(0)`` on a window that does not start at zero is out of range.
    """

    def __init__(self, inner: io.IOBase, limit: int, logger: Optional[logging.Logger] = None):
        """
        Initialize a BoundedSeekableReader.

        Args:
            inner: The source stream to wrap; must support read and seek
            limit: Maximum number of bytes readable through the window
            logger: Logger instance for debugging

        Raises:
            TypeError: If limit is not an integer
            ValueError: If limit is negative
            OSError: If the current position of the source stream cannot be queried
        """
        if not isinstance(limit, int) or isinstance(limit, bool):
            raise TypeError("limit must be int")
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        super().__init__()
        self.log = logger or logging.getLogger(__name__)
        self._inner = inner
        self._start = inner.seek(0, io.SEEK_CUR)
        self._limit = limit
        self._current = 0  # bytes from start

        self.log.debug(f"Opened window of {limit} bytes at offset {self._start}")

    @property
    def start(self) -> int:
        """Absolute offset of the window in the source stream."""
        return self._start

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def remaining(self) -> int:
        """Bytes left before the window is exhausted."""
        return self._limit - self._current

    def readable(self) -> bool:
        self._checkClosed()
        return True

    def seekable(self) -> bool:
        self._checkClosed()
        return True

    def writable(self) -> bool:
        return False

    def readinto(self, buffer) -> Optional[int]:
        """
        Read up to len(buffer) bytes into buffer, never past the end of the window.

        Args:
            buffer: Writable bytes-like object

        Returns:
            Number of bytes read, 0 once the window is exhausted
        """
        self._checkClosed()
        rem = self._limit - self._current
        # Never call into the source at the end of the window, it may block
        if rem == 0:
            return 0

        view = memoryview(buffer).cast("B")
        max_bytes = min(len(view), rem)
        if hasattr(self._inner, "readinto"):
            n = self._inner.readinto(view[:max_bytes])
        else:
            data = self._inner.read(max_bytes)
            n = None if data is None else len(data)
            if n:
                view[:n] = data
        if n is None:
            return None
        self._current += n
        return n

    def seek(self, offset: int, whence: int = SeekOrigin.START) -> int:
        """
        Seek to a position inside the window.

        Args:
            offset: Absolute offset for SeekOrigin.START, signed delta for SeekOrigin.CURRENT
            whence: How to interpret the offset (SeekOrigin.START or SeekOrigin.CURRENT)

        Returns:
            The new absolute position reported by the source stream

        Raises:
            EndOfWindowException: If the target lies outside the window
            UnsupportedSeekException: If whence is SeekOrigin.END
        """
        self._checkClosed()
        if whence == SeekOrigin.START:
            upper = self._start + self._current
            if offset < self._start or offset > upper:
                self.log.debug(f"Rejected seek to {offset}, outside [{self._start}, {upper}]")
                raise EndOfWindowException(offset, self._start, upper)
            position = self._inner.seek(offset, io.SEEK_SET)
            self._current = offset - self._start
            return position
        elif whence == SeekOrigin.CURRENT:
            dest = self._current + offset
            if dest < 0 or dest > self._limit:
                self.log.debug(f"Rejected seek by {offset}, {dest} outside [0, {self._limit}]")
                raise EndOfWindowException(self._start + dest, self._start, self._start + self._limit)
            position = self._inner.seek(offset, io.SEEK_CUR)
            self._current = dest
            return position
        elif whence == SeekOrigin.END:
            raise UnsupportedSeekException("seeking from the end of a window would be ambiguous")
        else:
            raise ValueError(f"Invalid whence value: {whence}")

    def tell(self) -> int:
        """Return the current absolute position in the source stream."""
        return self.seek(0, SeekOrigin.CURRENT)

    def close(self) -> None:
        """Close the window (but not the underlying stream)."""
        super().close()

    def __repr__(self) -> str:
        return f"BoundedSeekableReader(start={self._start}, limit={self._limit}, current={self._current})"
