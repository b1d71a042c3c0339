import io
from enum import IntEnum


class SeekOrigin(IntEnum):
    START = io.SEEK_SET
    CURRENT = io.SEEK_CUR
    END = io.SEEK_END
