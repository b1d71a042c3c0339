from .end_of_window_exception import EndOfWindowException
from .unsupported_seek_exception import UnsupportedSeekException

__all__ = [
    'EndOfWindowException',
    'UnsupportedSeekException'
]
