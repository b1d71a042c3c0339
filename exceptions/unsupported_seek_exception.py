from .end_of_window_exception import EndOfWindowException


class UnsupportedSeekException(EndOfWindowException):
    """Raised for seek requests a window cannot answer, such as seeking from its end."""

    def __init__(self, message: str):
        self.target = None
        self.lower = None
        self.upper = None
        EOFError.__init__(self, message)
