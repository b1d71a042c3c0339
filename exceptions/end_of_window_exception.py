class EndOfWindowException(EOFError):
    """Raised when a seek target falls outside the window of a BoundedSeekableReader."""

    def __init__(self, target: int, lower: int, upper: int):
        self.target = target
        self.lower = lower
        self.upper = upper
        super().__init__(f"cannot seek to {target}, outside window range [{lower}, {upper}]")
