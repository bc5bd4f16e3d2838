"""Exceptions raised by the universe core."""


class InvalidDimensions(ValueError):
    """Raised when a universe is constructed with a non-positive size."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        super().__init__(
            f"Universe dimensions must be positive integers, got {width}x{height}"
        )
