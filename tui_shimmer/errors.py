class ShimmerDecodeError(ValueError):
    """Byte input could not be decoded as UTF-8."""

    def __init__(self, message: str, original_error: UnicodeDecodeError):
        super().__init__(message)
        self.original_error = original_error
