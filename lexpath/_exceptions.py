class LexPathInvalidInputError(ValueError):
    """Raised when the raw path is empty after trimming. Subclass of ValueError."""
    def __init__(self, raw_path: str) -> None:
        self.raw_path = raw_path
        super().__init__(
            "Path is required: got an empty or whitespace-only string."
        )


class LexPathEnvironmentUnavailableError(OSError):
    """Raised when the working directory needed for a relative path cannot be read.

    Subclass of OSError. The original error is available as ``__cause__``.
    """
    def __init__(self, raw_path: str, reason: str) -> None:
        self.raw_path = raw_path
        super().__init__(f"Unable to resolve current directory: {reason}")
