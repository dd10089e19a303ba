"""Exceptions raised by the filesize package."""


class FilesizeError(Exception):
    """Base class for filesize errors."""

    pass


class InvalidFormat(FilesizeError, ValueError):
    """Raised when a string cannot be parsed as a file size."""

    def __init__(self, text: str, message: str | None = None):
        """Initialize the error.

        Args:
            text: The string that failed to parse
            message: Optional error message overriding the default
        """
        super().__init__(message or f"Unparseable filesize: {text!r}")
        self.text = text
