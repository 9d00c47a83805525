"""Package-specific exception types."""

from __future__ import annotations


class SourceError(IOError):
    """Raised when the line source cannot be opened or read.

    Malformed markup is never reported through this exception; it only covers
    failures to obtain the text at all.

    Args:
        location: URL that was being read.
        reason: Short description of the failure.
    """

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"Cannot read {self.location}: {self.reason}"
