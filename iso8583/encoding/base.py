"""Common interface and error type for field encoders."""

from abc import ABC, abstractmethod


class EncodingError(ValueError):
    """Raised when data cannot be encoded or decoded.

    The message is safe to show; the underlying cause, if any, is kept
    as ``cause`` and as the exception's ``__cause__``.
    """

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message


class Encoder(ABC):
    """Converts field values to and from their wire representation."""

    @abstractmethod
    def encode(self, data: bytes) -> bytes:
        """Return the wire form of ``data``."""

    @abstractmethod
    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        """Decode ``length`` units from ``data``.

        Returns the decoded bytes and the number of bytes read.
        """