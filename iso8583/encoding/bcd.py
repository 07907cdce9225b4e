"""Packed binary-coded decimal encoders, right- and left-aligned."""

from .base import Encoder, EncodingError

_DIGITS = b"0123456789"


class BadBCDError(ValueError):
    """Raised when a packed byte holds a nibble that is not a decimal digit."""


class BadInputError(ValueError):
    """Raised when text to be packed holds something other than digits."""


def _pack(digits: bytes) -> bytes:
    for char in digits:
        if char not in _DIGITS:
            raise BadInputError(f"bad input: {chr(char)!r} is not a decimal digit")
    return bytes(
        (high - 0x30) << 4 | (low - 0x30)
        for high, low in zip(digits[::2], digits[1::2])
    )


def _unpack(data: bytes) -> bytes:
    out = bytearray()
    for byte in data:
        high, low = divmod(byte, 16)
        if high > 9 or low > 9:
            raise BadBCDError(f"bad BCD byte: 0x{byte:02X}")
        out.append(_DIGITS[high])
        out.append(_DIGITS[low])
    return bytes(out)


class _PackedDecimalEncoder(Encoder):
    """Shared logic; subclasses decide on which side the pad digit goes."""

    def _pad(self, digits: bytes) -> bytes:
        raise NotImplementedError

    def _trim(self, digits: bytes, length: int) -> bytes:
        raise NotImplementedError

    def encode(self, data: bytes) -> bytes:
        digits = bytes(data)
        if len(digits) % 2:
            digits = self._pad(digits)
        try:
            return _pack(digits)
        except BadInputError as exc:
            raise EncodingError("failed to perform BCD encoding", exc) from exc

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        if length < 0:
            raise EncodingError(f"length should be positive, got {length}")
        read = (length + length % 2) // 2
        if len(data) < read:
            raise EncodingError(
                f"not enough data to decode. expected len {read}, got {len(data)}"
            )
        try:
            digits = _unpack(bytes(data[:read]))
        except BadBCDError as exc:
            raise EncodingError("failed to perform BCD decoding", exc) from exc
        return self._trim(digits, length), read


class BCDEncoder(_PackedDecimalEncoder):
    """Right-aligned BCD: an odd number of digits gets a leading zero."""

    def _pad(self, digits: bytes) -> bytes:
        return b"0" + digits

    def _trim(self, digits: bytes, length: int) -> bytes:
        return digits[len(digits) - length:]

    def encode(self, data: bytes) -> bytes:
        return super().encode(data)

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        return super().decode(data, length)


class LeftBCDEncoder(_PackedDecimalEncoder):
    """Left-aligned BCD: an odd number of digits gets a trailing zero."""

    def _pad(self, digits: bytes) -> bytes:
        return digits + b"0"

    def _trim(self, digits: bytes, length: int) -> bytes:
        return digits[:length]

    def encode(self, data: bytes) -> bytes:
        return super().encode(data)

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        return super().decode(data, length)


BCD = BCDEncoder()
LBCD = LeftBCDEncoder()