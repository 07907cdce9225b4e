"""ASCII encoder: passes 7-bit characters through unchanged."""

from .base import Encoder, EncodingError


def _check_ascii(data: bytes, message: str) -> bytes:
    for byte in data:
        if byte > 127:
            raise EncodingError(
                message, ValueError(f"invalid ASCII char: {chr(byte)!r}")
            )
    return data


class AsciiEncoder(Encoder):
    """Encoder for 7-bit ASCII text."""

    def encode(self, data: bytes) -> bytes:
        return _check_ascii(bytes(data), "failed to perform ASCII encoding")

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        if length < 0:
            raise EncodingError(f"invalid length: {length}")
        if len(data) < length:
            raise EncodingError(
                f"not enough data to decode. expected len {length}, got {len(data)}"
            )
        out = _check_ascii(bytes(data[:length]), "failed to perform ASCII decoding")
        return out, length


ASCII = AsciiEncoder()