"""Binary encoder: raw bytes are copied as they are."""

from .base import Encoder, EncodingError


class BinaryEncoder(Encoder):
    """Encoder that leaves bytes untouched."""

    def encode(self, data: bytes) -> bytes:
        return bytes(data)

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        if length < 0:
            raise EncodingError(f"length should be positive, got {length}")
        if length > len(data):
            raise EncodingError(
                "failed to perform binary decoding: "
                f"length {length} exceeds the data size {len(data)}"
            )
        return bytes(data[:length]), length


BINARY = BinaryEncoder()