"""Encoders between raw bytes and their ASCII hexadecimal form."""

import binascii

from .base import Encoder, EncodingError


class BytesToAsciiHexEncoder(Encoder):
    """Packs bytes as upper-case ASCII hex digits on the wire.

    ``encode(b"\\x5f\\x2a")`` gives ``b"5F2A"``; ``decode`` reverses it, with
    ``length`` counting decoded bytes (two hex characters each).
    """

    def encode(self, data: bytes) -> bytes:
        return binascii.hexlify(bytes(data)).upper()

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        if length < 0:
            raise EncodingError(f"length should be positive, got {length}")
        read = length * 2
        if read > len(data):
            raise EncodingError("not enough data to read")
        try:
            out = binascii.unhexlify(bytes(data[:read]))
        except binascii.Error as exc:
            raise EncodingError("failed to perform hex decoding", exc) from exc
        return out, read


class AsciiHexToBytesEncoder(Encoder):
    """Packs ASCII hex digits as the raw bytes they spell.

    ``encode(b"AABBCC")`` gives ``b"\\xaa\\xbb\\xcc"``; ``decode`` reverses it,
    with ``length`` counting bytes read from the wire.
    """

    def encode(self, data: bytes) -> bytes:
        try:
            return binascii.unhexlify(bytes(data))
        except binascii.Error as exc:
            raise EncodingError("failed to perform hex decoding", exc) from exc

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        if length < 0:
            raise EncodingError(f"length should be positive, got {length}")
        if length > len(data):
            raise EncodingError("not enough data to read")
        return binascii.hexlify(bytes(data[:length])).upper(), length


BYTES_TO_ASCII_HEX = BytesToAsciiHexEncoder()
ASCII_HEX_TO_BYTES = AsciiHexToBytesEncoder()