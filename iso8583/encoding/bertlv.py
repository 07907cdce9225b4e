"""Encoder for BER-TLV tags as used in EMV chip data."""

from .base import Encoder, EncodingError
from .hex import ASCII_HEX_TO_BYTES


class BerTLVTagEncoder(Encoder):
    """Converts between ASCII hex tag names and BER-TLV tag bytes."""

    def encode(self, data: bytes) -> bytes:
        """Turn ASCII hex digits such as ``b"5F2A"`` into tag bytes."""
        return ASCII_HEX_TO_BYTES.encode(data)

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        """Read one tag from the start of ``data``.

        If bits 5-1 of the first byte are all set, subsequent bytes belong
        to the tag until one with its most significant bit unset. The
        ``length`` argument is ignored: a tag carries its own length.
        """
        data = bytes(data)
        if not data:
            raise EncodingError("failed to read byte", EOFError("EOF"))

        tag_len = 1
        more = (data[0] & 0x1F) == 0x1F
        while more:
            if tag_len >= len(data):
                raise EncodingError("failed to decode TLV tag", EOFError("EOF"))
            more = bool(data[tag_len] & 0x80)
            tag_len += 1

        return ASCII_HEX_TO_BYTES.decode(data[:tag_len], tag_len)


BER_TLV_TAG = BerTLVTagEncoder()