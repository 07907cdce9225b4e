"""BER-TLV encoding of EMV chip data elements."""

from collections.abc import Iterable, Mapping
from typing import Union

from ..encoding.base import EncodingError
from ..encoding.bertlv import BER_TLV_TAG


class TLVError(EncodingError):
    """Raised when BER-TLV data is malformed."""


def decode_ber_length(data: bytes) -> tuple[int, int]:
    """Read a BER length from the start of ``data``.

    Returns the length and the number of bytes it took.
    """
    data = bytes(data)
    if not data:
        raise TLVError("not enough data to read length")
    first = data[0]
    if first < 0x80:
        return first, 1
    count = first & 0x7F
    if count == 0:
        raise TLVError("indefinite length form is not supported")
    if len(data) < 1 + count:
        raise TLVError(
            f"not enough data to read length: expected {count} bytes, "
            f"got {len(data) - 1}"
        )
    return int.from_bytes(data[1 : 1 + count], "big"), 1 + count


def encode_ber_length(length: int) -> bytes:
    """Return the BER encoding of ``length``."""
    if length < 0:
        raise TLVError(f"length should be positive, got {length}")
    if length < 0x80:
        return bytes([length])
    body = length.to_bytes((length.bit_length() + 7) // 8, "big")
    if len(body) > 0x7E:
        raise TLVError(f"length {length} is too large to encode")
    return bytes([0x80 | len(body)]) + body


def _encode_tag(tag: str) -> bytes:
    try:
        raw = BER_TLV_TAG.encode(tag.encode("ascii"))
        _, read = BER_TLV_TAG.decode(raw, 0)
    except (UnicodeEncodeError, EncodingError) as exc:
        raise TLVError(f"malformed tag {tag!r}", exc) from exc
    if read != len(raw):
        raise TLVError(f"malformed tag {tag!r}")
    return raw


def decode_tlv(data: bytes) -> list[tuple[str, bytes]]:
    """Split ``data`` into (tag, value) pairs, in wire order.

    Tags are upper-case hex strings such as ``"9F02"``.
    """
    data = bytes(data)
    items = []
    offset = 0
    while offset < len(data):
        try:
            tag, read = BER_TLV_TAG.decode(data[offset:], 0)
        except EncodingError as exc:
            raise TLVError(f"failed to decode tag at offset {offset}", exc) from exc
        offset += read
        length, read = decode_ber_length(data[offset:])
        offset += read
        end = offset + length
        if end > len(data):
            raise TLVError(
                f"not enough data for tag {tag.decode('ascii')}: "
                f"expected {length} bytes, got {len(data) - offset}"
            )
        items.append((tag.decode("ascii"), data[offset:end]))
        offset = end
    return items


def encode_tlv(
    items: Union[Mapping[str, bytes], Iterable[tuple[str, bytes]]],
) -> bytes:
    """Pack (tag, value) pairs, or a tag-to-value mapping, in the given order."""
    pairs = items.items() if isinstance(items, Mapping) else items
    parts = []
    for tag, value in pairs:
        value = bytes(value)
        parts.append(_encode_tag(tag))
        parts.append(encode_ber_length(len(value)))
        parts.append(value)
    return b"".join(parts)