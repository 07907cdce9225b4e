import pytest

from iso8583.encoding.base import EncodingError
from iso8583.encoding.bertlv import BER_TLV_TAG, BerTLVTagEncoder

CASES = [
    ("PAN (single byte tag)", 1, bytes([0x5A]), b"5A"),
    ("CVM List (single byte tag)", 1, bytes([0x8E]), b"8E"),
    ("Acquirer Identifier (two byte tag)", 2, bytes([0x5F, 0x2A]), b"5F2A"),
    ("BIC (two byte tag)", 2, bytes([0x5F, 0x54]), b"5F54"),
    ("Authorized Amount", 2, bytes([0x9F, 0x02]), b"9F02"),
    ("ATC Register (two byte tag)", 2, bytes([0x9F, 0x13]), b"9F13"),
    ("Imaginary three byte tag", 3, bytes([0x9F, 0xA8, 0x13]), b"9FA813"),
]
IDS = [case[0] for case in CASES]


@pytest.mark.parametrize("desc,num_bytes,hex_tag,ascii_tag", CASES, ids=IDS)
def test_decode(desc, num_bytes, hex_tag, ascii_tag):
    got, read = BER_TLV_TAG.decode(hex_tag, 0)
    assert got == ascii_tag
    assert read == num_bytes


@pytest.mark.parametrize("desc,num_bytes,hex_tag,ascii_tag", CASES, ids=IDS)
def test_encode(desc, num_bytes, hex_tag, ascii_tag):
    assert BerTLVTagEncoder().encode(ascii_tag) == hex_tag


@pytest.mark.parametrize("desc,num_bytes,hex_tag,ascii_tag", CASES, ids=IDS)
def test_decode_ignores_trailing_data(desc, num_bytes, hex_tag, ascii_tag):
    got, read = BER_TLV_TAG.decode(hex_tag + b"\x01\x02\x03", 0)
    assert got == ascii_tag
    assert read == num_bytes


def test_decode_empty():
    with pytest.raises(EncodingError) as info:
        BER_TLV_TAG.decode(b"", 0)
    assert str(info.value) == "failed to read byte"
    assert isinstance(info.value.__cause__, EOFError)


def test_decode_missing_second_byte():
    with pytest.raises(EncodingError) as info:
        BER_TLV_TAG.decode(bytes([0x5F]), 0)
    assert str(info.value) == "failed to decode TLV tag"
    assert isinstance(info.value.__cause__, EOFError)


def test_decode_missing_third_byte():
    with pytest.raises(EncodingError) as info:
        BER_TLV_TAG.decode(bytes([0x5F, 0xA8]), 0)
    assert str(info.value) == "failed to decode TLV tag"
    assert isinstance(info.value.__cause__, EOFError)


def test_encode_invalid_hex():
    with pytest.raises(EncodingError) as info:
        BER_TLV_TAG.encode(b"ZZ")
    assert str(info.value) == "failed to perform hex decoding"