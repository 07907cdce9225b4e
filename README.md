# iso8583

Building blocks for working with ISO 8583 card-payment messages:

- field encoders for the wire formats found in ISO 8583 specifications:
  ASCII, binary, hex, BCD (right and left aligned), EBCDIC, EBCDIC code
  page 1047 and BER-TLV tags;
- the ISO 8583:1987 message type indicators;
- a dotted, aligned text report of a message's MTI, bitmap and fields;
- EMV ICC data (field 55): BER-TLV reading and writing, a catalogue of EMV
  tags, and a dataclass with one attribute per tag.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Encoders

Each encoder class has two methods:

- `encode(data)` takes bytes and returns the encoded bytes;
- `decode(data, length)` reads `length` units from the start of `data` and
  returns a tuple of the decoded bytes and the number of input bytes read.

Bad input raises `EncodingError` (`iso8583.encoding.base`), a `ValueError`
whose message is short and safe to show; the underlying detail is kept in its
`cause` attribute and as `__cause__`. `Encoder` in the same module is the
abstract base class all encoders derive from.

| Module | Class | Ready-made instance |
| --- | --- | --- |
| `iso8583.encoding.ascii` | `AsciiEncoder` | `ASCII` |
| `iso8583.encoding.binary` | `BinaryEncoder` | `BINARY` |
| `iso8583.encoding.hex` | `BytesToAsciiHexEncoder` | `BYTES_TO_ASCII_HEX` |
| `iso8583.encoding.hex` | `AsciiHexToBytesEncoder` | `ASCII_HEX_TO_BYTES` |
| `iso8583.encoding.bertlv` | `BerTLVTagEncoder` | `BER_TLV_TAG` |
| `iso8583.encoding.bcd` | `BCDEncoder`, `LeftBCDEncoder` | `BCD`, `LBCD` |
| `iso8583.encoding.ebcdic` | `EbcdicEncoder`, `Ebcdic1047Encoder` | `EBCDIC`, `EBCDIC1047` |

```python
from iso8583.encoding.ascii import ASCII
from iso8583.encoding.bcd import BCD, LBCD
from iso8583.encoding.hex import ASCII_HEX_TO_BYTES, BYTES_TO_ASCII_HEX
from iso8583.encoding.bertlv import BER_TLV_TAG

ASCII.encode(b"hello")                   # b"hello"
ASCII.decode(b"hello", 5)                # (b"hello", 5)

BCD.encode(b"123")                       # b"\x01\x23"  (leading zero added)
LBCD.encode(b"123")                      # b"\x12\x30"  (trailing zero added)
BCD.decode(b"\x01\x23", 3)               # (b"123", 2)

BYTES_TO_ASCII_HEX.encode(b"\xaa\xbb")   # b"AABB"
ASCII_HEX_TO_BYTES.encode(b"aabb")       # b"\xaa\xbb"

BER_TLV_TAG.decode(b"\x9f\x02\x06", 0)   # (b"9F02", 2)
```

Notes on particular encoders:

- `AsciiEncoder` rejects bytes above 127.
- `BytesToAsciiHexEncoder.decode` counts `length` in decoded bytes (two hex
  characters each); `AsciiHexToBytesEncoder.decode` counts bytes read and
  returns upper-case hex digits.
- `BerTLVTagEncoder.decode` ignores `length`: a tag carries its own length.
- The BCD encoders raise `EncodingError` with a `BadInputError` cause when
  encoding anything but digits, and with a `BadBCDError` cause when a packed
  nibble is not a decimal digit.
- `EbcdicEncoder` translates byte for byte with a fixed table;
  `Ebcdic1047Encoder` uses IBM code page 1047 and takes and returns UTF-8 text.

## Message type indicators

`iso8583.constants.MessageTypeIndicator` is a string enum of the ISO 8583:1987
message types, for example `AUTHORIZATION_REQUEST` (`"0100"`) and
`NETWORK_MANAGEMENT_REQUEST` (`"0800"`). Its members print as their code.

## Describing a message

`iso8583.describe.describe(out, mti, bitmap, fields, spec_name=None, filters=None)`
writes a report to a text stream:

- a heading, `"<spec_name> Message:"` (`"ISO 8583"` when no name is given);
- the MTI, the bitmap in upper-case hex, and the bitmap as bits;
- each field in `fields`, a mapping of field number to
  `(description, value)`, in field-number order. Field 1 (the bitmap) is
  skipped. `filters` maps field numbers to functions that rewrite the shown
  value, for example to mask it.

Labels are padded with dots so the values line up. A field whose value is
given as an exception is left out of the listing; such errors are written
under an `Unpacking Errors:` heading and a `DescribeError` is raised after
the report has been written.

```python
import io
from iso8583.describe import describe

out = io.StringIO()
describe(
    out,
    "0100",
    bytes.fromhex("4000000000000000"),
    {0: ("Message Type Indicator", "0100"), 2: ("Primary Account Number", "[card-number]")},
)
```

`format_bitmap_bits(bitmap)` returns the bitmap as space-separated groups of
eight bits.

## EMV ICC data

`iso8583.emv.tlv` reads and writes BER-TLV data:

- `decode_tlv(data)` returns a list of `(tag, value)` pairs in wire order,
  with tags as upper-case hex strings such as `"9F02"`;
- `encode_tlv(items)` packs pairs, or a tag-to-value mapping, in the order
  given;
- `decode_ber_length(data)` and `encode_ber_length(length)` handle BER
  lengths (short and long definite forms).

Malformed input raises `TLVError`, a subclass of `EncodingError`.

`iso8583.emv.tags` holds the catalogue of known tags in `TAGS`. `tag_spec(tag)`
returns a tag's `TagSpec` (tag, description and `TagKind`), accepting hex
digits in either case and raising `KeyError` for unknown tags.
`TagSpec.decode_value(raw)` turns wire bytes into the value: upper-case hex
text for `STRING` tags, and for `NUMERIC` tags (9F02, 9F03, 9F36) the hex
digits read as a decimal integer. `TagSpec.encode_value(value)` does the
reverse.

`iso8583.emv.data` puts it together:

- `EmvData` is a dataclass with one attribute per known tag, all `None` until
  set. `EmvData.from_tags(mapping)` builds one from tag to value;
  `to_tags()` returns the set elements as tag to value, ordered by tag number.
- `unpack_icc_data(raw)` reads a three-digit ASCII length followed by
  BER-TLV elements; an unknown tag raises `TLVError`.
- `pack_icc_data(data)` writes the same form, raising `TLVError` when the
  elements take more than 999 bytes.

```python
from iso8583.emv.data import EmvData, pack_icc_data, unpack_icc_data

data = EmvData(amount_authorised_numeric=6300, transaction_date="171120")
raw = pack_icc_data(data)
again = unpack_icc_data(raw)
again.to_tags()   # {"9A": "171120", "9F02": 6300}
```

## What the package does not do

There is no message model here: no message specifications, no bitmap or
field types, and no packing or unpacking of whole ISO 8583 messages.
`describe` takes the MTI, bitmap and field values already in hand. There is
no length-prefix or padding machinery beyond the three-digit prefix of ICC
data, and no command-line tool.