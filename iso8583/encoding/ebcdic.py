"""EBCDIC encoders: a fixed byte translation table and IBM code page 1047."""

from .base import Encoder, EncodingError

# EBCDIC byte -> ASCII/Latin-1 byte, one row of eight per line.
_EBCDIC_TO_ASCII = bytes.fromhex(
    "00010203 9C09867F 978D8E0B 0C0D0E0F"
    "10111213 9D850887 1819928F 1C1D1E1F"
    "80818283 840A171B 88898A8B 8C050607"
    "90911693 94959604 98999A9B 14159E1A"
    "20A0A1A2 A3A4A5A6 A7A85B2E 3C282B21"
    "26A9AAAB ACADAEAF B0B15D24 2A293B5E"
    "2D2FB2B3 B4B5B6B7 B8B97C2C 255F3E3F"
    "BABBBCBD BEBFC0C1 C2603A23 40273D22"
    "C3616263 64656667 6869C4C5 C6C7C8C9"
    "CA6A6B6C 6D6E6F70 7172CBCC CDCECFD0"
    "D17E7374 75767778 797AD2D3 D4D5D6D7"
    "D8D9DADB DCDDDEDF E0E1E2E3 E4E5E6E7"
    "7B414243 44454647 4849E8E9 EAEBECED"
    "7D4A4B4C 4D4E4F50 5152EEEF F0F1F2F3"
    "5C9F5354 55565758 595AF4F5 F6F7F8F9"
    "30313233 34353637 3839FAFB FCFDFEFF"
)


def _invert(table: bytes) -> bytes:
    inverse = bytearray(256)
    for ebcdic, ascii_byte in enumerate(table):
        inverse[ascii_byte] = ebcdic
    return bytes(inverse)


_ASCII_TO_EBCDIC = _invert(_EBCDIC_TO_ASCII)


def _check_length(data: bytes, length: int) -> None:
    if length < 0:
        raise EncodingError(f"length should be positive, got {length}")
    if len(data) < length:
        raise EncodingError(
            f"not enough data to decode. expected len {length}, got {len(data)}"
        )


class EbcdicEncoder(Encoder):
    """Byte-for-byte translation between ASCII and EBCDIC."""

    def encode(self, data: bytes) -> bytes:
        return bytes(data).translate(_ASCII_TO_EBCDIC)

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        _check_length(data, length)
        return bytes(data[:length]).translate(_EBCDIC_TO_ASCII), length


def _code_page_1047() -> str:
    # Code page 1047 shares its layout with code page 037 except for six
    # positions, where the brackets, circumflex, not sign, diaeresis and
    # Y-acute are arranged for Latin-1 open systems.
    chars = list(bytes(range(256)).decode("cp037"))
    for position, char in {
        0x5F: "^",
        0xAD: "[",
        0xB0: "\u00ac",
        0xBA: "\u00dd",
        0xBB: "\u00a8",
        0xBD: "]",
    }.items():
        chars[position] = char
    return "".join(chars)


_CP1047_DECODE = _code_page_1047()
_CP1047_ENCODE = {char: code for code, char in enumerate(_CP1047_DECODE)}


class Ebcdic1047Encoder(Encoder):
    """EBCDIC using IBM code page 1047; text on the host side is UTF-8."""

    def encode(self, data: bytes) -> bytes:
        try:
            text = bytes(data).decode("utf-8")
            return bytes(_CP1047_ENCODE[char] for char in text)
        except (UnicodeDecodeError, KeyError) as exc:
            raise EncodingError("failed to encode EBCDIC", exc) from exc

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        _check_length(data, length)
        text = "".join(_CP1047_DECODE[byte] for byte in bytes(data[:length]))
        return text.encode("utf-8"), length


EBCDIC = EbcdicEncoder()
EBCDIC1047 = Ebcdic1047Encoder()