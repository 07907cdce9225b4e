"""Catalogue of EMV chip data tags and conversion of their values."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..encoding.base import EncodingError
from ..encoding.hex import ASCII_HEX_TO_BYTES


class TagKind(Enum):
    """How the value of a tag is presented once decoded."""

    STRING = "string"
    NUMERIC = "numeric"


@dataclass(frozen=True)
class TagSpec:
    """Description of one EMV tag.

    The wire value is raw bytes. A ``STRING`` tag presents it as upper-case
    hex digits; a ``NUMERIC`` tag reads those hex digits as a decimal number.
    """

    tag: str
    description: str
    kind: TagKind = TagKind.STRING

    def decode_value(self, raw: bytes) -> Union[str, int]:
        """Turn the wire bytes of this tag into its value."""
        raw = bytes(raw)
        text, _ = ASCII_HEX_TO_BYTES.decode(raw, len(raw))
        digits = text.decode("ascii")
        if self.kind is TagKind.STRING:
            return digits
        if not digits:
            return 0
        if not digits.isdigit():
            raise EncodingError(
                f"failed to convert into number: {digits!r} is not decimal"
            )
        return int(digits)

    def encode_value(self, value: Union[str, int]) -> bytes:
        """Turn a value of this tag into its wire bytes.

        Numbers are written as decimal digits, with a leading zero added
        when needed to fill the last byte.
        """
        if self.kind is TagKind.NUMERIC:
            if isinstance(value, bool) or not isinstance(value, int):
                raise EncodingError(
                    f"tag {self.tag} takes an integer, got {type(value).__name__}"
                )
            if value < 0:
                raise EncodingError(
                    f"tag {self.tag} takes a non-negative number, got {value}"
                )
            digits = str(value)
            if len(digits) % 2:
                digits = "0" + digits
        else:
            if not isinstance(value, str):
                raise EncodingError(
                    f"tag {self.tag} takes a hex string, got {type(value).__name__}"
                )
            digits = value
        try:
            encoded = digits.encode("ascii")
        except UnicodeEncodeError as exc:
            raise EncodingError("failed to perform hex decoding", exc) from exc
        return ASCII_HEX_TO_BYTES.encode(encoded)


_S = TagKind.STRING
_N = TagKind.NUMERIC

_TABLE = [
    ("9F01", "Acquirer Identifier", _S),
    ("9F40", "Additional Terminal Capabilities", _S),
    ("81", "Amount, Authorised (Binary)", _S),
    ("9F02", "Amount, Authorised (Numeric)", _N),
    ("9F04", "Amount, Other (Binary)", _S),
    ("9F03", "Amount, Other (Numeric)", _N),
    ("9F3A", "Amount, Reference Currency", _S),
    ("9F26", "Application Cryptogram", _S),
    ("9F42", "Application Currency Code", _S),
    ("9F44", "Application Currency Exponent", _S),
    ("9F05", "Application Discretionary Data", _S),
    ("5F25", "Application Effective Date", _S),
    ("5F24", "Application Expiration Date", _S),
    ("94", "Application File Locator (AFL)", _S),
    ("4F", "Application Identifier (AID) \u2013 card", _S),
    ("9F06", "Application Identifier (AID) \u2013 terminal", _S),
    ("82", "Application Interchange Profile", _S),
    ("50", "Application Label", _S),
    ("9F12", "Application Preferred Name", _S),
    ("5A", "Application Primary Account Number (PAN)", _S),
    ("5F34", "Application Primary Account Number (PAN) Sequence Number", _S),
    ("87", "Application Priority Indicator", _S),
    ("9F3B", "Application Reference Currency", _S),
    ("9F43", "Application Reference Currency Exponent", _S),
    ("9F0A", "Application Selection Registered Proprietary Data", _S),
    ("61", "Application Template", _S),
    ("9F36", "Application Transaction Counter", _N),
    ("9F07", "Application Usage Control", _S),
    ("9F08", "Application Version Number ICC", _S),
    ("9F09", "Application Version Number Terminal", _S),
    ("89", "Authorisation Code", _S),
    ("8A", "Authorisation Response Code", _S),
    ("5F54", "Bank Identifier Code (BIC)", _S),
    ("9F31", "Card BIT Group Template", _S),
    ("8C", "Card Risk Management Data Object List 1 (CDOL1)", _S),
    ("8D", "Card Risk Management Data Object List 2 (CDOL2)", _S),
    ("5F20", "Cardholder Name", _S),
    ("9F0B", "Cardholder Name Extended", _S),
    ("8E", "Cardholder Verification Method (CVM) List", _S),
    ("9F34", "Cardholder Verification Method (CVM) Results", _S),
    ("8F", "Certification Authority Public Key Index ICC", _S),
    ("9F22", "Certification Authority Public Key Index Terminal", _S),
    ("83", "Command Template", _S),
    ("9F27", "Cryptogram Information Data", _S),
    ("9F45", "Data Authentication Code", _S),
    ("84", "Dedicated File (DF) Name", _S),
    ("9D", "Directory Definition File (DDF) Name", _S),
    ("73", "Directory Discretionary Template", _S),
    ("9F49", "Dynamic Data Authentication Data Object List (DDOL)", _S),
    ("70", "EMV Proprietary Template", _S),
    ("DF50", "Facial Try Counter", _S),
    ("BF0C", "File Control Information (FCI) Issuer Discretionary Data", _S),
    ("A5", "File Control Information (FCI) Proprietary Template", _S),
    ("6F", "File Control Information (FCI) Template", _S),
    ("DF51", "Finger Try Counter", _S),
    ("9F4C", "ICC Dynamic Number", _S),
    ("9F2D", "Integrated Circuit Card (ICC) PIN Encipherment Public Key Certificate", _S),
    ("9F2E", "Integrated Circuit Card (ICC) PIN Encipherment Public Key Exponent", _S),
    ("9F2F", "Integrated Circuit Card (ICC) PIN Encipherment Public Key Remainder", _S),
    ("9F46", "Integrated Circuit Card (ICC) Public Key Certificate", _S),
    ("9F47", "Integrated Circuit Card (ICC) Public Key Exponent", _S),
    ("9F48", "Integrated Circuit Card (ICC) Public Key Remainder", _S),
    ("9F1E", "Interface Device (IFD) Serial Number", _S),
    ("5F53", "International Bank Account Number (IBAN)", _S),
    ("9F0D", "Issuer Action Code \u2013 Default", _S),
    ("9F0E", "Issuer Action Code \u2013 Denial", _S),
    ("9F0F", "Issuer Action Code \u2013 Online", _S),
    ("9F10", "Issuer Application Data", _S),
    ("91", "Issuer Authentication Data", _S),
    ("9F11", "Issuer Code Table Index", _S),
    ("5F28", "Issuer Country Code", _S),
    ("5F55", "Issuer Country Code (alpha2 format)", _S),
    ("5F56", "Issuer Country Code (alpha3 format)", _S),
    ("42", "Issuer Identification Number (IIN)", _S),
    ("9F0C", "Issuer Identification Number Extended", _S),
    ("90", "Issuer Public Key Certificate", _S),
    ("9F32", "Issuer Public Key Exponent", _S),
    ("92", "Issuer Public Key Remainder", _S),
    ("86", "Issuer Script Command", _S),
    ("9F18", "Issuer Script Identifier", _S),
    ("71", "Issuer Script Template 1", _S),
    ("72", "Issuer Script Template 2", _S),
    ("5F50", "Issuer URL", _S),
    ("5F2D", "Language Preference", _S),
    ("9F13", "Last Online Application Transaction Counter (ATC) Register", _S),
    ("9F4D", "Log Entry", _S),
    ("9F4F", "Log Format", _S),
    ("9F14", "Lower Consecutive Offline Limit", _S),
    ("9F15", "Merchant Category Code", _S),
    ("9F16", "Merchant Identifier", _S),
    ("9F4E", "Merchant Name and Location", _S),
    ("9F24", "Payment Account Reference (PAR)", _S),
    ("9F17", "Personal Identification Number (PIN) Try Counter", _S),
    ("9F39", "Point-of-Service (POS) Entry Mode", _S),
    ("9F38", "Processing Options Data Object List (PDOL)", _S),
    ("80", "Response Message Template Format 1", _S),
    ("77", "Response Message Template Format 2", _S),
    ("5F30", "Service Code", _S),
    ("88", "Short File Identifier (SFI)", _S),
    ("9F4B", "Signed Dynamic Application Data", _S),
    ("93", "Signed Static Application Data", _S),
    ("9F4A", "Static Data Authentication Tag List", _S),
    ("9F33", "Terminal Capabilities", _S),
    ("9F1A", "Terminal Country Code", _S),
    ("9F1B", "Terminal Floor Limit", _S),
    ("9F1C", "Terminal Identification", _S),
    ("9F1D", "Terminal Risk Management Data", _S),
    ("9F35", "Terminal Type", _S),
    ("95", "Terminal Verification Results", _S),
    ("9F19", "Token Requestor ID", _S),
    ("9F1F", "Track 1 Discretionary Data", _S),
    ("9F20", "Track 2 Discretionary Data", _S),
    ("57", "Track 2 Equivalent Data", _S),
    ("98", "Transaction Certificate (TC) Hash Value", _S),
    ("97", "Transaction Certificate Data Object List (TDOL)", _S),
    ("5F2A", "Transaction Currency Code", _S),
    ("5F36", "Transaction Currency Exponent", _S),
    ("9A", "Transaction Date", _S),
    ("99", "Transaction Personal Identification Number (PIN) Data", _S),
    ("9F3C", "Transaction Reference Currency Code", _S),
    ("9F3D", "Transaction Reference Currency Exponent", _S),
    ("9F41", "Transaction Sequence Counter", _S),
    ("9B", "Transaction Status Information", _S),
    ("9F21", "Transaction Time", _S),
    ("9C", "Transaction Type", _S),
    ("9F37", "Unpredictable Number", _S),
    ("9F23", "Upper Consecutive Offline Limit", _S),
]

TAGS: dict[str, TagSpec] = {
    tag: TagSpec(tag, description, kind) for tag, description, kind in _TABLE
}

del _S, _N, _TABLE


def tag_spec(tag: str) -> TagSpec:
    """Return the specification of ``tag``; hex digits may be in any case."""
    try:
        return TAGS[tag.upper()]
    except KeyError:
        raise KeyError(f"unknown EMV tag {tag!r}") from None