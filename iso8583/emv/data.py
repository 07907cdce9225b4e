"""Typed view of EMV chip data (ICC data) and its packed form."""

from dataclasses import dataclass, field, fields, replace
from typing import Optional, Union
from collections.abc import Mapping

from .tags import tag_spec
from .tlv import TLVError, decode_tlv, encode_tlv

MAX_LENGTH = 999
_PREFIX_DIGITS = 3

TagValue = Union[str, int]


def _tag(tag: str):
    return field(default=None, metadata={"tag": tag})


@dataclass(kw_only=True)
class EmvData:
    """EMV data elements, one attribute per known tag; unset ones are None.

    Numeric tags hold ``int`` values; all others hold upper-case hex strings.
    """

    acquirer_identifier: Optional[str] = _tag("9F01")
    additional_terminal_capabilities: Optional[str] = _tag("9F40")
    amount_authorised_binary: Optional[str] = _tag("81")
    amount_authorised_numeric: Optional[int] = _tag("9F02")
    amount_other_binary: Optional[str] = _tag("9F04")
    amount_other_numeric: Optional[int] = _tag("9F03")
    amount_reference_currency: Optional[str] = _tag("9F3A")
    application_cryptogram: Optional[str] = _tag("9F26")
    application_currency_code: Optional[str] = _tag("9F42")
    application_currency_exponent: Optional[str] = _tag("9F44")
    application_discretionary_data: Optional[str] = _tag("9F05")
    application_effective_date: Optional[str] = _tag("5F25")
    application_expiration_date: Optional[str] = _tag("5F24")
    application_file_locator_afl: Optional[str] = _tag("94")
    application_identifier_aid_card: Optional[str] = _tag("4F")
    application_identifier_aid_terminal: Optional[str] = _tag("9F06")
    application_interchange_profile: Optional[str] = _tag("82")
    application_label: Optional[str] = _tag("50")
    application_preferred_name: Optional[str] = _tag("9F12")
    application_primary_account_number_pan: Optional[str] = _tag("5A")
    application_primary_account_number_pan_sequence_number: Optional[str] = _tag("5F34")
    application_priority_indicator: Optional[str] = _tag("87")
    application_reference_currency: Optional[str] = _tag("9F3B")
    application_reference_currency_exponent: Optional[str] = _tag("9F43")
    application_selection_registered_proprietary_data: Optional[str] = _tag("9F0A")
    application_template: Optional[str] = _tag("61")
    application_transaction_counter: Optional[int] = _tag("9F36")
    application_usage_control: Optional[str] = _tag("9F07")
    application_version_number: Optional[str] = _tag("9F08")
    application_version_number_terminal: Optional[str] = _tag("9F09")
    authorisation_code: Optional[str] = _tag("89")
    authorisation_response_code: Optional[str] = _tag("8A")
    bank_identifier_code_bic: Optional[str] = _tag("5F54")
    card_bit_group_template: Optional[str] = _tag("9F31")
    card_risk_management_data_object_list1_cdol1: Optional[str] = _tag("8C")
    card_risk_management_data_object_list2_cdol2: Optional[str] = _tag("8D")
    cardholder_name: Optional[str] = _tag("5F20")
    cardholder_name_extended: Optional[str] = _tag("9F0B")
    cardholder_verification_method_cvm_list: Optional[str] = _tag("8E")
    cardholder_verification_method_cvm_results: Optional[str] = _tag("9F34")
    certification_authority_public_key_index: Optional[str] = _tag("8F")
    certification_authority_public_key_index_terminal: Optional[str] = _tag("9F22")
    command_template: Optional[str] = _tag("83")
    cryptogram_information_data: Optional[str] = _tag("9F27")
    data_authentication_code: Optional[str] = _tag("9F45")
    dedicated_file_df_name: Optional[str] = _tag("84")
    directory_definition_file_ddf_name: Optional[str] = _tag("9D")
    directory_discretionary_template: Optional[str] = _tag("73")
    dynamic_data_authentication_data_object_list_ddol: Optional[str] = _tag("9F49")
    emv_proprietary_template: Optional[str] = _tag("70")
    facial_try_counter: Optional[str] = _tag("DF50")
    file_control_information_fci_issuer_discretionary_data: Optional[str] = _tag("BF0C")
    file_control_information_fci_proprietary_template: Optional[str] = _tag("A5")
    file_control_information_fci_template: Optional[str] = _tag("6F")
    finger_try_counter: Optional[str] = _tag("DF51")
    icc_dynamic_number: Optional[str] = _tag("9F4C")
    icc_pin_encipherment_public_key_certificate: Optional[str] = _tag("9F2D")
    icc_pin_encipherment_public_key_exponent: Optional[str] = _tag("9F2E")
    icc_pin_encipherment_public_key_remainder: Optional[str] = _tag("9F2F")
    icc_public_key_certificate: Optional[str] = _tag("9F46")
    icc_public_key_exponent: Optional[str] = _tag("9F47")
    icc_public_key_remainder: Optional[str] = _tag("9F48")
    interface_device_ifd_serial_number: Optional[str] = _tag("9F1E")
    international_bank_account_number_iban: Optional[str] = _tag("5F53")
    issuer_action_code_default: Optional[str] = _tag("9F0D")
    issuer_action_code_denial: Optional[str] = _tag("9F0E")
    issuer_action_code_online: Optional[str] = _tag("9F0F")
    issuer_application_data: Optional[str] = _tag("9F10")
    issuer_authentication_data: Optional[str] = _tag("91")
    issuer_code_table_index: Optional[str] = _tag("9F11")
    issuer_country_code: Optional[str] = _tag("5F28")
    issuer_country_code_alpha2: Optional[str] = _tag("5F55")
    issuer_country_code_alpha3: Optional[str] = _tag("5F56")
    issuer_identification_number_iin: Optional[str] = _tag("42")
    issuer_identification_number_extended: Optional[str] = _tag("9F0C")
    issuer_public_key_certificate: Optional[str] = _tag("90")
    issuer_public_key_exponent: Optional[str] = _tag("9F32")
    issuer_public_key_remainder: Optional[str] = _tag("92")
    issuer_script_command: Optional[str] = _tag("86")
    issuer_script_identifier: Optional[str] = _tag("9F18")
    issuer_script_template1: Optional[str] = _tag("71")
    issuer_script_template2: Optional[str] = _tag("72")
    issuer_url: Optional[str] = _tag("5F50")
    language_preference: Optional[str] = _tag("5F2D")
    last_online_application_transaction_counter_atc_register: Optional[str] = _tag("9F13")
    log_entry: Optional[str] = _tag("9F4D")
    log_format: Optional[str] = _tag("9F4F")
    lower_consecutive_offline_limit: Optional[str] = _tag("9F14")
    merchant_category_code: Optional[str] = _tag("9F15")
    merchant_identifier: Optional[str] = _tag("9F16")
    merchant_name_and_location: Optional[str] = _tag("9F4E")
    payment_account_reference_par: Optional[str] = _tag("9F24")
    pin_try_counter: Optional[str] = _tag("9F17")
    point_of_service_pos_entry_mode: Optional[str] = _tag("9F39")
    processing_options_data_object_list_pdol: Optional[str] = _tag("9F38")
    response_message_template_format1: Optional[str] = _tag("80")
    response_message_template_format2: Optional[str] = _tag("77")
    service_code: Optional[str] = _tag("5F30")
    short_file_identifier_sfi: Optional[str] = _tag("88")
    signed_dynamic_application_data: Optional[str] = _tag("9F4B")
    signed_static_application_data: Optional[str] = _tag("93")
    static_data_authentication_tag_list: Optional[str] = _tag("9F4A")
    terminal_capabilities: Optional[str] = _tag("9F33")
    terminal_country_code: Optional[str] = _tag("9F1A")
    terminal_floor_limit: Optional[str] = _tag("9F1B")
    terminal_identification: Optional[str] = _tag("9F1C")
    terminal_risk_management_data: Optional[str] = _tag("9F1D")
    terminal_type: Optional[str] = _tag("9F35")
    terminal_verification_results: Optional[str] = _tag("95")
    token_requestor_id: Optional[str] = _tag("9F19")
    track1_discretionary_data: Optional[str] = _tag("9F1F")
    track2_discretionary_data: Optional[str] = _tag("9F20")
    track2_equivalent_data: Optional[str] = _tag("57")
    transaction_certificate_tc_hash_value: Optional[str] = _tag("98")
    transaction_certificate_data_object_list_tdol: Optional[str] = _tag("97")
    transaction_currency_code: Optional[str] = _tag("5F2A")
    transaction_currency_exponent: Optional[str] = _tag("5F36")
    transaction_date: Optional[str] = _tag("9A")
    transaction_pin_data: Optional[str] = _tag("99")
    transaction_reference_currency_code: Optional[str] = _tag("9F3C")
    transaction_reference_currency_exponent: Optional[str] = _tag("9F3D")
    transaction_sequence_counter: Optional[str] = _tag("9F41")
    transaction_status_information: Optional[str] = _tag("9B")
    transaction_time: Optional[str] = _tag("9F21")
    transaction_type: Optional[str] = _tag("9C")
    unpredictable_number: Optional[str] = _tag("9F37")
    upper_consecutive_offline_limit: Optional[str] = _tag("9F23")

    @classmethod
    def from_tags(cls, values: Mapping[str, TagValue]) -> "EmvData":
        """Build from a mapping of tag (e.g. ``"9F02"``) to decoded value."""
        kwargs = {}
        for tag, value in values.items():
            spec = tag_spec(tag)
            kwargs[_ATTR_BY_TAG[spec.tag]] = value
        return replace(cls(), **kwargs)

    def to_tags(self) -> dict[str, TagValue]:
        """Return the set elements as tag to value, ordered by tag number."""
        present = {
            f.metadata["tag"]: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
        return {tag: present[tag] for tag in sorted(present, key=lambda t: int(t, 16))}


_ATTR_BY_TAG: dict[str, str] = {f.metadata["tag"]: f.name for f in fields(EmvData)}


def unpack_icc_data(raw: bytes) -> EmvData:
    """Read ICC data: a three-digit ASCII length followed by BER-TLV elements."""
    raw = bytes(raw)
    if len(raw) < _PREFIX_DIGITS:
        raise TLVError(
            f"not enough data to read length prefix: expected {_PREFIX_DIGITS} "
            f"bytes, got {len(raw)}"
        )
    prefix = raw[:_PREFIX_DIGITS]
    if not prefix.isdigit():
        raise TLVError(f"length prefix {prefix!r} is not a decimal number")
    length = int(prefix)
    body = raw[_PREFIX_DIGITS : _PREFIX_DIGITS + length]
    if len(body) < length:
        raise TLVError(
            f"not enough data to decode. expected len {length}, got {len(body)}"
        )

    values: dict[str, TagValue] = {}
    for tag, value in decode_tlv(body):
        try:
            spec = tag_spec(tag)
        except KeyError as exc:
            raise TLVError(
                f"failed to unpack subfield {tag}: no specification found", exc
            ) from exc
        values[spec.tag] = spec.decode_value(value)
    return EmvData.from_tags(values)


def pack_icc_data(data: EmvData) -> bytes:
    """Write ``data`` as a three-digit ASCII length and BER-TLV elements."""
    body = encode_tlv(
        (tag, tag_spec(tag).encode_value(value))
        for tag, value in data.to_tags().items()
    )
    if len(body) > MAX_LENGTH:
        raise TLVError(
            f"field length: {len(body)} should be fewer than {MAX_LENGTH + 1}"
        )
    return f"{len(body):0{_PREFIX_DIGITS}d}".encode("ascii") + body