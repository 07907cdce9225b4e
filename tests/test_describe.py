import io

import pytest

from iso8583.describe import DescribeError, describe, format_bitmap_bits

BITMAP = b"\x40" + bytes(7)

FIELDS = {
    0: ("Message Type Indicator", "0100"),
    1: ("Bitmap", "4000000000000000"),
    2: ("Primary Account Number", "[card-number]"),
}


def test_describe():
    out = io.StringIO()
    describe(out, "0100", BITMAP, FIELDS)

    expected = (
        "ISO 8583 Message:\n"
        "MTI...........................: 0100\n"
        "Bitmap........................: 4000000000000000\n"
        "Bitmap bits...................: 01000000 00000000 00000000 00000000 "
        "00000000 00000000 00000000 00000000\n"
        "F000 Message Type Indicator...: 0100\n"
        "F002 Primary Account Number...: [card-number]\n"
    )
    assert out.getvalue() == expected


def test_describe_uses_spec_name():
    out = io.StringIO()
    describe(out, "0100", BITMAP, FIELDS, spec_name="Test Spec")
    assert out.getvalue().startswith("Test Spec Message:\n")


def test_describe_applies_filters():
    out = io.StringIO()
    describe(out, "0100", BITMAP, FIELDS, filters={2: lambda value: "****"})
    lines = out.getvalue().splitlines()
    assert lines[-1] == "F002 Primary Account Number...: ****"
    assert "[card-number]" not in out.getvalue()


def test_describe_sorts_fields():
    fields = {
        3: ("Processing Code", "000000"),
        0: ("Message Type Indicator", "0200"),
    }
    out = io.StringIO()
    describe(out, "0200", BITMAP, fields)
    lines = out.getvalue().splitlines()
    assert lines[4].startswith("F000 ")
    assert lines[5].startswith("F003 ")


def test_describe_reports_field_errors():
    fields = {
        0: ("Message Type Indicator", "0100"),
        2: ("Primary Account Number", ValueError("bad value")),
    }
    out = io.StringIO()
    with pytest.raises(DescribeError) as exc:
        describe(out, "0100", BITMAP, fields)
    assert str(exc.value) == "displaying fields: bad value"
    text = out.getvalue()
    assert text.endswith("\nUnpacking Errors:\n- bad value:\n")
    assert "F002" not in text


def test_format_bitmap_bits():
    assert format_bitmap_bits(BITMAP) == (
        "01000000 00000000 00000000 00000000 00000000 00000000 00000000 00000000"
    )
    assert format_bitmap_bits(b"\xff\x01") == "11111111 00000001"