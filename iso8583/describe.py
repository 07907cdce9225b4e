"""Human-readable listing of an ISO 8583 message."""

from collections.abc import Callable, Mapping
from typing import Optional, TextIO, Union

DEFAULT_SPEC_NAME = "ISO 8583"

_PADDING = 3
_PAD_CHAR = "."
_BITMAP_FIELD = 1

FieldValue = Union[str, BaseException]
Filter = Callable[[str], str]


class DescribeError(ValueError):
    """Raised when one or more fields could not be shown."""


def format_bitmap_bits(bitmap: bytes) -> str:
    """Return the bitmap as space-separated groups of eight bits."""
    return " ".join(f"{byte:08b}" for byte in bytes(bitmap))


def _write_aligned(out: TextIO, rows: list[tuple[str, str]]) -> None:
    width = max(len(label) for label, _ in rows) + _PADDING
    for label, value in rows:
        out.write(f"{label.ljust(width, _PAD_CHAR)}: {value}\n")


def describe(
    out: TextIO,
    mti: str,
    bitmap: bytes,
    fields: Mapping[int, tuple[str, FieldValue]],
    spec_name: Optional[str] = None,
    filters: Optional[Mapping[int, Filter]] = None,
) -> None:
    """Write the message's MTI, bitmap and fields to ``out``.

    ``fields`` maps a field number to its description and its value as
    text; a value that could not be turned into text is given as the
    exception raised. Such fields are listed after the others and a
    :class:`DescribeError` is raised once everything has been written.
    ``filters`` maps field numbers to functions that rewrite the shown
    value, for example to mask it.
    """
    filters = filters or {}
    out.write(f"{spec_name or DEFAULT_SPEC_NAME} Message:\n")

    rows = [
        ("MTI", str(mti)),
        ("Bitmap", bytes(bitmap).hex().upper()),
        ("Bitmap bits", format_bitmap_bits(bitmap)),
    ]
    errors: list[str] = []

    for field_id in sorted(fields):
        if field_id == _BITMAP_FIELD:
            continue
        description, value = fields[field_id]
        if isinstance(value, BaseException):
            errors.append(str(value))
            continue
        field_filter = filters.get(field_id)
        if field_filter is not None:
            value = field_filter(value)
        rows.append((f"F{field_id:03d} {description}", value))

    _write_aligned(out, rows)

    if errors:
        out.write("\nUnpacking Errors:\n")
        for error in errors:
            out.write(f"- {error}:\n")
        raise DescribeError(f"displaying fields: {','.join(errors)}")