"""CSV serialization shared by all three reports."""
from __future__ import annotations

from typing import Iterable, Sequence, Union

from .utils import format_number


class BareField(str):
    """A field value written as-is, without surrounding quotes."""


FieldValue = Union[str, int, float, None]


def escape_field(value: FieldValue) -> str:
    if isinstance(value, BareField):
        return str(value)
    if value is None:
        text = ""
    elif isinstance(value, bool):
        text = str(value).lower()
    elif isinstance(value, (int, float)):
        text = format_number(value)
    else:
        text = str(value)
    return '"' + text.replace('"', '""') + '"'


def encode_row(row: Sequence[FieldValue]) -> str:
    return ",".join(escape_field(value) for value in row)


def to_csv(header: Sequence[str], rows: Iterable[Sequence[FieldValue]]) -> str:
    """Header line then one quoted line per row, joined with newlines and no trailing newline."""
    lines = [",".join(header)]
    lines.extend(encode_row(row) for row in rows)
    return "\n".join(lines)
