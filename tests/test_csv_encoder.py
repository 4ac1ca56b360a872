import csv
import io

from waybill_reports.csv_encoder import BareField, encode_row, escape_field, to_csv


def test_escape_field_doubles_quotes_and_keeps_commas():
    assert escape_field('Jane "J" Doe, Jr.') == '"Jane ""J"" Doe, Jr."'


def test_escaped_field_parses_back_with_csv_reader():
    original = 'Jane "J" Doe, Jr.'
    parsed = next(csv.reader(io.StringIO(encode_row([original, "x"]))))
    assert parsed == [original, "x"]


def test_missing_values_become_empty_quoted_fields():
    assert escape_field(None) == '""'


def test_numbers_are_rendered_without_locale_or_trailing_zero():
    assert escape_field(2.0) == '"2"'
    assert escape_field(2.5) == '"2.5"'
    assert escape_field(1234567) == '"1234567"'


def test_bare_fields_are_not_quoted():
    assert encode_row([BareField("3"), "a"]) == '3,"a"'


def test_to_csv_layout():
    text = to_csv(["A", "B"], [["x", 1], ["y", None]])
    assert text == 'A,B\n"x","1"\n"y",""'
    assert not text.endswith("\n")


def test_to_csv_with_no_rows_is_just_the_header():
    assert to_csv(["A", "B"], []) == "A,B"


def test_to_csv_is_deterministic():
    rows = [["a", 1.25], ["b", 2]]
    assert to_csv(["A", "B"], rows) == to_csv(["A", "B"], rows)
