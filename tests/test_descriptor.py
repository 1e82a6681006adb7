from pathlib import Path

import pytest

from finspect.descriptor import parse_attributes, read_attributes
from finspect.errors import IoFailure, MalformedHeaderError
from tests.infrastructure import write


def test_simple_headers():
    attrs = parse_attributes([
        "Manifest-Version: 1.0",
        "IBM-ShortName: servlet-4.0",
    ])
    assert attrs == {"Manifest-Version": "1.0", "IBM-ShortName": "servlet-4.0"}


def test_continuation_lines_are_joined():
    attrs = parse_attributes([
        "Subsystem-Content: com.ibm.ws.a; type=\"osgi.sub",
        " system.feature\", com.ibm.ws.b",
    ])
    assert attrs["Subsystem-Content"] == 'com.ibm.ws.a; type="osgi.subsystem.feature", com.ibm.ws.b'


def test_leading_blank_lines_skipped_and_main_section_ends_at_blank_line():
    attrs = parse_attributes(["", "A: 1", "B: 2", "", "Name: entry", "C: 3"])
    assert attrs == {"A": "1", "B": "2"}


def test_value_without_space_after_colon():
    assert parse_attributes(["A:1"]) == {"A": "1"}


def test_empty_value():
    assert parse_attributes(["A:"]) == {"A": ""}


def test_repeated_header_keeps_last():
    assert parse_attributes(["A: 1", "A: 2"]) == {"A": "2"}


def test_header_names_keep_their_case():
    assert parse_attributes(["ibm-shortname: x"]) == {"ibm-shortname": "x"}


def test_line_without_separator():
    with pytest.raises(MalformedHeaderError, match="line 2"):
        parse_attributes(["A: 1", "garbage"], source="x.mf")


def test_continuation_without_header():
    with pytest.raises(MalformedHeaderError, match="continuation without a header"):
        parse_attributes([" orphan"])


def test_read_attributes(tmp_path: Path):
    p = write(tmp_path / "f.mf", "\ufeffSubsystem-SymbolicName: a;\n visibility:=public\n")
    assert read_attributes(p) == {"Subsystem-SymbolicName": "a;visibility:=public"}


def test_read_attributes_crlf(tmp_path: Path):
    p = tmp_path / "f.mf"
    p.write_bytes(b"A: 1\r\nB: 2\r\n")
    assert read_attributes(p) == {"A": "1", "B": "2"}


def test_read_attributes_breaks_lines_on_cr_and_lf_only(tmp_path: Path):
    p = tmp_path / "f.mf"
    p.write_bytes("A: x\u2028y\x0cz\x1e; k=v\rB: 2\n".encode("utf-8"))
    assert read_attributes(p) == {"A": "x\u2028y\x0cz\x1e; k=v", "B": "2"}


def test_unreadable_file(tmp_path: Path):
    with pytest.raises(IoFailure) as ei:
        read_attributes(tmp_path / "nope.mf")
    assert isinstance(ei.value.cause, OSError)
    assert "nope.mf" in str(ei.value)


def test_directory_is_unreadable(tmp_path: Path):
    with pytest.raises(IoFailure):
        read_attributes(tmp_path)
