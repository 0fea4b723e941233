import re

import pytest

from parus.asserts import AssertionFailed
from parus.utils import (
    equals_ignore_case,
    generate_hash,
    read_file,
    read_text,
    to_lower_case,
    to_upper_case,
    trim,
    write_file,
)


def test_binary_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    payload = bytes(range(256))
    write_file(path, payload)
    assert read_file(path) == payload


def test_text_round_trip(tmp_path):
    path = tmp_path / "note.txt"
    write_file(path, "line one\nline two\n")
    assert read_text(path) == "line one\nline two\n"
    assert read_file(path) == b"line one\nline two\n"


def test_write_replaces_contents(tmp_path):
    path = tmp_path / "f.txt"
    write_file(path, "long original content")
    write_file(path, "short")
    assert read_text(path) == "short"


def test_read_missing_file_fails(tmp_path):
    missing = tmp_path / "absent.txt"
    with pytest.raises(AssertionFailed, match="Failed to open file"):
        read_file(missing)
    with pytest.raises(AssertionFailed, match="absent.txt"):
        read_text(missing)


def test_case_conversion():
    assert to_lower_case("MiXeD Case") == "mixed case"
    assert to_upper_case("MiXeD Case") == "MIXED CASE"
    assert to_lower_case(to_upper_case("abc")) == "abc"


def test_equals_ignore_case():
    assert equals_ignore_case("Window", "wINDOW")
    assert not equals_ignore_case("Window", "Windows")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  key  ", "key"),
        ("\t\r\n\f\vvalue\v\f\n\r\t", "value"),
        ("inner  space", "inner  space"),
        ("   ", ""),
        ("", ""),
    ],
)
def test_trim(raw, expected):
    assert trim(raw) == expected


def test_generate_hash_shape_and_uniqueness():
    hashes = {generate_hash() for _ in range(50)}
    assert len(hashes) == 50
    for value in hashes:
        assert re.fullmatch(r"[0-9a-f]{32}", value)


def test_generate_hash_prefix_is_increasing_time():
    first = int(generate_hash()[:16], 16)
    second = int(generate_hash()[:16], 16)
    assert second >= first