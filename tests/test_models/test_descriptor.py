"""Tests for the pattern descriptor."""

import pytest
from pydantic import ValidationError

from geoimage.models.descriptor import Mode, PatternDescriptor, parse_size


def test_defaults_for_missing_input():
    d = PatternDescriptor.from_raw(None, None, None)
    assert d.identifier == "default"
    assert d.size == 128
    assert d.mode is Mode.INVALID


def test_empty_identifier_falls_back():
    d = PatternDescriptor.from_raw("", "64", "svg")
    assert d.identifier == "default"


def test_raster_descriptor():
    d = PatternDescriptor.from_raw("abc", "64", "png")
    assert d.identifier == "abc"
    assert d.size == 64
    assert d.mode is Mode.RASTER


def test_vector_mode():
    assert PatternDescriptor.from_raw("abc", None, "svg").mode is Mode.VECTOR


@pytest.mark.parametrize("text", ["xyz", "PNG", "Svg", " png", ""])
def test_mode_is_exact_match(text):
    assert Mode.parse(text) is Mode.INVALID


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0", 0),
        ("7", 7),
        ("+7", 7),
        ("4294967295", 4294967295),
        ("4294967296", 128),
        ("-5", 128),
        ("12a", 128),
        (" 12", 128),
        ("1.5", 128),
        ("", 128),
        (None, 128),
    ],
)
def test_parse_size(text, expected):
    assert parse_size(text) == expected


def test_custom_default_size():
    assert PatternDescriptor.from_raw("x", "nope", "png", default_size=256).size == 256


def test_identifier_used_verbatim():
    d = PatternDescriptor.from_raw("Hello World!", None, "svg")
    assert d.identifier == "Hello World!"


def test_descriptor_is_immutable():
    d = PatternDescriptor.from_raw("abc", "64", "png")
    with pytest.raises(ValidationError):
        d.size = 32
