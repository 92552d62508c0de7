"""Tests for the facilities codec."""

import json

import pytest

from pgfinder.core.facilities import decode_facilities, encode_facilities, parse_facility_filter


@pytest.mark.parametrize("value", [None, "", [], "[]", "  ", ",,"])
def test_empty_inputs_decode_to_empty_list(value):
    assert decode_facilities(value) == []


def test_list_is_trimmed_and_empties_dropped():
    assert decode_facilities([" wifi", "", "ac ", None]) == ["wifi", "ac"]


def test_json_array_text_keeps_order():
    assert decode_facilities('["food", "wifi", "ac"]') == ["food", "wifi", "ac"]


def test_comma_separated_text():
    assert decode_facilities("wifi, ac ,,laundry") == ["wifi", "ac", "laundry"]


def test_broken_json_falls_back_to_commas():
    assert decode_facilities('[wifi, ac') == ["[wifi", "ac"]


def test_json_and_comma_forms_agree():
    assert decode_facilities('["wifi","ac"]') == decode_facilities("wifi,ac")


def test_decode_is_idempotent():
    for value in ('["wifi","ac"]', "wifi, ac", ["wifi", " ac"], "[oops"):
        once = decode_facilities(value)
        assert decode_facilities(once) == once
        assert decode_facilities(encode_facilities(value)) == once


def test_encode_always_writes_json_array():
    assert json.loads(encode_facilities("wifi, ac")) == ["wifi", "ac"]
    assert encode_facilities(None) == "[]"


def test_filter_parameter_split():
    assert parse_facility_filter(" wifi , ac,") == ["wifi", "ac"]
    assert parse_facility_filter(None) == []
