import math
from collections import OrderedDict
from types import MappingProxyType

import pytest
from seqquery.core.enums import LookupStatus
from seqquery.core.results import Lookup, ParseResult
from seqquery.functional.lookup import (
    float_value,
    get,
    int_value,
    keys,
    try_float,
    try_get,
    try_int,
    try_parse,
)


@pytest.fixture
def record():
    return {"name": "widget", "price": "3.14", "qty": "12", "note": "n/a"}


def test_try_get_mapping(record):
    assert try_get(record, "name") == (True, "widget")
    assert try_get(record, "missing") == (False, None)


def test_try_get_pairs(record):
    pairs = list(record.items())
    assert try_get(pairs, "price") == Lookup(True, "3.14")
    assert try_get(pairs, "missing") == Lookup(False, None)


def test_mapping_and_pairs_agree(record):
    pairs = list(record.items())
    for key in list(record) + ["absent"]:
        assert try_get(record, key) == try_get(pairs, key)
        assert try_get(MappingProxyType(record), key) == try_get(tuple(pairs), key)


def test_nan_key_found_in_mapping_and_pairs():
    nan = float("nan")
    assert try_get({nan: "v"}, nan) == (True, "v")
    assert try_get([(nan, "v")], nan) == (True, "v")
    assert try_get([(float("nan"), "v")], nan) == (False, None)


def test_empty_sources_are_not_found():
    assert try_get({}, "a") == (False, None)
    assert try_get([], "a") == (False, None)
    assert try_get(iter([]), "a") == (False, None)


def test_none_source_is_not_found():
    assert try_get(None, "a") == (False, None)
    assert get(None, "a", default=5) == 5


def test_first_duplicate_wins_in_pair_scan():
    pairs = [("a", 1), ("b", 2), ("a", 3)]
    assert try_get(pairs, "a") == (True, 1)


def test_pair_scan_uses_equality():
    pairs = [(1.0, "float one"), (2, "two")]
    assert try_get(pairs, 1) == (True, "float one")


def test_unhashable_key_falls_back_to_scan():
    mapping = OrderedDict(a=1)
    assert try_get(mapping, ["a"]) == (False, None)
    assert try_get([(["a"], 1)], ["a"]) == (True, 1)


def test_found_none_value_is_still_found():
    assert try_get({"a": None}, "a") == (True, None)
    assert get({"a": None}, "a", default="fallback") is None


def test_get_default(record):
    assert get(record, "qty") == "12"
    assert get(record, "missing") is None
    assert get(record, "missing", "dflt") == "dflt"


def test_keys():
    assert list(keys({"x": 1, "y": 2})) == ["x", "y"]
    assert list(keys([("b", 1), ("a", 2), ("b", 3)])) == ["b", "a", "b"]
    assert list(keys(None)) == []


def test_try_float(record):
    assert try_float({"a": "3.14"}, "a") == (True, 3.14)
    assert try_float({"a": "3.14"}, "missing") == (False, 0.0)
    assert try_float(record, "note") == (False, 0.0)
    assert try_float(record, "qty") == (True, 12.0)


def test_try_int(record):
    assert try_int(record, "qty") == (True, 12)
    assert try_int(record, "price") == (False, 0)
    assert try_int(record, "missing") == (False, 0)
    assert try_int([("n", " -7 ")], "n") == (True, -7)


def test_non_text_values_are_malformed():
    result = try_parse({"a": 3.5}, "a", float)
    assert result.status is LookupStatus.MALFORMED
    assert not result.found


def test_try_parse_distinguishes_missing_from_malformed(record):
    assert try_parse(record, "price", float) == ParseResult(
        True, 3.14, LookupStatus.FOUND
    )
    assert try_parse(record, "absent", float).status is LookupStatus.MISSING
    assert try_parse(record, "note", float).status is LookupStatus.MALFORMED
    assert try_parse(record, "note", float, default=-1.0).value == -1.0


def test_try_parse_custom_parser():
    def parse_flag(text):
        if text not in ("yes", "no"):
            raise ValueError(text)
        return text == "yes"

    assert try_parse([("on", "yes")], "on", parse_flag).value is True
    assert try_parse([("on", "maybe")], "on", parse_flag).status is LookupStatus.MALFORMED


def test_float_and_int_value_defaults(record):
    assert float_value(record, "price") == pytest.approx(3.14)
    assert float_value(record, "note") == 0.0
    assert float_value(record, "note", default=1.5) == 1.5
    assert int_value(record, "qty") == 12
    assert int_value(record, "missing", default=-1) == -1


def test_special_float_text():
    assert math.isinf(float_value({"x": "inf"}, "x"))
    assert try_float({"x": " 1e3 "}, "x") == (True, 1000.0)
