import json

import pytest

from yenxo.equality import equal
from yenxo.json_io import from_json, from_python, to_json, to_pretty_json, to_python
from yenxo.types import TypeTag
from yenxo.variant import Variant

RAW = """
    {
        "x": 6,
        "y": [1, 2],
        "z": {
            "a": "a",
            "b": "b"
        },
        "a": null
    }
"""


def _expected_map():
    return Variant(
        {
            "x": Variant(6),
            "y": Variant([Variant(1), Variant(2)]),
            "z": Variant({"a": Variant("a"), "b": Variant("b")}),
            "a": Variant(),
        }
    )


def test_from_python_int():
    assert from_python(json.loads("5")) == Variant(5)


def test_from_python_map():
    assert from_python(json.loads(RAW)) == _expected_map()


def test_from_python_vec_of_map():
    parsed = json.loads('[{"abc": 1}]')
    assert from_python(parsed) == Variant([Variant({"abc": Variant(1)})])


def test_from_python_integer_tags():
    assert from_python(2**31).type() is TypeTag.UINT32
    assert from_python(-(2**31) - 1).type() is TypeTag.INT64
    assert from_python(2**63).type() is TypeTag.UINT64
    assert from_python(2**64).type() is TypeTag.DOUBLE


def test_from_python_rejects_non_string_keys():
    with pytest.raises(TypeError):
        from_python({1: 2})


def test_to_python_int():
    assert to_python(Variant(6)) == 6


def test_to_python_map():
    assert to_python(_expected_map()) == json.loads(RAW)


@pytest.mark.parametrize(
    "tag", [TypeTag.CHAR, TypeTag.UINT8, TypeTag.INT16, TypeTag.UINT16]
)
def test_small_integers_to_json_numbers(tag):
    assert to_python(Variant(1, tag)) == 1
    assert to_json(Variant(1, tag)) == "1"


def test_to_json_string():
    var = Variant({"a": Variant("b")})
    json_str = to_json(var)
    assert json_str == '{"a":"b"}'
    assert var == from_json(json_str)


def test_from_json_parse_error():
    with pytest.raises(ValueError):
        from_json("{abc")


def test_from_json_rejects_nan():
    with pytest.raises(ValueError):
        from_json("NaN")


def test_from_json_map_by_value():
    assert equal(from_json(RAW), _expected_map())


def test_from_json_integer_tags():
    parsed = from_json("[1, -1, 4294967296, -2147483649, 1.5]").vec()
    assert [item.type() for item in parsed] == [
        TypeTag.UINT32,
        TypeTag.INT32,
        TypeTag.UINT64,
        TypeTag.INT64,
        TypeTag.DOUBLE,
    ]


def test_json_round_trip():
    var = _expected_map()
    assert equal(from_json(to_json(var)), var)
    assert equal(from_json(to_pretty_json(var)), var)


def test_pretty_json_is_indented_and_parses_the_same():
    var = Variant({"a": Variant([Variant(1)])})
    pretty = to_pretty_json(var)
    assert "\n" in pretty
    assert json.loads(pretty) == json.loads(to_json(var))


def test_to_json_rejects_nan():
    with pytest.raises(ValueError):
        to_json(Variant(float("nan")))