"""Canonical JSON, SHA3-512 hex digest, UTF-16 length."""

import pytest

from app.domain.exceptions import DomainError, SerializationError
from app.domain.serialization import (
    JsonCanonicalSerializer,
    canonical_json,
    sha3_512_hex,
    utf16_length,
)


def test_canonical_json_compact():
    assert canonical_json({"a": [1, 2], "b": {"c": None}}) == '{"a":[1,2],"b":{"c":null}}'


def test_canonical_json_keeps_insertion_order():
    assert canonical_json({"b": 1, "a": 2}) == '{"b":1,"a":2}'


def test_canonical_json_scalars():
    assert canonical_json("string") == '"string"'
    assert canonical_json(1) == "1"
    assert canonical_json(True) == "true"
    assert canonical_json(None) == "null"


def test_canonical_json_keeps_non_ascii():
    assert canonical_json("ünï") == '"ünï"'


def test_canonical_json_circular_reference():
    value = {}
    value["loop"] = value
    with pytest.raises(SerializationError) as exc_info:
        canonical_json(value)
    assert isinstance(exc_info.value, DomainError)


def test_canonical_json_shared_reference_is_not_circular():
    shared = [1]
    assert canonical_json({"a": shared, "b": shared}) == '{"a":[1],"b":[1]}'


def test_canonical_json_unsupported_type():
    with pytest.raises(SerializationError) as exc_info:
        canonical_json({"s": {1, 2}})
    assert isinstance(exc_info.value.__cause__, TypeError)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_canonical_json_non_finite_floats_become_null(value):
    assert canonical_json(value) == "null"
    assert canonical_json({"v": value, "l": [value, 1.5]}) == '{"v":null,"l":[null,1.5]}'


def test_json_canonical_serializer_delegates():
    assert JsonCanonicalSerializer().serialize({"x": 1}) == '{"x":1}'


def test_sha3_512_hex_known_vector():
    # openssl dgst -sha3-512 of "{}"
    assert sha3_512_hex("{}") == (
        "c1802e6b9670927ebfddb7f67b3824642237361f07db35526c42c555ffd2dbe7"
        "4156c366e1550ef8c0508a6cc796409a7194a59bba4d300a6182b483d315a862"
    )


def test_sha3_512_hex_lone_surrogate_hashed_as_replacement_char():
    # openssl dgst -sha3-512 of the UTF-8 bytes EF BF BD (U+FFFD)
    expected = (
        "9c8c356561ab2057fad388e665738bd6f163deecaca45e7dd01807acf7e7703a"
        "f2260a55c3f957957ff65143f0a5093be196574d68bb219f9e42e1c7294a5951"
    )
    assert sha3_512_hex("\ud800") == expected
    assert sha3_512_hex("\udc00") == expected
    assert sha3_512_hex("\ufffd") == expected


def test_utf16_length():
    assert utf16_length("") == 0
    assert utf16_length("abc") == 3
    assert utf16_length("é") == 1
    assert utf16_length("\U0001F600") == 2
