import pytest

from microqr.types import ECLevel, EncodeMode, api_version, api_version_string


def test_api_version_numbers():
    assert api_version() == (4, 0, 2)


def test_api_version_string():
    assert api_version_string() == "4.0.2"


def test_version_string_matches_tuple():
    assert api_version_string() == ".".join(str(part) for part in api_version())


def test_ec_levels_lookup_by_value_in_order():
    levels = [ECLevel(value) for value in range(4)]
    assert levels == [ECLevel.L, ECLevel.M, ECLevel.Q, ECLevel.H]


def test_ec_level_unknown_value():
    with pytest.raises(ValueError):
        ECLevel(4)


def test_encode_mode_lookup_by_value():
    assert EncodeMode(-1) is EncodeMode.NUL
    assert EncodeMode(3) is EncodeMode.KANJI


def test_encode_mode_unknown_value():
    with pytest.raises(ValueError):
        EncodeMode(42)