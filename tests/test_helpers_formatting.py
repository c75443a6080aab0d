import click
import pytest

from helpers.formatting import (
    HUMAN_INT,
    cost_format,
    human_format,
    human_format_to_float,
)


def test_human_format_to_float_supports_suffix_notation():
    assert human_format_to_float("1.5K") == 1500.0
    assert human_format_to_float("2.5M") == 2_500_000.0
    assert human_format_to_float("3e3") == 3000.0
    assert human_format_to_float(" 7 ") == 7.0


def test_human_format_converts_number_ranges():
    assert human_format(12) == "12"
    assert human_format(999.9) == "1K"
    assert human_format(1536) == "1.54K"
    assert human_format(1_000_000) == "1M"


def test_human_format_preserves_special_numbers():
    assert human_format(float("inf")) == "inf"
    assert human_format(float("-inf")) == "-inf"
    assert human_format(float("nan")) == "nan"


def test_human_int_param_type_supports_human_and_native_values():
    assert HUMAN_INT.convert(11, None, None) == 11
    assert HUMAN_INT.convert("1K", None, None) == 1000
    assert HUMAN_INT.convert("1.5K", None, None) == 1500

    with pytest.raises(click.BadParameter):
        HUMAN_INT.convert("bad", None, None)
    with pytest.raises(click.BadParameter):
        HUMAN_INT.convert("1.5", None, None)


def test_cost_format():
    assert cost_format(None).plain == "N/A"
    assert cost_format(22.0).plain == "22.00"
    assert cost_format(14).plain == "14"
