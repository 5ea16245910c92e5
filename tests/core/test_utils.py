"""Tests for zcredits/core/utils.py"""

import math
from decimal import Decimal

import pytest
from fastapi_pagination import Page

from zcredits.core.utils import create_pagination_page, parse_float, to_fixed
from zcredits.database.schemas.conversion_rate import ConversionRateRead


class TestParseFloat:
    @pytest.mark.parametrize("text, expected", [
        ("12", 12.0),
        ("12.5", 12.5),
        ("  3.25", 3.25),
        (".5", 0.5),
        ("12.", 12.0),
        ("-2", -2.0),
        ("1e3", 1000.0),
        ("12abc", 12.0),
        ("1.2.3", 1.2),
    ])
    def test_reads_numeric_prefix(self, text, expected):
        assert parse_float(text) == expected

    @pytest.mark.parametrize("text", ["abc", "", ".", "-", "e5", "  "])
    def test_unparseable_text_is_nan(self, text):
        assert math.isnan(parse_float(text))

    def test_infinity_text(self):
        assert parse_float("Infinity") == math.inf
        assert parse_float("-Infinity") == -math.inf

    def test_numbers_pass_through(self):
        assert parse_float(3) == 3.0
        assert parse_float(2.75) == 2.75
        assert parse_float(Decimal("1.10")) == 1.1

    def test_non_numeric_types_are_nan(self):
        assert math.isnan(parse_float(None))
        assert math.isnan(parse_float(True))
        assert math.isnan(parse_float([1]))


class TestToFixed:
    @pytest.mark.parametrize("value, expected", [
        (5, "5.00"),
        (3.1, "3.10"),
        (0.125, "0.13"),
        (1.005, "1.00"),
        (2.675, "2.67"),
        (-1.005, "-1.00"),
        (-0.125, "-0.13"),
        (1234567.891, "1234567.89"),
    ])
    def test_two_digits(self, value, expected):
        assert to_fixed(value) == expected

    def test_custom_digits(self):
        assert to_fixed(2.5, 0) == "3"
        assert to_fixed(1 / 3, 4) == "0.3333"

    def test_negative_zero(self):
        assert to_fixed(-0.0) == "0.00"

    def test_non_finite(self):
        assert to_fixed(math.nan) == "NaN"
        assert to_fixed(math.inf) == "Infinity"
        assert to_fixed(-math.inf) == "-Infinity"

    def test_huge_values_use_exponent_notation(self):
        assert to_fixed(1e21) == "1e+21"


class TestCreatePaginationPage:
    def test_builds_page_of_model(self):
        page = create_pagination_page(ConversionRateRead)
        assert issubclass(page, Page)
        assert "items" in page.model_fields
