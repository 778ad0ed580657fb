"""Unit tests for raw input validation."""

from decimal import Decimal

import pytest

from ims.application.validators import (
    InputError,
    parse_price,
    parse_product_id,
    parse_quantity,
    parse_stock,
    require_text,
)


class TestRequireText:

    def test_trims(self):
        assert require_text("  hello ", "Field") == "hello"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_empty_rejected(self, raw):
        with pytest.raises(InputError, match="Field is required"):
            require_text(raw, "Field")


class TestProductId:

    @pytest.mark.parametrize("raw, expected", [("A1", "A1"), (" abc123 ", "abc123"), ("007", "007")])
    def test_alphanumeric_accepted(self, raw, expected):
        assert parse_product_id(raw) == expected

    @pytest.mark.parametrize("raw", ["A_1", "A-1", "A 1", "ß1", "a.b"])
    def test_other_characters_rejected(self, raw):
        with pytest.raises(InputError, match="letters and digits"):
            parse_product_id(raw)


class TestNumbers:

    def test_price(self):
        assert parse_price(" 25.50 ") == Decimal("25.50")

    def test_negative_price_is_parsed_not_judged(self):
        assert parse_price("-1") == Decimal("-1")

    @pytest.mark.parametrize("raw", ["abc", "1e", "sNaN", "-Infinity"])
    def test_bad_price_rejected(self, raw):
        with pytest.raises(InputError, match="not a number"):
            parse_price(raw)

    def test_stock_and_quantity(self):
        assert parse_stock(" 12 ") == 12
        assert parse_quantity("-4") == -4

    @pytest.mark.parametrize("raw", ["1.0", "x", "0x10"])
    def test_bad_integer_rejected(self, raw):
        with pytest.raises(InputError, match="not a whole number"):
            parse_quantity(raw)
