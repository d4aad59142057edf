import pytest

from playground.policy.formatting import format_value, is_shortened


class TestFormatValue:
    def test_shortens_address(self) -> None:
        assert format_value("0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb") == "0x742d...0bEb"

    def test_short_value_unchanged(self) -> None:
        assert format_value("100.5 USDC") == "100.5 USDC"

    def test_exactly_twenty_chars_unchanged(self) -> None:
        value = "a" * 20
        assert format_value(value) == value
        assert is_shortened(value) is False

    def test_twenty_one_chars_shortened(self) -> None:
        value = "abcdefghijklmnopqrstu"
        assert format_value(value) == "abcdef...rstu"
        assert is_shortened(value) is True

    @pytest.mark.parametrize("value", ["", "x"])
    def test_trivial_values(self, value: str) -> None:
        assert format_value(value) == value
