"""數字字串編解碼測試"""

import pytest
from fpetool.errors import InvalidRadixError, InvalidSymbolError
from fpetool.radix import ALPHABET, check_radix, num_to_str, str_to_num, symbols_for


class TestStrToNum:
    """字串轉整數"""

    def test_decimal(self):
        assert str_to_num("0123456789", 10) == 123456789

    def test_hex_uses_uppercase(self):
        assert str_to_num("FF", 16) == 255

    def test_radix_62(self):
        assert str_to_num("zz", 62) == 61 * 62 + 61

    def test_large_value_beyond_64_bits(self):
        assert str_to_num("z" * 20, 62) == 62**20 - 1
        assert str_to_num("z" * 20, 62) > 2**119

    def test_symbol_outside_radix(self):
        with pytest.raises(InvalidSymbolError) as exc:
            str_to_num("12G4", 10)
        assert exc.value.symbol == "G"
        assert exc.value.radix == 10
        assert exc.value.field == "data"

    def test_unknown_symbol(self):
        with pytest.raises(InvalidSymbolError):
            str_to_num("12-4", 62)

    def test_lowercase_not_valid_for_radix_36(self):
        with pytest.raises(InvalidSymbolError):
            str_to_num("abc", 36)


class TestNumToStr:
    """整數轉固定長度字串"""

    def test_left_padding(self):
        assert num_to_str(123456789, 10, 10) == "0123456789"

    def test_zero(self):
        assert num_to_str(0, 10, 4) == "0000"

    def test_radix_62_full_width(self):
        assert num_to_str(62**20 - 1, 62, 20) == "z" * 20

    def test_value_too_wide_is_rejected(self):
        with pytest.raises(ValueError):
            num_to_str(100, 10, 2)

    def test_negative_is_rejected(self):
        with pytest.raises(ValueError):
            num_to_str(-1, 10, 2)

    def test_roundtrip(self):
        for radix in (2, 8, 10, 16, 26, 36, 62):
            for value in (0, 1, radix - 1, radix**7 - 1, 12345 % radix**7):
                assert str_to_num(num_to_str(value, radix, 7), radix) == value


class TestRadix:
    """基數範圍"""

    def test_symbols_for(self):
        assert symbols_for(10) == "0123456789"
        assert symbols_for(16) == "0123456789ABCDEF"
        assert symbols_for(62) == ALPHABET

    @pytest.mark.parametrize("radix", [0, 1, 63, 256])
    def test_out_of_range(self, radix):
        with pytest.raises(InvalidRadixError):
            check_radix(radix)

    @pytest.mark.parametrize("radix", [2, 62])
    def test_bounds_accepted(self, radix):
        check_radix(radix)
