'''
Formatter tests
'''

from basecalc.util import FormatError
from basecalc.formatter import BaseCode, OutputFormat, bitmask, format_value

from pytest import raises, mark


def test_bitmask():
    assert bitmask(0) == 0
    assert bitmask(8) == 0xFF
    assert bitmask(64) == 2**64 - 1
    # Wider than the register is the whole register.
    assert bitmask(128) == 2**64 - 1


def test_hex_padding():
    output_format = OutputFormat(base_prefix='0x', zero_pad=True,
                                 base_code=BaseCode.HEXADECIMAL, bit_width=16)
    assert format_value(80, output_format) == '0x0050'


def test_hex_padding_truncates_width():
    output_format = OutputFormat(zero_pad=True,
                                 base_code=BaseCode.HEXADECIMAL, bit_width=10)
    assert format_value(1, output_format) == '01'


def test_binary_padding():
    output_format = OutputFormat(base_prefix='0b', zero_pad=True,
                                 base_code=BaseCode.BINARY, bit_width=8)
    assert format_value(5, output_format) == '0b00000101'


def test_decimal_padding_is_bit_width_digits():
    output_format = OutputFormat(zero_pad=True,
                                 base_code=BaseCode.DECIMAL, bit_width=8)
    assert format_value(255, output_format) == '00000255'


def test_no_padding_by_default():
    output_format = OutputFormat(base_code=BaseCode.OCTAL)
    assert format_value(8, output_format) == '10'


def test_uppercase_hex():
    output_format = OutputFormat(base_prefix='0x',
                                 base_code=BaseCode.HEXADECIMAL)
    assert format_value(0xdeadbeef, output_format) == '0xDEADBEEF'


def test_full_register_is_unsigned():
    output_format = OutputFormat(base_code=BaseCode.DECIMAL)
    assert format_value(2**64 - 1, output_format) == '18446744073709551615'


@mark.parametrize('width', [0, 1, 7, 8, 13, 32, 63, 64])
def test_mask_bounds_magnitude(width):
    output_format = OutputFormat(base_code=BaseCode.DECIMAL, bit_width=width)
    rendered = format_value(0xFEDCBA9876543210, output_format)
    assert int(rendered) <= 2**width - 1


def test_zero_width_with_padding():
    output_format = OutputFormat(zero_pad=True, base_code=BaseCode.DECIMAL,
                                 bit_width=0)
    assert format_value(12, output_format) == '0'


def test_unused_flags_do_not_change_rendering():
    plain = OutputFormat(base_code=BaseCode.DECIMAL)
    flagged = OutputFormat(base_code=BaseCode.DECIMAL, signed_display=True,
                           verbose=True, colorize=True)
    assert format_value(2**64 - 1, plain) == format_value(2**64 - 1, flagged)


def test_missing_base():
    with raises(FormatError, match='No output base'):
        format_value(1, OutputFormat(zero_pad=True))


def test_padding_stops_at_register_width():
    output_format = OutputFormat(zero_pad=True, base_code=BaseCode.BINARY,
                                 bit_width=10**30)
    assert format_value(1, output_format) == '1'.rjust(64, '0')
