'''
Rendering of the accumulator according to a format directive.
'''

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .util import FormatError


# Width of the accumulator register, in bits.
REGISTER_WIDTH = 64


class BaseCode(Enum):
    '''
    Output base. Values are the matching format() type characters.
    '''
    BINARY = 'b'
    OCTAL = 'o'
    DECIMAL = 'd'
    HEXADECIMAL = 'X'

    @property
    def bits_per_digit(self):
        # Only hex pads by whole nibbles; everything else pads one digit per bit.
        return 4 if self is BaseCode.HEXADECIMAL else 1


@dataclass
class OutputFormat:
    '''
    How to render one result. Built fresh for every directive.

    signed_display, verbose and colorize are accepted in directives but
    don't change rendering yet.
    '''
    base_prefix: str = ''
    zero_pad: bool = False
    base_code: Optional[BaseCode] = None
    signed_display: bool = False
    verbose: bool = False
    colorize: bool = False
    bit_width: int = REGISTER_WIDTH


def bitmask(width):
    '''
    Return a mask of the low width bits, at most the whole register.
    '''
    return (1 << min(max(width, 0), REGISTER_WIDTH)) - 1


def pad_width(output_format):
    '''
    Minimum number of digits to render, 0 when not padding.
    '''
    if not output_format.zero_pad or output_format.base_code is None:
        return 0
    width = min(max(output_format.bit_width, 0), REGISTER_WIDTH)
    return width // output_format.base_code.bits_per_digit


def format_value(value, output_format):
    '''
    Render value, truncated to the format's bit width, as text.

    :raises FormatError: if the directive never selected a base.
    '''
    if output_format.base_code is None:
        raise FormatError('No output base in format directive')
    masked = value & bitmask(output_format.bit_width)
    digits = format(masked, output_format.base_code.value)
    return output_format.base_prefix + digits.rjust(pad_width(output_format),
                                                    '0')
