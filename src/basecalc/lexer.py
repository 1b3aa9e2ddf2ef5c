from dataclasses import replace
from enum import Enum

import regex

from .util import LiteralError, FormatError, wrap_user_errors
from .formatter import REGISTER_WIDTH, BaseCode, OutputFormat


INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class OperandType(Enum):
    '''
    Base of a typed literal, selected by the character after the t marker.
    '''
    BINARY = ('b', 2, r'[01]')
    OCTAL = ('o', 8, r'[0-7]')
    DECIMAL = ('d', 10, r'[0-9]')
    HEXADECIMAL = ('h', 16, r'[0-9a-fA-F]')

    def __init__(self, code, base, alphabet):
        self.code = code
        self.base = base
        self.alphabet = regex.compile(alphabet)

    @classmethod
    def from_code(cls, code):
        for operand_type in cls:
            if operand_type.code == code:
                return operand_type
        raise LiteralError('Unknown operand type {!r}'.format(code))

    def accepts(self, char):
        return self.alphabet.fullmatch(char) is not None


@wrap_user_errors('Cannot read {0!r} as a base {1.base} literal', LiteralError)
def parse_literal(text, operand_type):
    '''
    Parse literal text into a signed 64-bit integer.
    '''
    value = int(text, operand_type.base)
    if not INT64_MIN <= value <= INT64_MAX:
        raise LiteralError('{!r} does not fit in 64 bits'.format(text))
    return value


class Lexer:
    '''
    Readers for the two kinds of multi-character lexemes: typed literals and
    format directives.

    Like the cursor it reads from, holds no state between calls.
    '''
    # Only valid as the first character of a literal.
    SIGNS = '+-'
    DIGIT = regex.compile(r'[0-9]')
    # Directive character to the OutputFormat fields it sets.
    DIRECTIVES = {
        'b': {'base_code': BaseCode.BINARY, 'base_prefix': '0b'},
        'o': {'base_code': BaseCode.OCTAL},
        'd': {'base_code': BaseCode.DECIMAL},
        'h': {'base_code': BaseCode.HEXADECIMAL, 'base_prefix': '0x'},
        's': {'signed_display': True},
        'u': {'signed_display': False},
        'f': {'verbose': True},
        'c': {'colorize': True},
        'p': {'zero_pad': True},
    }

    def collect_literal(self, cursor, operand_type):
        '''
        Take the longest run of characters valid for operand_type.

        The first character that doesn't fit is pushed back for the caller.
        May return an empty string.
        '''
        text = ''
        for char in cursor:
            if (not text and char in type(self).SIGNS) \
               or operand_type.accepts(char):
                text += char
            else:
                cursor.push_back()
                break
        return text

    def read_literal(self, cursor, operand_type):
        '''
        Read and parse a literal of operand_type.

        :raises LiteralError: on an empty, sign-only or oversized literal.
        '''
        return parse_literal(self.collect_literal(cursor, operand_type),
                             operand_type)

    def read_format(self, cursor):
        '''
        Read the rest of the input as a format directive.

        Unknown characters are skipped. Digits, wherever they appear, make up
        the bit width.
        '''
        output_format = OutputFormat()
        width = ''
        for char in cursor:
            if char in type(self).DIRECTIVES:
                output_format = replace(output_format,
                                        **type(self).DIRECTIVES[char])
            elif type(self).DIGIT.fullmatch(char):
                width += char
        if width:
            output_format.bit_width = self._bit_width(width)
        return output_format

    def _bit_width(self, digits):
        '''
        Convert directive digits to a bit width no wider than the register.

        :raises FormatError: on a wider bit width.
        '''
        significant = digits.lstrip('0') or '0'
        if len(significant) > len(str(REGISTER_WIDTH)) \
           or int(significant) > REGISTER_WIDTH:
            raise FormatError('Bit width wider than {} bits'.format(
                REGISTER_WIDTH))
        return int(significant)
