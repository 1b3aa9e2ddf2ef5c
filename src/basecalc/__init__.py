'''
Typed-literal base calculator.

Evaluates flat expressions mixing binary, octal, decimal and hexadecimal
literals against a single 64-bit unsigned accumulator, then renders the result
in whatever base, width and padding the trailing directive asks for::

    td10+td20+td50=hfp16    ->  0x0050

Literals are t, a base code (b, o, d, h) and digits. Operators are + - * /
and apply strictly left to right. Everything after = is the format directive:
b, o, d, h for the base, p to zero-pad, digits for the bit width.
'''

from .util import CalcError, LiteralError, FormatError, DivisionByZero
from .cursor import Cursor
from .lexer import Lexer, OperandType
from .formatter import OutputFormat, format_value
from .machine import Machine, OperationType, evaluate
from .cli import CLI


__all__ = ('Machine', 'Lexer', 'Cursor', 'CLI', 'OperandType',
           'OperationType', 'OutputFormat', 'format_value', 'evaluate',
           'CalcError', 'LiteralError', 'FormatError', 'DivisionByZero')
