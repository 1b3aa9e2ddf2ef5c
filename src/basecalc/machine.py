from enum import Enum
import logging
import operator

import regex

from .util import DivisionByZero
from .cursor import Cursor, EndOfInput
from .lexer import Lexer, OperandType
from .formatter import REGISTER_WIDTH, bitmask, format_value


log = logging.getLogger(__name__)


class OperationType(Enum):
    '''
    Operator waiting for its right-hand literal. Values are the symbols.
    '''
    NONE = ''
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'


class Machine:
    '''
    Accumulator machine for typed-literal expressions.

    Reads an expression left to right, no precedence: each literal is folded
    into a single unsigned register by the operator before it, and the
    register is rendered when the format marker is reached.
    '''

    MASK = bitmask(REGISTER_WIDTH)
    TYPE_MARKER = 't'
    FORMAT_MARKER = '='
    WHITESPACE = regex.compile(r'\s+')

    # Unsigned arithmetic; results are wrapped to the register by apply().
    BUILTINS = {
        OperationType.ADD: operator.__add__,
        OperationType.SUBTRACT: operator.__sub__,
        OperationType.MULTIPLY: operator.__mul__,
        OperationType.DIVIDE: operator.__floordiv__,
    }
    OPERATORS = {operation.value: operation
                 for operation
                 in BUILTINS}

    def __init__(self, lexer=None):
        '''
        Create a machine with a cleared register.

        :param lexer: Reader for literals and format directives.
        '''
        self.lexer = lexer or Lexer()
        self.reset()

    def reset(self):
        '''
        Clear the register, pending operator and result.
        '''
        self.accumulator = 0
        self.pending = OperationType.NONE
        self.result = ''
        self.done = False

    def evaluate(self, expression):
        '''
        Evaluate expression and return its rendered result.

        Returns an empty string if the expression has no format marker.
        '''
        self.reset()
        cursor = Cursor(type(self).WHITESPACE.sub('', expression))
        for char in cursor:
            self.step(char, cursor)
            if self.done:
                break
        if self.pending is not OperationType.NONE:
            log.debug('Operator %r never got its operand', self.pending.value)
        return self.result

    def step(self, char, cursor):
        '''
        Act on one character of the expression body.
        '''
        if char in type(self).OPERATORS:
            self.pending = type(self).OPERATORS[char]
        elif char == type(self).TYPE_MARKER:
            self.literal(cursor)
        elif char == type(self).FORMAT_MARKER:
            self.render(cursor)
        # Anything else is noise.

    def literal(self, cursor):
        '''
        Read a typed literal and fold it into the register.
        '''
        try:
            code = cursor.read()
        except EndOfInput:
            log.debug('Type marker at end of input')
            return
        operand_type = OperandType.from_code(code)
        value = self.lexer.read_literal(cursor, operand_type)
        log.debug('Literal %d (%s)', value, operand_type.name.lower())
        # Negative literals become their two's complement.
        value &= type(self).MASK
        if self.pending is OperationType.NONE:
            self.accumulator = value
        else:
            self.accumulator = self.apply(self.pending,
                                          self.accumulator,
                                          value)
            self.pending = OperationType.NONE

    def apply(self, operation, left, right):
        '''
        Return left operation right, wrapped to the register width.

        :raises DivisionByZero: when dividing by zero.
        '''
        if operation is OperationType.DIVIDE and right == 0:
            raise DivisionByZero('Cannot divide {} by zero'.format(left))
        result = type(self).BUILTINS[operation](left, right) & type(self).MASK
        log.debug('%d %s %d = %d', left, operation.value, right, result)
        return result

    def render(self, cursor):
        '''
        Read the format directive and render the register. Terminal.
        '''
        output_format = self.lexer.read_format(cursor)
        log.debug('Rendering %d as %s', self.accumulator, output_format)
        self.result = format_value(self.accumulator, output_format)
        self.done = True


def evaluate(expression):
    '''
    Evaluate expression on a fresh machine.
    '''
    return Machine().evaluate(expression)
