'''
Arbitrary precision integer RPN calculator.

Integers of any size, in base 10**9 limbs, driven by a stack machine: + - and
*, no division. Reads one line such as

    999999999999999999999999999 1 +

and prints its single result, or where and why the expression is wrong.
'''

from .bignum import BigNum
from .cli import CLI
from .lexer import Lexer
from .limbs import LimbBuffer
from .machine import Machine, evaluate
from .util import (RPNError, ParseError, InvalidCharacter, InvalidNumber,
                   UnsupportedOperation, InsufficientOperands,
                   MissingOperator, OutOfMemory)


__all__ = ('BigNum', 'LimbBuffer', 'Machine', 'Lexer', 'CLI', 'evaluate',
           'RPNError', 'ParseError', 'InvalidCharacter', 'InvalidNumber',
           'UnsupportedOperation', 'InsufficientOperands', 'MissingOperator',
           'OutOfMemory')
