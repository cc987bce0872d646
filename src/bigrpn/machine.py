from collections import deque
import operator

from .bignum import BigNum
from .lexer import Lexer
from .util import (InsufficientOperands, InvalidNumber, MissingOperator,
                   OutOfMemory, UnsupportedOperation, wrap_user_errors)


class Machine:
    '''
    Arithmetic stack machine (RPN calculator) over BigNums.

    Takes lexemes and runs them. Every evaluation starts and ends with an
    empty stack, whatever way it ends.
    '''

    # Arithmetic operators on the items of a machine.
    OPERATORS = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
    }
    # Lexed, but refused when reached.
    UNSUPPORTED = frozenset({'/'})

    assert OPERATORS.keys() | UNSUPPORTED == set(Lexer.OPERATORS)

    def __init__(self):
        '''
        Create empty stack machine.
        '''
        self.stack = deque()
        self.lexer = Lexer()

    def evaluate(self, line):
        '''
        Run a whole line, and return the single value it leaves.

        Raises an RPNError subclass, with the offending offset, otherwise.
        '''
        try:
            for match in self.lexer.lex(line):
                if self.lexer.isfeedable(match):
                    self.feed(self.lexer.matchedgroups(match),
                              position=match.start())
            return self._result()
        except MemoryError as e:
            raise OutOfMemory('Memory allocation failed') from e
        finally:
            self.clrstack()

    def feed(self, groups, position=-1):
        '''
        Stack or run lexemes on machine.

        :param groups: Named groups matched by the lexeme.
        :param position: Offset of the lexeme, for error reporting.
        '''
        if 'number' in groups:
            self._pshstack(self._iconvert(groups['number'],
                                          position=position))
        elif 'operator' in groups:
            self._apply(groups['operator'], position)

    @wrap_user_errors(InvalidNumber, 'Invalid number at position {position}')
    def _iconvert(self, number, position=-1):
        '''
        Convert number lexeme to a BigNum.
        '''
        return BigNum.from_string(number)

    def _apply(self, name, position):
        '''
        Pop operands, run operator name on them, push the result.
        '''
        if name in type(self).UNSUPPORTED:
            raise UnsupportedOperation('Unsupported operation', position)
        f = type(self).OPERATORS[name]
        # If you don't reverse, you'll do 3 - 10 when you say 10 3 -.
        left, right = reversed(self._popstack(2, position=position))
        self._pshstack(f(left, right))

    def _result(self):
        '''
        Pop the sole value left once input is exhausted.
        '''
        if not self.stack:
            raise InsufficientOperands('No result', 0)
        elif len(self.stack) > 1:
            raise MissingOperator('Operation symbol is missed', 0)
        return self.stack.pop()

    def clrstack(self):
        '''
        Clear everything from the stack.
        '''
        self.stack.clear()

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1, position=-1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise InsufficientOperands('Insufficient operands for operation',
                                       position)
        return [self.stack.pop() for _ in range(n)]


def evaluate(line):
    '''
    Evaluate one RPN line on a fresh machine.
    '''
    return Machine().evaluate(line)
