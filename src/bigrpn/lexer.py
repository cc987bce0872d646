from functools import reduce
import operator

import regex

from .util import InvalidCharacter


class Lexer:
    '''
    Lexer for the RPN *regular* grammar.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Integer, optionally negative. A lone - is the operator, not a number.
    # ASCII digits only; any other digit is an invalid character.
    NUMBER = r'''
              -?
              [0-9]+
              '''
    OPERATORS = '+-*/'
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    # ASCII whitespace only, no-break space and friends are invalid.
    SPACE = r'[\ \t\n\r\f\v]+'

    # All possible lexemes. Number first, so -1 isn't - then 1.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)
    PATTERN = regex.compile(LEXEME, flags=FLAGS)

    def lex(self, line):
        '''
        Take a line and yield all lexemes, spaces included.

        Match objects know their offset in line (match.start()). Raises
        InvalidCharacter on the first character no lexeme starts with.
        '''
        position = 0
        while position < len(line):
            match = type(self).PATTERN.match(line, position)
            if match is None:
                raise InvalidCharacter(
                    'Invalid character at position {}'.format(position),
                    position)
            yield match
            position = match.end()

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to machine.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return the named groups the lexeme matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
