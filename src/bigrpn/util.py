from functools import wraps


class RPNError(Exception):
    '''
    Base of every error an evaluation can end with.

    :param message: User facing text, what the CLI prints.
    :param position: 0-based offset into the input line, -1 if not
                     applicable.
    '''
    exit_status = 1

    def __init__(self, message, position=-1):
        super().__init__(message, position)
        self.message = message
        self.position = position

    def __str__(self):
        return self.message


class ParseError(RPNError, ValueError):
    '''
    Malformed decimal text given to BigNum.from_string.
    '''


class InvalidCharacter(RPNError):
    pass


class InvalidNumber(RPNError):
    pass


class UnsupportedOperation(RPNError):
    pass


class InsufficientOperands(RPNError):
    pass


class MissingOperator(RPNError):
    pass


class OutOfMemory(RPNError):
    exit_status = 2


def wrap_user_errors(kind, fmt):
    '''
    Decorator converting ValueErrors raised by f into kind.

    The message is fmt formatted with f's arguments; a position keyword
    argument, if given, becomes the error's position. MemoryErrors become
    OutOfMemory. Passes through other RPNErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            position = kwargs.get('position', -1)
            try:
                return f(*args, **kwargs)
            except MemoryError as e:
                raise OutOfMemory('Memory allocation failed', position) from e
            except ValueError as e:
                raise kind(fmt.format(*args, **kwargs), position) from e
        return wrapper
    return decorator
