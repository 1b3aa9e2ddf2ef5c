from functools import wraps


class CalcError(Exception):
    pass


class LiteralError(CalcError):
    '''
    Typed literal that can't be read in its declared base.
    '''


class FormatError(CalcError):
    '''
    Format directive that doesn't describe a renderable output.
    '''


class DivisionByZero(CalcError):
    pass


def wrap_user_errors(fmt, error=CalcError):
    '''
    Decorator that converts stray exceptions to calculator errors.

    Passes through CalcErrors. The message is formatted from the call's
    arguments; the original exception is chained as the cause.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
