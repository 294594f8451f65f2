from functools import wraps


class ExpressionError(Exception):
    pass


class UnmatchedParenthesis(ExpressionError):
    pass


class MalformedExpression(ExpressionError):
    pass


class StackUnderflow(ExpressionError):
    pass


class TokenOverflow(ExpressionError):
    '''
    Input doesn't fit the tokenizer's capacities.
    '''


class TooManyTokens(TokenOverflow):
    pass


class TokenTooLong(TokenOverflow):
    pass


class UnknownOperator(ExpressionError):
    pass


class BadNumeral(ExpressionError):
    pass


def wrap_user_errors(fmt, error=ExpressionError):
    '''
    Decorator that converts foreign exceptions to error.

    Passes through ExpressionErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except ExpressionError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
