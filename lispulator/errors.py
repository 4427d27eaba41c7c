
class LispulatorError(Exception):
    """ Base class for all LISPulator errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LispulatorTokenizeError(LispulatorError):
    """ Raised when the input cannot be split into tokens"""


class LispulatorSyntaxError(LispulatorError):
    """ Raised when there is a syntax error"""


class LispulatorDepthError(LispulatorSyntaxError):
    """ Raised when an expression is nested deeper than the configured limit"""


class LispulatorUnboundSymbol(LispulatorError):
    """ Raised when a symbol is used before it is bound"""


class LispulatorTypeError(LispulatorError):
    """ Raised when a value of the wrong kind is used"""


class LispulatorArityError(LispulatorError):
    """ Raised when the number of arguments passed to a function is incorrect"""
