from __future__ import annotations


class LinslError(Exception):
    """ Base class for all Linsl errors"""
    pass


class LinslSyntaxError(LinslError):
    """ Raised for malformed source text or a malformed special form"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position


class LinslUnbalancedParens(LinslSyntaxError):
    """ Raised when the number of '(' and ')' in the source differ"""

    def __init__(self, opening: int, closing: int):
        super().__init__(f"Unbalanced parentheses ({opening}, {closing})")
        self.opening = opening
        self.closing = closing


class LinslNameError(LinslError):
    """ Raised when a symbol is looked up before it is bound"""


class LinslTypeError(LinslError):
    """ Raised when an operand has the wrong kind of value"""


class LinslArityError(LinslError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class LinslDivisionError(LinslError):
    """ Raised when inverting zero"""
