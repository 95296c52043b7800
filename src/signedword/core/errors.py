"""Exception hierarchy for signed word arithmetic."""


class SignedWordError(Exception):
    """Base class for failures reported by word arithmetic."""


class WordOverflowError(SignedWordError, OverflowError):
    """Raised when a result does not fit its target width."""


class RangeError(WordOverflowError, ValueError):
    """Raised when an unsigned value would occupy the sign bit."""


class UnderflowError(SignedWordError, ArithmeticError):
    """Raised when a negative value reaches an unsigned-only operation."""


class DivideByZeroError(SignedWordError, ZeroDivisionError):
    """Raised on division or modulo by zero."""
