"""
errors.py

Exception types shared by the ring, field and combinatorics modules.
"""


class InvalidArgument(ValueError):
    """Raised when a required argument is missing, empty, malformed or out of range."""
    pass


class NoInverseError(ArithmeticError):
    """Raised when a field element operation needs an inverse that does not exist."""
    pass
