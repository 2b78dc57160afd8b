class EccError(Exception):
    """Base class of all errors raised by wecc."""


class OutOfRangeError(EccError, ValueError):
    """Field element number not in the range 0 to prime - 1."""


class NotOnCurveError(EccError, ValueError):
    """Point coordinates do not satisfy y^2 = x^3 + ax + b."""

    def __init__(self, x, y, a, b):
        super().__init__(f'({x},{y}) is not on the curve y^2 = x^3 + {a}x + {b}')
        self.x = x
        self.y = y


class CurveMismatchError(EccError, TypeError):
    """Points on different curves can't be combined."""


class FieldMismatchError(EccError, TypeError):
    """Field elements of different prime fields can't be combined."""
