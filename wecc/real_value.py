import math
import struct
from typing import Union

from wecc.interface import FieldLike


def to_single(value: float) -> float:
    '''Round a float to the nearest IEEE-754 single precision value (overflow goes to +-inf)'''
    try:
        return struct.unpack('f', struct.pack('f', value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class RealValue(FieldLike):
    '''
        A real number as curve coordinate, for the geometric (illustrative) curves over R.
        The value is held at single precision and every result is rounded back to it.
        Equality is the plain float equality, no tolerance is applied.
    '''

    def __init__(self, value: Union[int, float]):
        self.value = to_single(float(value))

    def __eq__(self, other) -> bool:
        if not isinstance(other, RealValue):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __add__(self, other: Union['RealValue', int]) -> 'RealValue':
        if isinstance(other, RealValue):
            return RealValue(self.value + other.value)
        elif isinstance(other, int):
            return RealValue(self.value + other)
        return NotImplemented

    def __sub__(self, other: 'RealValue') -> 'RealValue':
        if isinstance(other, RealValue):
            return RealValue(self.value - other.value)
        return NotImplemented

    def __mul__(self, other: Union['RealValue', int]) -> 'RealValue':
        if isinstance(other, RealValue):
            return RealValue(self.value * other.value)
        elif isinstance(other, int):
            return RealValue(self.value * other)
        return NotImplemented

    def __truediv__(self, other: 'RealValue') -> 'RealValue':
        if isinstance(other, RealValue):
            return RealValue(self.value / other.value)
        return NotImplemented

    def __neg__(self) -> 'RealValue':
        return RealValue(-self.value)

    def pow(self, exp: int) -> 'RealValue':
        return RealValue(self.value ** exp)

    def is_zero(self) -> bool:
        return self.value == 0.0

    def __float__(self):
        return self.value

    def __repr__(self):
        return f'{self.value}'
