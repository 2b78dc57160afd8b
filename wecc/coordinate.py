from abc import ABC, abstractmethod
from typing import Callable, Union

from wecc.interface import FieldLike, Pow, ZeroCheck
from wecc.real_value import RealValue


class Coordinate(Pow, ZeroCheck, ABC):
    '''
        A curve coordinate: either a finite Value wrapping a FieldLike, or the point at Infinity.

        Infinity is absorbing for -, *, / (an infinite operand means the slope is undefined) but is
        the identity for +.
    '''

    @classmethod
    def of(cls, value: Union['Coordinate', FieldLike, int, float]) -> 'Coordinate':
        '''
            Lift the given value into a coordinate:
                1) Coordinate: as-is
                2) FieldLike (FieldElement, RealValue, ...): wrapped as Value
                3) int or float: wrapped as a RealValue, for curves over the reals
        '''
        if isinstance(value, Coordinate):
            return value
        if isinstance(value, FieldLike):
            return Value(value)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return Value(RealValue(value))

        raise TypeError(f'Can not use {value!r} of type {type(value).__name__} as a coordinate')

    @abstractmethod
    def is_infinity(self) -> bool:
        pass

    @abstractmethod
    def map(self, func: Callable[[FieldLike], FieldLike]) -> 'Coordinate':
        """Apply func to the finite value; Infinity stays Infinity."""
        pass

    def pow(self, exp: int) -> 'Coordinate':
        return self.map(lambda v: v.pow(exp))

    def _finite_op(self, other, op: Callable[[FieldLike, FieldLike], FieldLike]) -> 'Coordinate':
        if self.is_infinity() or other.is_infinity():
            return INF
        return Value(op(self.value, other.value))

    def __add__(self, other: Union['Coordinate', int]) -> 'Coordinate':
        if isinstance(other, int):
            return self.map(lambda v: v + other)
        if not isinstance(other, Coordinate):
            return NotImplemented

        if self.is_infinity():
            return other
        if other.is_infinity():
            return self
        return Value(self.value + other.value)

    def __radd__(self, other: int) -> 'Coordinate':
        if isinstance(other, int):
            return self.map(lambda v: v + other)
        return NotImplemented

    def __sub__(self, other: 'Coordinate') -> 'Coordinate':
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self._finite_op(other, lambda u, v: u - v)

    def __mul__(self, other: Union['Coordinate', int]) -> 'Coordinate':
        if isinstance(other, int):
            return self.map(lambda v: v * other)
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self._finite_op(other, lambda u, v: u * v)

    def __rmul__(self, other: int) -> 'Coordinate':
        if isinstance(other, int):
            return self.map(lambda v: v * other)
        return NotImplemented

    def __truediv__(self, other: 'Coordinate') -> 'Coordinate':
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self._finite_op(other, lambda u, v: u / v)

    def __neg__(self) -> 'Coordinate':
        return self.map(lambda v: -v)


class Value(Coordinate):

    def __init__(self, value: FieldLike):
        if not isinstance(value, FieldLike):
            raise TypeError(f'Coordinate value must be FieldLike, got {type(value).__name__}')
        self.value = value

    def is_infinity(self) -> bool:
        return False

    def is_zero(self) -> bool:
        return self.value.is_zero()

    def map(self, func: Callable[[FieldLike], FieldLike]) -> 'Coordinate':
        return Value(func(self.value))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return not other.is_infinity() and self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return repr(self.value)


class Infinity(Coordinate):
    '''Singleton repr. of the infinite coordinate'''
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Infinity, cls).__new__(cls)
        return cls._instance

    def is_infinity(self) -> bool:
        return True

    def is_zero(self) -> bool:
        return False

    def map(self, func: Callable[[FieldLike], FieldLike]) -> 'Coordinate':
        return self

    def __reduce__(self):
        return Infinity, ()

    def __repr__(self):
        return "Inf"


INF = Infinity()
