from logging import getLogger
from typing import Union

from wecc.errors import FieldMismatchError, OutOfRangeError
from wecc.interface import FieldLike

LOGGER = getLogger(__name__)


class FieldElement(FieldLike):
    '''Element of the finite field Z/pZ, tagged with its (prime) modulus'''

    def __init__(self, number: int, prime: int):
        for v in (number, prime):
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f'Number and prime must be integers, got {v!r} of type {type(v).__name__}')
        if prime < 2:
            raise OutOfRangeError(f'Prime {prime} is not a valid field modulus')
        if number < 0 or number >= prime:
            raise OutOfRangeError(f'Number {number} not in field range 0 to {prime - 1}')

        self.number = number
        self.prime = prime

    def _check_field(self, other: 'FieldElement', op: str):
        if self.prime != other.prime:
            raise FieldMismatchError(f'Cannot {op} {self} and {other}: elements have different prime fields')

    def _reduce(self, number: int) -> 'FieldElement':
        return FieldElement(number % self.prime, self.prime)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.number == other.number and self.prime == other.prime

    def __hash__(self):
        return hash((self.number, self.prime))

    def __add__(self, other: Union['FieldElement', int]) -> 'FieldElement':
        if isinstance(other, FieldElement):
            self._check_field(other, 'add')
            return self._reduce(self.number + other.number)
        elif isinstance(other, int):
            return self._reduce(self.number + other)
        return NotImplemented

    def __sub__(self, other: 'FieldElement') -> 'FieldElement':
        if isinstance(other, FieldElement):
            self._check_field(other, 'subtract')
            return self + (-other)
        return NotImplemented

    def __mul__(self, other: Union['FieldElement', int]) -> 'FieldElement':
        if isinstance(other, FieldElement):
            self._check_field(other, 'multiply')
            return self._reduce(self.number * other.number)
        elif isinstance(other, int):
            return self._reduce(self.number * other)
        return NotImplemented

    def __truediv__(self, other: 'FieldElement') -> 'FieldElement':
        if isinstance(other, FieldElement):
            self._check_field(other, 'divide')
            return self * other.inverse()
        return NotImplemented

    def __neg__(self) -> 'FieldElement':
        return self._reduce(-self.number)

    def pow(self, exp: int) -> 'FieldElement':
        '''
            Raise to an integer power.
            A negative exponent is first reduced modulo the order of the multiplicative group
            (prime - 1), since x^(p-1) = 1 for any nonzero x (Fermat's little theorem).
        '''
        if exp < 0:
            reduced = exp % (self.prime - 1)
            LOGGER.debug('Reduced exponent %d to %d in field of order %d', exp, reduced, self.prime)
            exp = reduced

        return FieldElement(pow(self.number, exp, self.prime), self.prime)

    def inverse(self) -> 'FieldElement':
        '''Multiplicative inverse, x^(p-2)'''
        if self.is_zero():
            raise ZeroDivisionError(f'{self} has no multiplicative inverse')

        return self.pow(self.prime - 2)

    def is_zero(self) -> bool:
        return self.number == 0

    def __int__(self):
        return self.number

    def __repr__(self):
        return f'FieldElement_{self.number}({self.prime})'
