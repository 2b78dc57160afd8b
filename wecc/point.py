from logging import getLogger
from typing import Union

from wecc.coordinate import INF, Coordinate
from wecc.ecc import k_point
from wecc.errors import CurveMismatchError, NotOnCurveError
from wecc.field_element import FieldElement
from wecc.interface import FieldLike

LOGGER = getLogger(__name__)

CoordinateLike = Union[Coordinate, FieldLike, int, float]


class Point:
    """
        A point on the short weierstrass elliptic curve:
            y^2 = x^3 + ax + b
        where a, b (and so x, y) are coordinates over any FieldLike domain, e.g. a prime
        field Z/pZ or the reals. The point at infinity has both x and y at Infinity and is
        the identity of the curve group.

        Points are values: addition and scalar multiplication always return new points.
    """

    def __init__(self, x: CoordinateLike, y: CoordinateLike, a: CoordinateLike, b: CoordinateLike):
        x, y, a, b = (Coordinate.of(c) for c in (x, y, a, b))
        self.verify_instances(x, y, a, b)

        # half-infinite: exactly one of x, y at Infinity
        if x.is_infinity() != y.is_infinity():
            LOGGER.debug('Rejected half-infinite point (%s,%s) on curve a=%s, b=%s', x, y, a, b)
            raise NotOnCurveError(x, y, a, b)

        if not x.is_infinity() and y ** 2 != x ** 3 + x * a + b:
            LOGGER.debug('Rejected point (%s,%s) on curve a=%s, b=%s', x, y, a, b)
            raise NotOnCurveError(x, y, a, b)

        self.x = x
        self.y = y
        self.a = a
        self.b = b

    @staticmethod
    def verify_instances(*coords: Coordinate):
        """All finite coordinates of a point must share one domain type."""
        types = {type(c.value) for c in coords if not c.is_infinity()}
        if len(types) > 1:
            names = ', '.join(sorted(t.__name__ for t in types))
            raise TypeError(f'All coordinates must be of the same type, got: {names}')

    @classmethod
    def copy(cls, x: Coordinate, y: Coordinate, a: Coordinate, b: Coordinate) -> 'Point':
        '''Build a point from coordinates already known to be on the curve (no validation)'''
        p = cls.__new__(cls)
        p.x, p.y, p.a, p.b = x, y, a, b
        return p

    @classmethod
    def infinity(cls, a: CoordinateLike, b: CoordinateLike) -> 'Point':
        '''The identity point of the curve given by a, b'''
        return cls(INF, INF, a, b)

    @classmethod
    def from_finite_field(cls, x: int, y: int, a: int, b: int, prime: int) -> 'Point':
        '''
            Build a point over Z/pZ from raw integers.
            usage:
                $ p = Point.from_finite_field(47, 71, 0, 7, 223)
        '''
        x, y, a, b = (FieldElement(n, prime) for n in (x, y, a, b))
        return cls(x, y, a, b)

    def is_infinity(self) -> bool:
        return self.x.is_infinity()

    def _identity(self) -> 'Point':
        return Point.copy(INF, INF, self.a, self.b)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.a == other.a and self.b == other.b

    def __hash__(self):
        return hash((self.x, self.y, self.a, self.b))

    def __neg__(self) -> 'Point':
        """Reflect the point about the x axis, (x, y) -> (x, -y)"""
        if self.is_infinity():
            return self
        return Point.copy(self.x, -self.y, self.a, self.b)

    def __add__(self, other: 'Point') -> 'Point':
        if not isinstance(other, Point):
            return NotImplemented

        if self.a != other.a or self.b != other.b:
            raise CurveMismatchError(f'Points {self}, {other} are not on the same curve')

        if self.x.is_infinity():
            return other
        if other.x.is_infinity():
            return self

        # vertical line: P + (-P)
        if self.x == other.x and self.y != other.y:
            return self._identity()

        if self == other:
            # tangent is vertical
            if self.y.is_zero():
                return self._identity()

            slope = (3 * self.x ** 2 + self.a) / (2 * self.y)
        else:
            slope = (other.y - self.y) / (other.x - self.x)

        x3 = slope ** 2 - self.x - other.x
        y3 = slope * (self.x - x3) - self.y
        return Point.copy(x3, y3, self.a, self.b)

    def __sub__(self, other: 'Point') -> 'Point':
        if not isinstance(other, Point):
            return NotImplemented
        return self + (-other)

    def __rmul__(self, k: int) -> 'Point':
        return k_point(k, self)

    __mul__ = __rmul__

    def __repr__(self):
        return f'Point({self.x},{self.y})_{self.a}_{self.b}'
