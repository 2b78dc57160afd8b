import sys
import unittest

import hypothesis.strategies as st
from hypothesis import given, settings

from wecc.ecc import k_point
from wecc.point import Point

SLOW_SETTINGS = {}
if "--fast" in sys.argv:  # pragma: no cover
    SLOW_SETTINGS["max_examples"] = 10
else:
    SLOW_SETTINGS["max_examples"] = 100

PRIME = 223
ORDER = 21  # order of G=(47, 71) on y^2 = x^3 + 7 over F_223

# k*G for k in [0 .. 21], None for the point at infinity
MULTIPLES = [
    None, (47, 71), (36, 111), (15, 137), (194, 51), (126, 96), (139, 137), (92, 47), (116, 55), (69, 86),
    (154, 150), (154, 73), (69, 137), (116, 168), (92, 176), (139, 86), (126, 127), (194, 172), (15, 86),
    (36, 112), (47, 152), None,
]


def repeated_addition(k, P):
    res = Point.infinity(P.a, P.b)
    for _ in range(k):
        res = res + P
    return res


class TestScalarMultiplication(unittest.TestCase):

    def setUp(self):
        self.G = Point.from_finite_field(47, 71, 0, 7, PRIME)
        self.INF = Point.infinity(self.G.a, self.G.b)

    def expected(self, k):
        xy = MULTIPLES[k]
        if xy is None:
            return self.INF
        return Point.from_finite_field(xy[0], xy[1], 0, 7, PRIME)

    def test_zero(self):
        self.assertEqual(0 * self.G, self.INF)
        other = Point.from_finite_field(15, 86, 0, 7, PRIME)
        self.assertEqual(0 * other, self.INF)

    def test_group_order(self):
        self.assertEqual(ORDER * self.G, self.INF)
        self.assertEqual((ORDER + 1) * self.G, self.G)

    def test_known_multiples(self):
        for k in range(len(MULTIPLES)):
            self.assertEqual(k * self.G, self.expected(k), f'Scalar multiplication fails at k={k}')

    def test_vs_repeated_addition(self):
        for k in range(23):
            self.assertEqual(k_point(k, self.G), repeated_addition(k, self.G), f'fails at k={k}')

    def test_operand_order(self):
        self.assertEqual(self.G * 5, 5 * self.G)
        self.assertEqual(k_point(5, self.G), 5 * self.G)

    def test_identity(self):
        self.assertEqual(7 * self.INF, self.INF)

    def test_invalid_scalar(self):
        with self.assertRaises(ValueError):
            -1 * self.G
        with self.assertRaises(TypeError):
            k_point(2.0, self.G)
        with self.assertRaises(TypeError):
            k_point(True, self.G)

    def test_real_curve(self):
        P = Point(-1, -1, 5, 7)
        self.assertEqual(2 * P, Point(18, 77, 5, 7))
        self.assertEqual(1 * P, P)
        self.assertEqual(0 * P, Point.infinity(5, 7))
        self.assertEqual(2 * Point(-1, 0, 5, 6), Point.infinity(5, 6))

    @settings(**SLOW_SETTINGS)
    @given(st.integers(min_value=0, max_value=1 << 64))
    def test_reduction_by_order(self, k):
        self.assertEqual(k * self.G, self.expected(k % ORDER))

    @settings(**SLOW_SETTINGS)
    @given(st.integers(min_value=0, max_value=1 << 32), st.integers(min_value=0, max_value=1 << 32))
    def test_distributive(self, k1, k2):
        self.assertEqual((k1 + k2) * self.G, k1 * self.G + k2 * self.G)
        self.assertEqual((k1 * k2) * self.G, k1 * (k2 * self.G))


if __name__ == "__main__":
    unittest.main()
