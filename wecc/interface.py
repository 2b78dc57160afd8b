from abc import ABC, abstractmethod


class Pow(ABC):
    """Exponentiation by a signed integer."""

    @abstractmethod
    def pow(self, exp: int):
        """Raise the value to an integer power (positive or negative)."""
        pass

    def __pow__(self, exp: int):
        return self.pow(exp)


class ZeroCheck(ABC):

    @abstractmethod
    def is_zero(self) -> bool:
        """Check if the value is the additive identity of its domain."""
        pass


class FieldLike(Pow, ZeroCheck):
    """
        An interface for values that can be used as curve coordinates, including:
        * FieldElement (Z/pZ)
        * RealValue (floating point reals)

        Besides pow/is_zero, implementations provide +, -, *, / between two values of the same
        type, + and * with a plain int on either side, unary - and ==.
    """

    @abstractmethod
    def __add__(self, other):
        pass

    @abstractmethod
    def __sub__(self, other):
        pass

    @abstractmethod
    def __mul__(self, other):
        pass

    @abstractmethod
    def __truediv__(self, other):
        pass

    @abstractmethod
    def __neg__(self):
        pass

    @abstractmethod
    def __eq__(self, other):
        pass

    def __radd__(self, other: int):
        return self.__add__(other)

    def __rmul__(self, other: int):
        return self.__mul__(other)
