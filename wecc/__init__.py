from wecc.coordinate import INF, Coordinate, Infinity, Value
from wecc.ecc import k_point
from wecc.errors import CurveMismatchError, EccError, FieldMismatchError, NotOnCurveError, OutOfRangeError
from wecc.field_element import FieldElement
from wecc.interface import FieldLike, Pow, ZeroCheck
from wecc.point import Point
from wecc.real_value import RealValue
