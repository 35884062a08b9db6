"""Various geometry abstractions and functions"""

import logging
from typing import Any, Generic, Iterable, Mapping, TypeVar, Union

import attrs
from expression import Result
import numpy as np

from geompoint import NUMBER_OF_DIMENSIONS, DimensionalityError, NonArithmeticCoordinateError
from geompoint.numeric_types import SupportsCoordinateArithmetic

__all__ = ["Point", "PointView", "euclidean_distance"]


C = TypeVar("C")
_A = TypeVar("_A", bound=SupportsCoordinateArithmetic)


@attrs.define
class Point(Generic[C]):
    """
    General abstraction of a point in 3D (assumed Euclidean) space

    The coordinate representation is up to the caller, e.g. float, numpy.float32, or int.
    Values are stored exactly as given, and each coordinate may be reassigned in place.
    Nothing constrains the representation at construction; only computing a distance
    requires that the coordinates support subtraction and multiplication.
    """
    x: C = attrs.field()
    y: C = attrs.field()
    z: C = attrs.field()

    @classmethod
    def from_iterable(cls, values: Iterable[C]) -> "Point[C]":
        coordinates = tuple(values)
        if len(coordinates) != NUMBER_OF_DIMENSIONS:
            raise DimensionalityError(
                f"Need exactly {NUMBER_OF_DIMENSIONS} coordinates for a point, but got {len(coordinates)}"
            )
        return cls(*coordinates)

    @classmethod
    def from_mapping(cls, m: Mapping[str, Any]) -> Result["Point", Exception]:
        try:
            return Result.Ok(cls.unsafe_from_mapping(m))
        except Exception as e:
            return Result.Error(e)

    @classmethod
    def unsafe_from_mapping(cls, m: Mapping[str, Any]) -> "Point":
        return cls(**m)

    @property
    def to_tuple(self) -> tuple[C, C, C]:
        return attrs.astuple(self, recurse=False)

    def as_read_only(self) -> "PointView[C]":
        """Get a view of this point through which coordinates can be read but not assigned."""
        return PointView(self)

    def distance_from(self: "Point[_A]", other: Union["Point[_A]", "PointView[_A]"]) -> float:
        """Compute the Euclidean distance between this point and another with the same coordinate type."""
        return euclidean_distance(self, other)


@attrs.define(frozen=True)
class PointView(Generic[C]):
    """Read-only access to the coordinates of a point, always reflecting the point's current values"""
    _point: Point[C] = attrs.field(validator=attrs.validators.instance_of(Point))

    @property
    def x(self) -> C:
        return self._point.x

    @property
    def y(self) -> C:
        return self._point.y

    @property
    def z(self) -> C:
        return self._point.z

    @property
    def to_tuple(self) -> tuple[C, C, C]:
        return self._point.to_tuple

    def distance_from(self: "PointView[_A]", other: Union[Point[_A], "PointView[_A]"]) -> float:
        return euclidean_distance(self, other)


def euclidean_distance(
    a: Union[Point[_A], PointView[_A]],
    b: Union[Point[_A], PointView[_A]],
) -> float:
    """
    Compute the straight-line distance between two points.

    Differences and squares are computed with the coordinates' own arithmetic, so e.g.
    numpy.int32 coordinates wrap on overflow and numpy.float32 coordinates are squared
    in single precision. Only the sum of squares is converted to double precision,
    before the square root is taken. A sum too large for a double gives an infinite
    distance, and a negative sum (from integer wraparound) or a NaN coordinate gives
    a NaN distance.

    Parameters
    ----------
    a : Point or PointView
        One of the points
    b : Point or PointView
        The other point, with the same coordinate representation as the first

    Returns
    -------
    float
        The Euclidean distance between the two points

    Raises
    ------
    NonArithmeticCoordinateError
        If the coordinates don't support subtraction and multiplication,
        or their sum of squares can't be converted to a float
    """
    try:
        dx = a.x - b.x
        dy = a.y - b.y
        dz = a.z - b.z
        sum_of_squares = _as_double(dx * dx + dy * dy + dz * dz)
    except TypeError as e:
        logging.error(
            "Cannot compute distance between points with coordinate types (%s) and (%s)",
            _coordinate_type_names(a),
            _coordinate_type_names(b),
        )
        raise NonArithmeticCoordinateError(f"Coordinates don't support distance arithmetic: {e}") from e
    return float(np.sqrt(sum_of_squares))


def _coordinate_type_names(p: Union[Point, PointView]) -> str:
    return ", ".join(type(c).__name__ for c in p.to_tuple)


def _as_double(value: Any) -> np.float64:
    # Integer sums past the double range become infinity.
    try:
        return np.float64(value)
    except OverflowError:
        return np.float64(np.inf)
