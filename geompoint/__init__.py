"""Generic three-dimensional points, parameterized over the coordinate representation"""

__all__ = [
    "COORDINATE_NAMES",
    "NUMBER_OF_DIMENSIONS",
    "DimensionalityError",
    "GeompointException",
    "NonArithmeticCoordinateError",
    ]


COORDINATE_NAMES = ("x", "y", "z")
NUMBER_OF_DIMENSIONS = len(COORDINATE_NAMES)


class GeompointException(Exception):
    "General base for exceptional situations related to the specifics of this project"
    pass


class DimensionalityError(GeompointException):
    """Error subtype for when the number of coordinates given for a point is unexpected"""
    pass


class NonArithmeticCoordinateError(GeompointException, TypeError):
    """Error subtype for when coordinates don't support the arithmetic needed for a computation"""
    pass
