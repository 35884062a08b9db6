"""Groupings of numeric types and tools for working with them"""

from typing import Any, Protocol, Union
import numpy as np

__all__ = ["NumberLike", "SupportsCoordinateArithmetic"]


NumberLike = Union[int, float, np.integer, np.floating]


class SupportsCoordinateArithmetic(Protocol):
    """What a coordinate representation must offer for distance between points to be computable"""

    def __sub__(self, other: Any, /) -> Any: ...

    def __mul__(self, other: Any, /) -> Any: ...
