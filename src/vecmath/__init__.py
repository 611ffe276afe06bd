# vecmath/__init__.py
import logging

from vecmath.errors import FrozenVectorError, VectorError, VectorShapeError
from vecmath.vector import (
    EPSILON,
    MINUS_ONE,
    MINUS_X,
    MINUS_Y,
    MINUS_Z,
    ONE,
    UNIT_X,
    UNIT_Y,
    UNIT_Z,
    ZERO,
    Vector3,
    add,
    clamp,
    cross,
    distance,
    divide,
    dot,
    equals,
    magnitude,
    maximum,
    minimum,
    multiply,
    negate,
    normalize,
    reflect,
    scale,
    sqr_distance,
    sqr_magnitude,
    subtract,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Vector3",
    "EPSILON",
    "UNIT_X",
    "UNIT_Y",
    "UNIT_Z",
    "MINUS_X",
    "MINUS_Y",
    "MINUS_Z",
    "ONE",
    "ZERO",
    "MINUS_ONE",
    "negate",
    "add",
    "subtract",
    "multiply",
    "divide",
    "scale",
    "normalize",
    "magnitude",
    "sqr_magnitude",
    "dot",
    "cross",
    "reflect",
    "distance",
    "sqr_distance",
    "clamp",
    "minimum",
    "maximum",
    "equals",
    "VectorError",
    "VectorShapeError",
    "FrozenVectorError",
]
