# vecmath/arrays.py
"""
Conversion between Vector3 and numpy arrays, for handing vectors to
array-based code such as GPU kernels. Requires the optional numpy dependency.
"""
import logging

import numpy as np

from vecmath.errors import VectorShapeError
from vecmath.vector import Vector3

logger = logging.getLogger(__name__)


def to_array(vector: Vector3, dtype=np.float64) -> np.ndarray:
    """
    Returns a new array [x, y, z]. Pass dtype=np.float32 for device buffers.
    """
    return np.array([vector.x, vector.y, vector.z], dtype=dtype)


def from_array(values) -> Vector3:
    """
    Builds a Vector3 from any length-3 array-like.
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.shape != (3,):
        logger.debug("from_array: rejected input of shape %s", arr.shape)
        raise VectorShapeError(f"expected 3 components, got array of shape {arr.shape}")
    x, y, z = arr.tolist()
    return Vector3(x, y, z)
