# vecmath/errors.py


class VectorError(Exception):
    """
    Base class for errors raised by vecmath.
    """


class VectorShapeError(VectorError, TypeError):
    """
    Raised when vector and scalar arguments are mixed in a way an operation
    cannot interpret, e.g. clamp(v, min_vector, 1, 1, 1).
    """


class FrozenVectorError(VectorError, AttributeError):
    """
    Raised on any attempt to modify a frozen vector such as Vector3.UNIT_X.
    """
