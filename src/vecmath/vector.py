# vecmath/vector.py
"""
Three-component vector math.

Instance methods modify the vector they are called on and return it, so calls
can be chained. The module-level functions of the same name take their operands
explicitly and return a new vector without touching the inputs:

    >>> v = UNIT_Y.clone()
    >>> v.negate().add(UNIT_X).subtract(UNIT_Z).negate().normalize()
    Vector3(-0.5773502691896258, 0.5773502691896258, 0.5773502691896258)
    >>> add(UNIT_X, 0, 2, 0)
    Vector3(1.0, 2.0, 0.0)

Degenerate input is not guarded: dividing by zero, normalizing a zero vector or
reflecting across a zero axis yields inf/nan components instead of raising.
A Vector3 holds no lock; mutating one instance from several threads needs
external synchronization.
"""
import logging
import math
from numbers import Real
from typing import Iterator, Optional, Tuple, Union

from vecmath.errors import FrozenVectorError, VectorShapeError

logger = logging.getLogger(__name__)

EPSILON = 1e-6

Scalar = Optional[float]
VectorOrScalar = Union["Vector3", float]


def _scalar(value: Scalar) -> float:
    # A missing scalar behaves like NaN in arithmetic rather than raising.
    if value is None:
        return math.nan
    return float(value)


def _div(a: float, b: float) -> float:
    """
    IEEE 754 division: a zero divisor gives +/-inf, or nan for 0/0 and nan/0.
    """
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _fmin(a: float, b: float) -> float:
    if math.isnan(a) or math.isnan(b):
        return math.nan
    if a == b == 0:
        # -0.0 is smaller than 0.0
        return a if math.copysign(1.0, a) < 0 else b
    return b if b < a else a


def _fmax(a: float, b: float) -> float:
    if math.isnan(a) or math.isnan(b):
        return math.nan
    if a == b == 0:
        return a if math.copysign(1.0, a) > 0 else b
    return b if b > a else a


def _components(x: VectorOrScalar, y: Scalar, z: Scalar) -> Tuple[float, float, float]:
    """
    Resolves the (vector | x, y, z) argument form used by add, subtract,
    scale, minimum and maximum.
    """
    if isinstance(x, Vector3):
        return x.x, x.y, x.z
    return _scalar(x), _scalar(y), _scalar(z)


class Vector3:
    """
    A mutable 3D vector with float components x, y and z.

    Missing constructor arguments default to 0. Frozen instances (the named
    constants) raise FrozenVectorError on any modification.
    """
    __slots__ = ("x", "y", "z", "_frozen")

    def __init__(self, x: Scalar = None, y: Scalar = None, z: Scalar = None):
        object.__setattr__(self, "_frozen", False)
        self.x = 0.0 if x is None else float(x)
        self.y = 0.0 if y is None else float(y)
        self.z = 0.0 if z is None else float(z)

    def __setattr__(self, name: str, value) -> None:
        # getattr: copy and pickle restore slots without running __init__
        if getattr(self, "_frozen", False):
            raise FrozenVectorError(f"cannot set '{name}' on frozen vector ({self})")
        object.__setattr__(self, name, value)

    def _assign(self, x: float, y: float, z: float) -> "Vector3":
        # Checked once up front so a frozen vector is never half-updated.
        if self._frozen:
            raise FrozenVectorError(f"cannot modify frozen vector ({self})")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "z", z)
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "Vector3":
        """
        Makes this vector permanently read-only and returns it.
        """
        object.__setattr__(self, "_frozen", True)
        return self

    def clone(self) -> "Vector3":
        """
        Returns an independent, mutable copy.
        """
        return Vector3(self.x, self.y, self.z)

    def negate(self) -> "Vector3":
        return self._assign(-self.x, -self.y, -self.z)

    def add(self, x: VectorOrScalar, y: Scalar = None, z: Scalar = None) -> "Vector3":
        """
        Adds another vector, or the components x, y, z, to this vector.
        """
        dx, dy, dz = _components(x, y, z)
        return self._assign(self.x + dx, self.y + dy, self.z + dz)

    def subtract(self, x: VectorOrScalar, y: Scalar = None, z: Scalar = None) -> "Vector3":
        """
        Subtracts another vector, or the components x, y, z, from this vector.
        """
        dx, dy, dz = _components(x, y, z)
        return self._assign(self.x - dx, self.y - dy, self.z - dz)

    def multiply(self, s: float) -> "Vector3":
        s = _scalar(s)
        return self._assign(self.x * s, self.y * s, self.z * s)

    def divide(self, s: float) -> "Vector3":
        s = _scalar(s)
        return self._assign(_div(self.x, s), _div(self.y, s), _div(self.z, s))

    def scale(self, x: VectorOrScalar, y: Scalar = None, z: Scalar = None) -> "Vector3":
        """
        Multiplies component-wise by another vector or by x, y, z.
        scale(1, 0, 0) or scale(UNIT_X) clears the y and z components.
        """
        sx, sy, sz = _components(x, y, z)
        return self._assign(self.x * sx, self.y * sy, self.z * sz)

    def dot(self, other: "Vector3") -> float:
        return dot(self, other)

    def cross(self, other: "Vector3") -> "Vector3":
        result = cross(self, other)
        return self._assign(result.x, result.y, result.z)

    def reflect(self, axis: "Vector3") -> "Vector3":
        """
        Reflects this vector across the line through `axis`. See reflect().
        """
        result = reflect(self, axis)
        return self._assign(result.x, result.y, result.z)

    def normalize(self) -> "Vector3":
        """
        Scales this vector to unit length. A zero vector becomes (nan, nan, nan).
        """
        return self.divide(self.magnitude)

    @property
    def sqr_magnitude(self) -> float:
        return sqr_magnitude(self)

    @property
    def magnitude(self) -> float:
        return magnitude(self)

    @property
    def normalized(self) -> "Vector3":
        """
        A unit-length copy of this vector; the vector itself is unchanged.
        """
        return divide(self, self.magnitude)

    def equals(self, other: "Vector3", epsilon: float = EPSILON) -> bool:
        return equals(self, other, epsilon)

    def __add__(self, other: "Vector3") -> "Vector3":
        if isinstance(other, Vector3):
            return add(self, other)
        return NotImplemented

    def __sub__(self, other: "Vector3") -> "Vector3":
        if isinstance(other, Vector3):
            return subtract(self, other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vector3):
            return scale(self, other)
        if isinstance(other, Real):
            return multiply(self, other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        if isinstance(t, Real):
            return divide(self, t)
        return NotImplemented

    def __neg__(self) -> "Vector3":
        return negate(self)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"{self.x}, {self.y}, {self.z}"

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


def negate(vector: Vector3) -> Vector3:
    return Vector3(-vector.x, -vector.y, -vector.z)


def add(vector: Vector3, x: VectorOrScalar, y: Scalar = None, z: Scalar = None) -> Vector3:
    """
    Returns vector + x, where x is a vector or the first of three components.
    """
    dx, dy, dz = _components(x, y, z)
    return Vector3(vector.x + dx, vector.y + dy, vector.z + dz)


def subtract(vector: Vector3, x: VectorOrScalar, y: Scalar = None, z: Scalar = None) -> Vector3:
    """
    Returns vector - x, where x is a vector or the first of three components.
    """
    dx, dy, dz = _components(x, y, z)
    return Vector3(vector.x - dx, vector.y - dy, vector.z - dz)


def multiply(vector: Vector3, s: float) -> Vector3:
    s = _scalar(s)
    return Vector3(vector.x * s, vector.y * s, vector.z * s)


def divide(vector: Vector3, s: float) -> Vector3:
    s = _scalar(s)
    return Vector3(_div(vector.x, s), _div(vector.y, s), _div(vector.z, s))


def scale(vector: Vector3, x: VectorOrScalar, y: Scalar = None, z: Scalar = None) -> Vector3:
    sx, sy, sz = _components(x, y, z)
    return Vector3(vector.x * sx, vector.y * sy, vector.z * sz)


def normalize(vector: Vector3) -> Vector3:
    return divide(vector, magnitude(vector))


def sqr_magnitude(vector: Vector3) -> float:
    return vector.x * vector.x + vector.y * vector.y + vector.z * vector.z


def magnitude(vector: Vector3) -> float:
    return math.sqrt(sqr_magnitude(vector))


def dot(vec1: Vector3, vec2: Vector3) -> float:
    return vec1.x * vec2.x + vec1.y * vec2.y + vec1.z * vec2.z


def cross(vec1: Vector3, vec2: Vector3) -> Vector3:
    """
    Right-handed cross product; cross(UNIT_Z, UNIT_X) is UNIT_Y.
    """
    return Vector3(
        vec1.y * vec2.z - vec1.z * vec2.y,
        vec1.z * vec2.x - vec1.x * vec2.z,
        vec1.x * vec2.y - vec1.y * vec2.x
    )


def reflect(vector: Vector3, axis: Vector3) -> Vector3:
    """
    Reflects `vector` across the line defined by `axis`.

    `axis` is the axis of reflection itself, not the normal of a mirror plane:
    the component of `vector` along the axis is kept and the component
    perpendicular to it is inverted. reflect(UNIT_X, UNIT_Y) gives MINUS_X.
    """
    axis_normalized = divide(axis, magnitude(axis))
    parallel = axis_normalized.multiply(dot(vector, axis_normalized))
    perpendicular = subtract(vector, parallel)
    return parallel.subtract(perpendicular)


def distance(vec1: Vector3, vec2: Vector3) -> float:
    return magnitude(subtract(vec1, vec2))


def sqr_distance(vec1: Vector3, vec2: Vector3) -> float:
    return sqr_magnitude(subtract(vec1, vec2))


def _bound(value: VectorOrScalar) -> float:
    if isinstance(value, Vector3):
        return math.nan
    return _scalar(value)


def clamp(vector: Vector3, x1: VectorOrScalar, y1: VectorOrScalar,
          z1: Scalar = None, x2: Scalar = None, y2: Scalar = None, z2: Scalar = None) -> Vector3:
    """
    Clamps each component between a lower and an upper bound.

    Takes either two vectors, clamp(v, ZERO, ONE), or six components,
    clamp(v, min_x, min_y, min_z, max_x, max_y, max_z). A min vector followed
    by anything but a max vector raises VectorShapeError. In the component
    form a missing or vector bound makes that component NaN.
    Each component is max(min(value, upper), lower), so the lower bound wins
    when the bounds cross.
    """
    if isinstance(x1, Vector3):
        if not isinstance(y1, Vector3):
            logger.debug("clamp: min bound is a vector but max bound is %r", y1)
            raise VectorShapeError("Either use min and max vectors or 6 components")
        lower = (x1.x, x1.y, x1.z)
        upper = (y1.x, y1.y, y1.z)
    else:
        lower = (_bound(x1), _bound(y1), _bound(z1))
        upper = (_bound(x2), _bound(y2), _bound(z2))

    return Vector3(
        _fmax(_fmin(vector.x, upper[0]), lower[0]),
        _fmax(_fmin(vector.y, upper[1]), lower[1]),
        _fmax(_fmin(vector.z, upper[2]), lower[2])
    )


def minimum(vector: Vector3, x: VectorOrScalar, y: Scalar = None, z: Scalar = None) -> Vector3:
    """
    Component-wise minimum against another vector or the components x, y, z.
    """
    mx, my, mz = _components(x, y, z)
    return Vector3(_fmin(vector.x, mx), _fmin(vector.y, my), _fmin(vector.z, mz))


def maximum(vector: Vector3, x: VectorOrScalar, y: Scalar = None, z: Scalar = None) -> Vector3:
    """
    Component-wise maximum against another vector or the components x, y, z.
    """
    mx, my, mz = _components(x, y, z)
    return Vector3(_fmax(vector.x, mx), _fmax(vector.y, my), _fmax(vector.z, mz))


def equals(vec1: Vector3, vec2: Vector3, epsilon: float = EPSILON) -> bool:
    """
    True when every component differs by at most `epsilon` (per axis, not
    Euclidean distance). Use epsilon=0 for exact comparison.
    """
    return (
        abs(vec1.x - vec2.x) <= epsilon and
        abs(vec1.y - vec2.y) <= epsilon and
        abs(vec1.z - vec2.z) <= epsilon
    )


UNIT_X = Vector3(1, 0, 0).freeze()
UNIT_Y = Vector3(0, 1, 0).freeze()
UNIT_Z = Vector3(0, 0, 1).freeze()
MINUS_X = Vector3(-1, 0, 0).freeze()
MINUS_Y = Vector3(0, -1, 0).freeze()
MINUS_Z = Vector3(0, 0, -1).freeze()
ONE = Vector3(1, 1, 1).freeze()
ZERO = Vector3(0, 0, 0).freeze()
MINUS_ONE = Vector3(-1, -1, -1).freeze()

Vector3.UNIT_X = UNIT_X
Vector3.UNIT_Y = UNIT_Y
Vector3.UNIT_Z = UNIT_Z
Vector3.MINUS_X = MINUS_X
Vector3.MINUS_Y = MINUS_Y
Vector3.MINUS_Z = MINUS_Z
Vector3.ONE = ONE
Vector3.ZERO = ZERO
Vector3.MINUS_ONE = MINUS_ONE
Vector3.EPSILON = EPSILON
