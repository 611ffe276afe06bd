import copy
import math
import unittest

from vecmath.vector import (
    EPSILON,
    ONE,
    UNIT_X,
    UNIT_Y,
    UNIT_Z,
    ZERO,
    Vector3,
)


class Vector3ConstructionTests(unittest.TestCase):
    def test_missing_components_default_to_zero(self) -> None:
        v = Vector3()
        self.assertEqual((v.x, v.y, v.z), (0.0, 0.0, 0.0))
        v = Vector3(1, None)
        self.assertEqual((v.x, v.y, v.z), (1.0, 0.0, 0.0))

    def test_components_are_floats(self) -> None:
        v = Vector3(1, 2, 3)
        self.assertIsInstance(v.x, float)
        self.assertEqual(str(v), "1.0, 2.0, 3.0")

    def test_str_and_repr(self) -> None:
        v = Vector3(0.5, -2, 3)
        self.assertEqual(str(v), "0.5, -2.0, 3.0")
        self.assertEqual(repr(v), "Vector3(0.5, -2.0, 3.0)")

    def test_clone_is_equal_and_independent(self) -> None:
        for values in (
            (1.5, -2.25, 3.0),
            (0.0, -0.0, 0.0),
            (-0.1, 0.2, -0.3),
            (1e-9, -7.5e-7, 2.5e-12),
            (1e150, -3.5e200, 7e299),
            (-123456.789, 0.5, -1e-300),
        ):
            original = Vector3(*values)
            duplicate = original.clone()
            self.assertIsNot(duplicate, original)
            self.assertTrue(duplicate.equals(original, 0), values)
            self.assertEqual(
                [math.copysign(1.0, c) for c in duplicate],
                [math.copysign(1.0, c) for c in values],
            )
            duplicate.add(1, 1, 1).negate()
            self.assertEqual((original.x, original.y, original.z), values)

    def test_copy_module(self) -> None:
        v = copy.copy(Vector3(1, 2, 3))
        v.negate()
        self.assertTrue(v.equals(Vector3(-1, -2, -3), 0))
        self.assertTrue(copy.deepcopy(UNIT_X).frozen)


class Vector3InPlaceTests(unittest.TestCase):
    def test_methods_return_self(self) -> None:
        v = Vector3(1, 2, 3)
        other = Vector3(0, 1, 0)
        for result in (
            v.negate(),
            v.add(other),
            v.add(1, 2, 3),
            v.subtract(other),
            v.subtract(1, 2, 3),
            v.multiply(2),
            v.divide(2),
            v.scale(other),
            v.scale(1, 2, 3),
            v.cross(UNIT_X),
            v.reflect(UNIT_Y),
            v.normalize(),
        ):
            self.assertIs(result, v)

    def test_add_subtract(self) -> None:
        v = Vector3(1, 2, 3).add(Vector3(1, 1, 1))
        self.assertTrue(v.equals(Vector3(2, 3, 4), 0))
        v.subtract(0.5, 1, 4)
        self.assertTrue(v.equals(Vector3(1.5, 2, 0), 0))

    def test_multiply_divide_scale(self) -> None:
        v = Vector3(1, -2, 3).multiply(2)
        self.assertTrue(v.equals(Vector3(2, -4, 6), 0))
        v.divide(4)
        self.assertTrue(v.equals(Vector3(0.5, -1, 1.5), 0))
        v.scale(1, 0, 0)
        self.assertTrue(v.equals(Vector3(0.5, 0, 0), 0))
        v = Vector3(120, 300, 90).scale(UNIT_X)
        self.assertTrue(v.equals(Vector3(120, 0, 0), 0))

    def test_dot_does_not_mutate(self) -> None:
        v = Vector3(1, 2, 3)
        self.assertEqual(v.dot(Vector3(4, -5, 6)), 12.0)
        self.assertEqual((v.x, v.y, v.z), (1.0, 2.0, 3.0))

    def test_cross_overwrites_receiver(self) -> None:
        v = UNIT_Z.clone().cross(UNIT_X)
        self.assertTrue(v.equals(UNIT_Y, 0))

    def test_reflect_overwrites_receiver(self) -> None:
        v = Vector3(1, 1, 0).reflect(Vector3(2, 0, 0))
        self.assertTrue(v.equals(Vector3(1, -1, 0)))

    def test_normalize(self) -> None:
        v = Vector3(3, 0, 4).normalize()
        self.assertAlmostEqual(v.x, 0.6)
        self.assertAlmostEqual(v.z, 0.8)
        self.assertAlmostEqual(v.magnitude, 1.0)

    def test_chained_operations(self) -> None:
        v = UNIT_Y.clone()
        v.negate().add(UNIT_X).subtract(UNIT_Z).negate().normalize()
        self.assertTrue(v.equals(Vector3(-0.57735, 0.57735, 0.57735), EPSILON))

    def test_properties(self) -> None:
        v = Vector3(2, 3, 6)
        self.assertEqual(v.sqr_magnitude, 49.0)
        self.assertEqual(v.magnitude, 7.0)
        n = v.normalized
        self.assertIsNot(n, v)
        self.assertAlmostEqual(n.magnitude, 1.0)
        self.assertEqual((v.x, v.y, v.z), (2.0, 3.0, 6.0))


class Vector3DegenerateInputTests(unittest.TestCase):
    def test_divide_by_zero_follows_ieee(self) -> None:
        v = Vector3(1, -2, 0).divide(0)
        self.assertEqual(v.x, math.inf)
        self.assertEqual(v.y, -math.inf)
        self.assertTrue(math.isnan(v.z))
        v = Vector3(1, 0, 0).divide(-0.0)
        self.assertEqual(v.x, -math.inf)

    def test_normalize_zero_vector_gives_nan(self) -> None:
        v = Vector3().normalize()
        self.assertTrue(all(math.isnan(c) for c in v))
        self.assertTrue(all(math.isnan(c) for c in ZERO.normalized))

    def test_reflect_across_zero_axis_gives_nan(self) -> None:
        v = Vector3(1, 2, 3).reflect(Vector3())
        self.assertTrue(all(math.isnan(c) for c in v))

    def test_missing_scalar_propagates_nan(self) -> None:
        v = Vector3(1, 1, 1).add(2)
        self.assertEqual(v.x, 3.0)
        self.assertTrue(math.isnan(v.y))
        self.assertTrue(math.isnan(v.z))
        v = ONE.clone().multiply(None)
        self.assertTrue(all(math.isnan(c) for c in v))


if __name__ == "__main__":
    unittest.main()
