import unittest

from matweave.exceptions import InvalidShape
from matweave.matrix.shape import Shape


class TestShape(unittest.TestCase):
    def test_create_from_sequence(self) -> None:
        shape = Shape.create([2, 3])
        self.assertEqual(shape.rows, 2)
        self.assertEqual(shape.columns, 3)
        self.assertEqual(shape.as_tuple(), (2, 3))
        self.assertEqual(tuple(shape), (2, 3))
        self.assertEqual(shape[0], 2)
        self.assertEqual(shape[1], 3)

    def test_create_returns_existing_shape(self) -> None:
        shape = Shape(4, 1)
        self.assertIs(Shape.create(shape), shape)

    def test_total_elements(self) -> None:
        self.assertEqual(Shape(3, 4).total_elements(), 12)
        self.assertEqual(Shape(1, 1).total_elements(), 1)

    def test_rejects_wrong_rank(self) -> None:
        for extent in ([], [3], [1, 2, 3]):
            with self.assertRaises(InvalidShape):
                Shape.create(extent)

    def test_rejects_non_positive_dimensions(self) -> None:
        for extent in ([0, 3], [3, 0], [-1, 2]):
            with self.assertRaises(InvalidShape):
                Shape.create(extent)

    def test_rejects_non_integer_dimensions(self) -> None:
        for extent in ([2.5, 3], ["2", 3], [True, 3]):
            with self.assertRaises(InvalidShape):
                Shape.create(extent)
        with self.assertRaises(InvalidShape):
            Shape.create(5)  # type: ignore[arg-type]

    def test_invalid_shape_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            Shape(0, 1)

    def test_compatible_product(self) -> None:
        self.assertEqual(Shape(2, 3).compatible_product(Shape(3, 5)), Shape(2, 5))
        self.assertIsNone(Shape(2, 3).compatible_product(Shape(2, 3)))

    def test_transposed(self) -> None:
        self.assertEqual(Shape(2, 7).transposed(), Shape(7, 2))

    def test_shape_is_immutable_and_hashable(self) -> None:
        shape = Shape(2, 2)
        with self.assertRaises(AttributeError):
            shape.rows = 3  # type: ignore[misc]
        self.assertEqual(len({Shape(2, 2), Shape(2, 2), Shape(2, 3)}), 2)
