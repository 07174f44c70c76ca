import unittest

import numpy as np

from mdarray import (
    GrowthWithoutFillError,
    IMDArray,
    Index,
    IndexOutOfRangeError,
    InsufficientStorageError,
    MDArray,
    ShapeMismatchError,
)


class TestMDArrayConstruction(unittest.TestCase):
    def test_shape_and_storage(self) -> None:
        a = MDArray((2, 3), range(6))
        self.assertEqual(a.shape, (2, 3))
        self.assertEqual(a.storage, [0, 1, 2, 3, 4, 5])
        self.assertEqual(a.rank, 2)
        self.assertEqual(a.size, 6)
        self.assertEqual(len(a), 6)

    def test_oversized_buffer_is_truncated(self) -> None:
        a = MDArray((2, 2), range(10))
        self.assertEqual(a.storage, [0, 1, 2, 3])

    def test_short_buffer_raises(self) -> None:
        with self.assertRaises(InsufficientStorageError) as ctx:
            MDArray((2, 3), [1, 2])
        self.assertEqual(ctx.exception.expected, 6)
        self.assertEqual(ctx.exception.actual, 2)

    def test_negative_shape_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            MDArray((2, -1), [])

    def test_storage_is_owned(self) -> None:
        buf = [1, 2, 3]
        a = MDArray((3,), buf)
        buf[0] = 99
        self.assertEqual(a.storage[0], 1)

    def test_empty_array(self) -> None:
        a = MDArray()
        self.assertTrue(a.is_empty)
        self.assertEqual(a.rank, 0)
        self.assertEqual(a.storage, [])
        self.assertEqual(list(a), [])

    def test_rank_zero_holds_one_element(self) -> None:
        a = MDArray((), [7, 8])
        self.assertEqual(a.storage, [7])
        self.assertEqual(a[()], 7)
        self.assertEqual(list(a), [7])

    def test_full(self) -> None:
        a = MDArray.full((2, 2), 5)
        self.assertEqual(a.storage, [5, 5, 5, 5])

    def test_from_nested(self) -> None:
        a = MDArray.from_nested([[1, 2, 3], [4, 5, 6]])
        self.assertEqual(a.shape, (2, 3))
        self.assertEqual(a.storage, [1, 2, 3, 4, 5, 6])

    def test_from_nested_rejects_ragged_lists(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            MDArray.from_nested([[1, 2], [3]])

    def test_dtype(self) -> None:
        a = MDArray((2,), [1, 2], dtype="float32")
        self.assertEqual(a.dtype, np.dtype(np.float32))
        self.assertEqual(a.kind.name, "float32")
        self.assertIsNone(MDArray((1,), [0]).dtype)

    def test_int32_storage_truncates_floats(self) -> None:
        a = MDArray((3,), [1.5, 2.5, -1.5], dtype="int32")
        self.assertEqual(a.storage, [1, 2, -1])
        self.assertTrue(all(type(v) is int for v in a.storage))
        self.assertEqual(a[0], 1)
        self.assertEqual(a.sum(), 2)
        self.assertEqual((a + 0).storage, a.storage)

    def test_typed_constructors_store_element_kind(self) -> None:
        self.assertEqual(MDArray.full((2,), 2.9, dtype="int32").storage, [2, 2])
        f = MDArray.from_nested([[1, 2]], dtype="float64")
        self.assertEqual(f.storage, [1.0, 2.0])
        self.assertTrue(all(type(v) is float for v in f.storage))
        g = MDArray((1,), [0.1], dtype="float32")
        self.assertEqual(g.storage, [float(np.float32(0.1))])

    def test_generic_storage_is_kept_as_given(self) -> None:
        self.assertEqual(MDArray((2,), [1.5, "x"]).storage, [1.5, "x"])

    def test_set_element_stores_element_kind(self) -> None:
        a = MDArray((2,), [0, 0], dtype="int32")
        a[1] = 3.7
        self.assertEqual(a.storage, [0, 3])

    def test_satisfies_protocol(self) -> None:
        self.assertIsInstance(MDArray((1,), [0]), IMDArray)

    def test_copy_is_independent(self) -> None:
        a = MDArray((2,), [1, 2], dtype="int32")
        b = a.copy()
        b[1] = 9
        self.assertEqual(a.storage, [1, 2])
        self.assertEqual(b.dtype, a.dtype)


class TestMDArrayQueries(unittest.TestCase):
    def test_categories(self) -> None:
        self.assertTrue(MDArray((3,), range(3)).is_vector)
        self.assertTrue(MDArray((2, 2), range(4)).is_matrix)
        self.assertTrue(MDArray((2, 2, 2), range(8)).has_higher_order_representation)
        self.assertFalse(MDArray((2, 2), range(4)).has_higher_order_representation)

    def test_is_square(self) -> None:
        self.assertTrue(MDArray((2, 2, 2, 1), range(8)).is_square)
        self.assertFalse(MDArray((2, 3), range(6)).is_square)

    def test_start_and_end_index(self) -> None:
        a = MDArray((2, 3), range(6))
        self.assertEqual(a.start_index, (0, 0))
        self.assertEqual(a.end_index, (1, 2))

    def test_indices_and_index_after(self) -> None:
        a = MDArray((2, 2), range(4))
        self.assertEqual(list(a.indices), [(0, 0), (0, 1), (1, 0), (1, 1)])
        self.assertEqual(a.index_after((0, 1)), (1, 0))
        self.assertEqual(a.index_after(a.end_index), a.start_index)

    def test_iteration_follows_canonical_order(self) -> None:
        a = MDArray((2, 2, 2), range(8))
        self.assertEqual(list(a), [0, 2, 4, 6, 1, 3, 5, 7])


class TestMDArrayElementAccess(unittest.TestCase):
    def setUp(self) -> None:
        self.a = MDArray.from_nested([[1, 2, 3], [4, 5, 6]])

    def test_validate(self) -> None:
        self.assertTrue(self.a.validate((1, 2)))
        self.assertFalse(self.a.validate((2, 0)))
        self.assertFalse(self.a.validate((0,)))
        self.assertFalse(self.a.validate((-1, 0)))

    def test_element(self) -> None:
        self.assertEqual(self.a.element((1, 0)), 4)
        self.assertEqual(self.a[1, 2], 6)
        self.assertEqual(self.a[Index((0, 1))], 2)

    def test_element_out_of_range(self) -> None:
        with self.assertRaises(IndexOutOfRangeError):
            self.a.element((0, 3))
        with self.assertRaises(IndexError):
            self.a[-1, 0]

    def test_set_element(self) -> None:
        self.a.set_element(40, (1, 0))
        self.a[0, 0] = 10
        self.assertEqual(self.a.storage, [10, 2, 3, 40, 5, 6])

    def test_set_element_out_of_range(self) -> None:
        with self.assertRaises(IndexOutOfRangeError):
            self.a[2, 0] = 1

    def test_offset_translation(self) -> None:
        self.assertEqual(self.a.storage_offset((1, 1)), 4)
        self.assertEqual(self.a.index_for_offset(4), (1, 1))


class TestMDArrayReshape(unittest.TestCase):
    def test_shrink_truncates(self) -> None:
        a = MDArray((2, 3), range(6))
        a.reshape((2, 2))
        self.assertEqual(a.shape, (2, 2))
        self.assertEqual(a.storage, [0, 1, 2, 3])

    def test_grow_with_fill(self) -> None:
        a = MDArray((2,), [1, 2])
        a.reshape((2, 2), fill=0)
        self.assertEqual(a.storage, [1, 2, 0, 0])

    def test_grow_without_fill_raises_and_keeps_state(self) -> None:
        a = MDArray((2,), [1, 2])
        with self.assertRaises(GrowthWithoutFillError):
            a.reshape((3, 3))
        self.assertEqual(a.shape, (2,))
        self.assertEqual(a.storage, [1, 2])

    def test_grow_with_none_fill(self) -> None:
        a = MDArray((1,), ["a"])
        a.reshape((3,), fill=None)
        self.assertEqual(a.storage, ["a", None, None])

    def test_grow_fill_is_stored_as_element_kind(self) -> None:
        a = MDArray((1,), [1], dtype="int32")
        a.reshape((2,), fill=4.5)
        self.assertEqual(a.storage, [1, 4])

    def test_same_size(self) -> None:
        a = MDArray((6,), range(6))
        a.reshape((3, 2))
        self.assertEqual(a.matrix(), [[0, 1], [2, 3], [4, 5]])

    def test_storage_invariant_after_reshape(self) -> None:
        a = MDArray((2, 2), range(4))
        for shape in [(1,), (3, 3), (2, 1, 2), ()]:
            a.reshape(shape, fill=-1)
            expected = int(np.prod(shape)) if shape else 1
            self.assertEqual(len(a.storage), expected)

    def test_simplify(self) -> None:
        a = MDArray((1, 1, 2, 3, 1), range(6))
        a.simplify()
        self.assertEqual(a.shape, (2, 3))
        self.assertEqual(a.storage, list(range(6)))


class TestMDArrayEqualityAndMap(unittest.TestCase):
    def test_structural_equality(self) -> None:
        self.assertEqual(MDArray((2,), [1, 2]), MDArray((2,), [1, 2]))
        self.assertNotEqual(MDArray((2,), [1, 2]), MDArray((1, 2), [1, 2]))
        self.assertNotEqual(MDArray((2,), [1, 2]), MDArray((2,), [2, 1]))
        self.assertNotEqual(MDArray((2,), [1, 2]), [1, 2])

    def test_unhashable(self) -> None:
        with self.assertRaises(TypeError):
            hash(MDArray((1,), [0]))

    def test_map(self) -> None:
        a = MDArray((2, 2), range(4))
        b = a.map(lambda v: v * v)
        self.assertEqual(b.shape, (2, 2))
        self.assertEqual(b.storage, [0, 1, 4, 9])
        self.assertEqual(a.storage, [0, 1, 2, 3])


if __name__ == "__main__":
    unittest.main()
