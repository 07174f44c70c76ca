import unittest

import numpy as np

from mdarray import (
    DtypeMismatchError,
    DtypeNotSupportedError,
    MDArray,
    ShapeMismatchError,
)


def _arr(x, dtype) -> MDArray:
    x = np.asarray(x, dtype=dtype)
    return MDArray(x.shape, x.ravel().tolist(), dtype=dtype)


class TestMDArrayArithmetic(unittest.TestCase):
    def setUp(self) -> None:
        rng = np.random.default_rng(0)
        self.a = rng.standard_normal((2, 3)).astype(np.float32)
        self.b = rng.standard_normal((2, 3)).astype(np.float32) + 3.0

    def _check(self, out: MDArray, ref: np.ndarray) -> None:
        self.assertEqual(out.shape, ref.shape)
        np.testing.assert_allclose(
            np.asarray(out.storage, dtype=ref.dtype).reshape(ref.shape),
            ref,
            rtol=1e-6,
            atol=1e-6,
        )

    def test_add_sub_mul_div_match_numpy(self) -> None:
        for dtype in (np.float32, np.float64):
            a = self.a.astype(dtype)
            b = self.b.astype(dtype)
            A, B = _arr(a, dtype), _arr(b, dtype)
            self._check(A + B, a + b)
            self._check(A - B, a - b)
            self._check(A * B, a * b)
            self._check(A / B, a / b)

    def test_result_keeps_dtype(self) -> None:
        A = _arr(self.a, np.float32)
        self.assertEqual((A + A).dtype, np.dtype(np.float32))

    def test_scalars(self) -> None:
        a = self.a.astype(np.float64)
        A = _arr(a, np.float64)
        self._check(A + 2.0, a + 2.0)
        self._check(2.0 + A, 2.0 + a)
        self._check(A - 1.5, a - 1.5)
        self._check(1.5 - A, 1.5 - a)
        self._check(A * 3.0, a * 3.0)
        self._check(3.0 * A, 3.0 * a)
        self._check(A / 4.0, a / 4.0)

    def test_scalar_divided_by_array(self) -> None:
        b = self.b.astype(np.float64)
        self._check(1.0 / _arr(b, np.float64), 1.0 / b)

    def test_negation(self) -> None:
        a = self.a.astype(np.float64)
        self._check(-_arr(a, np.float64), -a)

    def test_int32_division_truncates(self) -> None:
        A = _arr([7, -7, 9], np.int32)
        B = _arr([2, 2, -4], np.int32)
        self.assertEqual((A / B).storage, [3, -3, -2])
        self.assertEqual((A / 2).storage, [3, -3, 4])
        self.assertEqual((10 / B).storage, [5, 5, -2])

    def test_int32_division_by_zero(self) -> None:
        A = _arr([1, 2], np.int32)
        with self.assertRaises(ZeroDivisionError):
            A / _arr([1, 0], np.int32)

    def test_float_division_by_zero_is_ieee(self) -> None:
        out = _arr([1.0, 0.0], np.float64) / _arr([0.0, 0.0], np.float64)
        self.assertEqual(out.storage[0], float("inf"))
        self.assertTrue(np.isnan(out.storage[1]))

    def test_int32_results_are_python_ints(self) -> None:
        out = _arr([1, 2], np.int32) + _arr([3, 4], np.int32)
        self.assertEqual(out.storage, [4, 6])
        self.assertTrue(all(type(v) is int for v in out.storage))

    def test_shape_mismatch(self) -> None:
        A = _arr(np.zeros((2, 3)), np.float32)
        B = _arr(np.zeros((3, 2)), np.float32)
        with self.assertRaises(ShapeMismatchError):
            A + B

    def test_dtype_mismatch(self) -> None:
        A = _arr([1.0], np.float32)
        B = _arr([1.0], np.float64)
        with self.assertRaises(DtypeMismatchError):
            A * B

    def test_generic_arrays_have_no_vectorized_path(self) -> None:
        A = MDArray((2,), [1, 2])
        with self.assertRaises(DtypeNotSupportedError) as ctx:
            A + A
        self.assertEqual(ctx.exception.op, "add")
        with self.assertRaises(DtypeNotSupportedError):
            -A

    def test_unsupported_dtype(self) -> None:
        A = MDArray((2,), [1, 2], dtype="int64")
        with self.assertRaises(DtypeNotSupportedError):
            A * 2

    def test_unsupported_operand(self) -> None:
        A = _arr([1.0], np.float64)
        with self.assertRaises(TypeError):
            A + "x"

    def test_empty_array(self) -> None:
        A = MDArray(dtype="float64")
        out = A + A
        self.assertTrue(out.is_empty)
        self.assertEqual(out.storage, [])


class TestMDArrayMemoryAndReduction(unittest.TestCase):
    def test_fill_and_zero(self) -> None:
        A = MDArray((2, 2), [1, 2, 3, 4], dtype="int32")
        A.fill(2.7)
        self.assertEqual(A.storage, [2, 2, 2, 2])
        A.zero()
        self.assertEqual(A.storage, [0, 0, 0, 0])

        F = MDArray((3,), [1.0, 2.0, 3.0], dtype="float64")
        F.fill(0.5)
        self.assertEqual(F.storage, [0.5, 0.5, 0.5])

    def test_fill_requires_numeric_dtype(self) -> None:
        with self.assertRaises(DtypeNotSupportedError):
            MDArray((1,), [0]).fill(1)

    def test_sum_and_prod(self) -> None:
        A = MDArray((2, 2), [1, 2, 3, 4], dtype="int32")
        self.assertEqual(A.sum(), 10)
        self.assertEqual(A.prod(), 24)

        F = MDArray((3,), [0.5, 2.0, 4.0], dtype="float64")
        self.assertAlmostEqual(F.sum(), 6.5)
        self.assertAlmostEqual(F.prod(), 4.0)

    def test_prod_of_no_elements_is_one(self) -> None:
        A = MDArray((0,), [], dtype="float32")
        self.assertEqual(A.prod(), 1.0)
        self.assertEqual(A.sum(), 0.0)

    def test_astype(self) -> None:
        F = MDArray((2, 2), [1.9, -1.9, 2.5, 0.0], dtype="float64")
        I = F.astype("int32")
        self.assertEqual(I.dtype, np.dtype(np.int32))
        self.assertEqual(I.shape, (2, 2))
        self.assertEqual(I.storage, [1, -1, 2, 0])
        self.assertEqual(F.storage, [1.9, -1.9, 2.5, 0.0])

    def test_astype_promotes_generic_arrays(self) -> None:
        G = MDArray.from_nested([[1, 2], [3, 4]])
        F = G.astype(np.float32)
        self.assertEqual(F.dtype, np.dtype(np.float32))
        self.assertEqual(F.storage, [1.0, 2.0, 3.0, 4.0])
        self.assertEqual((F + F).storage, [2.0, 4.0, 6.0, 8.0])

    def test_astype_requires_target(self) -> None:
        with self.assertRaises(TypeError):
            MDArray((1,), [1.0], dtype="float64").astype(None)


if __name__ == "__main__":
    unittest.main()
