import unittest

import numpy as np

from mdarray.infrastructure.ops import elementwise_cpu as ew


class TestElementwiseCPU(unittest.TestCase):
    def setUp(self) -> None:
        rng = np.random.default_rng(0)
        self.a = rng.standard_normal(7)
        self.b = rng.standard_normal(7) + 5.0

    def test_binary_kernels_match_numpy(self) -> None:
        for dtype in (np.float32, np.float64):
            dt = np.dtype(dtype)
            a = self.a.astype(dt)
            b = self.b.astype(dt)
            cases = [
                (ew.add, a + b),
                (ew.subtract, a - b),
                (ew.multiply, a * b),
                (ew.divide, a / b),
            ]
            for fn, ref in cases:
                out = fn(a.tolist(), b.tolist(), dt)
                self.assertIsInstance(out, list)
                np.testing.assert_allclose(np.asarray(out, dtype=dt), ref, rtol=1e-6)

    def test_outputs_are_fresh_lists(self) -> None:
        a = [1.0, 2.0]
        out = ew.add(a, [0.0, 0.0], np.float64)
        self.assertEqual(out, a)
        self.assertIsNot(out, a)

    def test_length_mismatch(self) -> None:
        with self.assertRaises(ValueError):
            ew.add([1, 2], [1, 2, 3], np.int32)

    def test_unsupported_dtype(self) -> None:
        with self.assertRaises(TypeError):
            ew.add([1], [2], np.int64)
        with self.assertRaises(TypeError):
            ew.fill(3, 1, np.complex64)

    def test_int32_division(self) -> None:
        self.assertEqual(ew.divide([7, -7], [2, 2], np.int32), [3, -3])
        with self.assertRaises(ZeroDivisionError):
            ew.divide([1], [0], np.int32)
        with self.assertRaises(ZeroDivisionError):
            ew.scale_divide([1, 2], 0, np.int32)

    def test_scalar_kernels(self) -> None:
        self.assertEqual(ew.scale([1, 2, 3], 2, np.int32), [2, 4, 6])
        self.assertEqual(ew.scale_divide([2.0, 4.0], 2.0, np.float64), [1.0, 2.0])
        self.assertEqual(ew.rscale_divide(8.0, [2.0, 4.0], np.float64), [4.0, 2.0])

    def test_negate(self) -> None:
        self.assertEqual(ew.negate([1, -2, 0], np.int32), [-1, 2, 0])

    def test_fill(self) -> None:
        self.assertEqual(ew.fill(3, 1.5, np.float32), [1.5, 1.5, 1.5])
        self.assertEqual(ew.fill(0, 1.5, np.float64), [])

    def test_reductions(self) -> None:
        self.assertEqual(ew.reduce_sum([1, 2, 3], np.int32), 6)
        self.assertEqual(ew.reduce_prod([1, 2, 3, 4], np.int32), 24)
        self.assertEqual(ew.reduce_prod([], np.float64), 1.0)
        self.assertIsInstance(ew.reduce_sum([1.0], np.float32), float)

    def test_convert(self) -> None:
        self.assertEqual(ew.convert([1.7, -1.7], np.float64, np.int32), [1, -1])
        self.assertEqual(ew.convert([1, 2], np.int32, np.float32), [1.0, 2.0])
        self.assertEqual(ew.convert([3, 4], None, np.float64), [3.0, 4.0])

    def test_cast(self) -> None:
        self.assertEqual(ew.cast([1.5, -2.5, 3], np.int32), [1, -2, 3])
        self.assertEqual(ew.cast([1, 2], np.float64), [1.0, 2.0])
        self.assertEqual(ew.cast([0.1], np.float32), [float(np.float32(0.1))])
        self.assertEqual(ew.cast([1.5, None], np.int32), [1, None])
        self.assertEqual(ew.cast([], np.int32), [])
        with self.assertRaises(TypeError):
            ew.cast([1], np.int64)


if __name__ == "__main__":
    unittest.main()
