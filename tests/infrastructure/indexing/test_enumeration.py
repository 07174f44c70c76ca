import unittest

from mdarray.infrastructure.indexing import (
    Index,
    end_index,
    enumerate_indices,
    enumerate_region,
    start_index,
    successor,
)


class TestStartEnd(unittest.TestCase):
    def test_bounds(self) -> None:
        self.assertEqual(start_index((2, 3)), Index((0, 0)))
        self.assertEqual(end_index((2, 3)), Index((1, 2)))

    def test_zero_sized_axis_ends_at_zero(self) -> None:
        self.assertEqual(end_index((0, 3)), Index((0, 2)))


class TestSuccessor(unittest.TestCase):
    def test_carry(self) -> None:
        self.assertEqual(successor((0, 2), (1, 2)), (1, 0))

    def test_wraps_to_lower_bound(self) -> None:
        self.assertEqual(successor((1, 2), (1, 2)), (0, 0))
        self.assertEqual(successor((2, 3), (2, 3), (1, 1)), (1, 1))

    def test_rank_three_counts_axis_one_first(self) -> None:
        self.assertEqual(successor((0, 0, 0), (1, 1, 1)), (0, 1, 0))
        self.assertEqual(successor((0, 1, 0), (1, 1, 1)), (1, 0, 0))
        self.assertEqual(successor((1, 1, 0), (1, 1, 1)), (0, 0, 1))


class TestEnumerateIndices(unittest.TestCase):
    def test_matrix_enumeration_is_complete(self) -> None:
        m, n = 3, 4
        seq = list(enumerate_indices((m, n)))
        self.assertEqual(len(seq), m * n)
        self.assertEqual(seq[0], (0, 0))
        self.assertEqual(seq[-1], (m - 1, n - 1))
        self.assertEqual(
            set(seq), {(i, j) for i in range(m) for j in range(n)}
        )

    def test_rank_three_order(self) -> None:
        self.assertEqual(
            list(enumerate_indices((2, 2, 2))),
            [
                (0, 0, 0),
                (0, 1, 0),
                (1, 0, 0),
                (1, 1, 0),
                (0, 0, 1),
                (0, 1, 1),
                (1, 0, 1),
                (1, 1, 1),
            ],
        )

    def test_enumeration_is_strictly_increasing(self) -> None:
        seq = list(enumerate_indices((2, 3, 2, 2)))
        self.assertEqual(len(seq), 24)
        for a, b in zip(seq, seq[1:]):
            self.assertLess(a, b)

    def test_is_restartable(self) -> None:
        self.assertEqual(
            list(enumerate_indices((2, 2))), list(enumerate_indices((2, 2)))
        )

    def test_zero_sized_shape_is_empty(self) -> None:
        self.assertEqual(list(enumerate_indices((2, 0))), [])

    def test_rank_zero_has_one_index(self) -> None:
        self.assertEqual(list(enumerate_indices(())), [Index(())])


class TestEnumerateRegion(unittest.TestCase):
    def test_inclusive_box(self) -> None:
        self.assertEqual(
            list(enumerate_region((1, 1), (2, 2))),
            [(1, 1), (1, 2), (2, 1), (2, 2)],
        )

    def test_single_point(self) -> None:
        self.assertEqual(list(enumerate_region((1, 2), (1, 2))), [(1, 2)])


if __name__ == "__main__":
    unittest.main()
