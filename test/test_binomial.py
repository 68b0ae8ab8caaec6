import unittest
from itertools import combinations

import numpy as np

from choosek.combinatorics.binomial import index_matrix, n_choose_k


class TestBinomial(unittest.TestCase):

    def test_n_choose_k(self):
        self.assertEqual(n_choose_k(5, 2), 10)
        self.assertEqual(n_choose_k(0, 0), 1)
        self.assertEqual(n_choose_k(3, 0), 1)
        self.assertEqual(n_choose_k(3, 3), 1)
        self.assertEqual(n_choose_k(2, 3), 0)

    def test_negative_rejected(self):
        with self.assertRaises(ValueError):
            n_choose_k(-1, 0)
        with self.assertRaises(ValueError):
            index_matrix(3, -2)

    def test_index_matrix(self):
        m = index_matrix(5, 3)
        self.assertEqual(m.shape, (10, 3))
        self.assertEqual(m.dtype, np.int64)
        np.testing.assert_array_equal(m, np.array(list(combinations(range(5), 3))))

    def test_index_matrix_edge_shapes(self):
        self.assertEqual(index_matrix(0, 0).shape, (1, 0))
        self.assertEqual(index_matrix(4, 0).shape, (1, 0))
        self.assertEqual(index_matrix(2, 3).shape, (0, 3))


if __name__ == "__main__":
    unittest.main()
