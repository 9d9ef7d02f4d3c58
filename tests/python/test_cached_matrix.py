import unittest

import numpy as np

import cachematrix
from cachematrix import CachedMatrix


class TestCachedMatrixSlots(unittest.TestCase):
    def test_construct_starts_with_empty_inverse(self):
        cm = CachedMatrix([[1.0, 2.0], [3.0, 4.0]])

        np.testing.assert_array_equal(cm.get_value(), [[1.0, 2.0], [3.0, 4.0]])
        self.assertIsNone(cm.get_cached_inverse())
        self.assertFalse(cm.has_cached_inverse())
        self.assertEqual(cm.version, 0)
        self.assertEqual(cm.shape, (2, 2))

    def test_set_cached_inverse_is_trusted(self):
        cm = CachedMatrix([[2.0, 0.0], [0.0, 2.0]])
        # Not the real inverse; the slot does not check.
        cm.set_cached_inverse([[9.0, 9.0], [9.0, 9.0]])

        np.testing.assert_array_equal(cm.get_cached_inverse(), [[9.0, 9.0], [9.0, 9.0]])
        self.assertTrue(cm.has_cached_inverse())

    def test_set_cached_inverse_overwrites(self):
        cm = CachedMatrix([[2.0, 0.0], [0.0, 4.0]])
        cm.set_cached_inverse([[1.0, 0.0], [0.0, 1.0]])
        cm.set_cached_inverse([[0.5, 0.0], [0.0, 0.25]])

        np.testing.assert_array_equal(cm.get_cached_inverse(), [[0.5, 0.0], [0.0, 0.25]])
        self.assertEqual(cm.version, 0)

    def test_set_value_clears_inverse_and_bumps_version(self):
        cm = CachedMatrix([[1.0, 2.0], [3.0, 4.0]])
        cm.set_cached_inverse([[-2.0, 1.0], [1.5, -0.5]])

        cm.set_value([[1.0, 0.0], [0.0, 1.0]])

        self.assertIsNone(cm.get_cached_inverse())
        np.testing.assert_array_equal(cm.get_value(), np.eye(2))
        self.assertEqual(cm.version, 1)

    def test_set_value_with_equal_matrix_still_clears(self):
        data = [[1.0, 2.0], [3.0, 4.0]]
        cm = CachedMatrix(data)
        cm.set_cached_inverse([[-2.0, 1.0], [1.5, -0.5]])

        cm.set_value(data)

        self.assertIsNone(cm.get_cached_inverse())

    def test_value_property_routes_through_set_value(self):
        cm = CachedMatrix([[4.0]])
        cm.set_cached_inverse([[0.25]])

        cm.value = [[5.0]]

        self.assertIsNone(cm.get_cached_inverse())
        np.testing.assert_array_equal(cm.value, [[5.0]])

    def test_rectangular_value_is_stored(self):
        cm = CachedMatrix([[1, 2, 3], [4, 5, 6]])
        self.assertEqual(cm.shape, (2, 3))
        self.assertEqual(cm.rows(), 2)
        self.assertEqual(cm.cols(), 3)


class TestCachedMatrixOwnership(unittest.TestCase):
    def test_stored_value_is_a_private_copy(self):
        source = np.array([[1.0, 2.0], [3.0, 4.0]])
        cm = CachedMatrix(source)

        source[0, 0] = 100.0

        self.assertEqual(cm.get_value()[0, 0], 1.0)

    def test_stored_value_is_read_only(self):
        cm = CachedMatrix([[1.0, 2.0], [3.0, 4.0]])
        with self.assertRaises(ValueError):
            cm.get_value()[0, 0] = 5.0

    def test_stored_inverse_is_read_only(self):
        cm = CachedMatrix([[2.0]])
        cm.set_cached_inverse(np.array([[0.5]]))
        with self.assertRaises(ValueError):
            cm.get_cached_inverse()[0, 0] = 1.0

    def test_cached_inverse_may_be_a_vector(self):
        cm = CachedMatrix([[3.0, 1.0], [1.0, 2.0]])
        cm.set_cached_inverse([2.0, 3.0])

        np.testing.assert_array_equal(cm.get_cached_inverse(), [2.0, 3.0])
        with self.assertRaises(ValueError):
            cm.get_cached_inverse()[0] = 0.0

    def test_cached_inverse_rejects_scalar_and_empty(self):
        cm = CachedMatrix([[2.0]])
        with self.assertRaises(ValueError):
            cm.set_cached_inverse(0.5)
        with self.assertRaises(ValueError):
            cm.set_cached_inverse([])
        self.assertIsNone(cm.get_cached_inverse())


    def test_lock_is_reentrant(self):
        cm = CachedMatrix([[2.0]])
        cm.set_cached_inverse([[0.5]])
        with cm.lock:
            with cm.lock:
                cm.set_value([[4.0]])
        self.assertIsNone(cm.get_cached_inverse())

class TestCachedMatrixValidation(unittest.TestCase):
    def test_rejects_empty(self):
        with self.assertRaises(ValueError):
            CachedMatrix([])

    def test_rejects_ragged_rows(self):
        with self.assertRaises(ValueError):
            CachedMatrix([[1.0, 2.0], [3.0]])

    def test_rejects_one_dimensional_input(self):
        with self.assertRaises(TypeError):
            CachedMatrix([1.0, 2.0])
        with self.assertRaises(ValueError):
            CachedMatrix(np.array([1.0, 2.0]))

    def test_rejects_non_numeric(self):
        with self.assertRaises(TypeError):
            CachedMatrix(np.array([["a", "b"], ["c", "d"]]))

    def test_rejects_scalar(self):
        with self.assertRaises(TypeError):
            CachedMatrix(3.0)

    def test_failed_set_value_keeps_previous_state(self):
        cm = CachedMatrix([[2.0]])
        cm.set_cached_inverse([[0.5]])

        with self.assertRaises(ValueError):
            cm.set_value([])

        np.testing.assert_array_equal(cm.get_value(), [[2.0]])
        np.testing.assert_array_equal(cm.get_cached_inverse(), [[0.5]])
        self.assertEqual(cm.version, 0)


class TestOriginalApiNames(unittest.TestCase):
    def test_make_cache_matrix_and_short_accessors(self):
        cm = cachematrix.make_cache_matrix([[1.0, 2.0], [3.0, 4.0]])
        self.assertIsInstance(cm, CachedMatrix)
        self.assertIsNone(cm.getinverse())

        cm.setinverse([[-2.0, 1.0], [1.5, -0.5]])
        np.testing.assert_array_equal(cm.getinverse(), [[-2.0, 1.0], [1.5, -0.5]])

        cm.set([[3.0]])
        self.assertIsNone(cm.getinverse())
        np.testing.assert_array_equal(cm.get(), [[3.0]])

    def test_repr_reports_cache_state(self):
        cm = CachedMatrix([[2.0]])
        self.assertIn("inverse=empty", repr(cm))
        cm.set_cached_inverse([[0.5]])
        self.assertIn("inverse=cached", repr(cm))
        self.assertIn("shape=(1, 1)", str(cm))


if __name__ == "__main__":
    unittest.main()
