"""Tests for the reusable equation buffer."""

import unittest
from unittest import mock

import numpy as np

from gradellipse import EquationBuffer, InvalidInputError, OutOfMemoryError


class TestEquationBuffer(unittest.TestCase):

    def test_growth(self):
        buff = EquationBuffer()
        self.assertEqual(buff.capacity, 1)
        self.assertTrue(buff.reserve(3))
        self.assertEqual(buff.capacity, 2*3*24)
        self.assertFalse(buff.reserve(6))
        self.assertEqual(buff.capacity, 144)
        self.assertTrue(buff.reserve(7))
        self.assertEqual(buff.capacity, 2*7*24)

    def test_never_shrinks(self):
        buff = EquationBuffer()
        buff.reserve(50)
        for n in (1, 10, 49):
            self.assertFalse(buff.reserve(n))
            self.assertEqual(buff.capacity, 2400)
            self.assertEqual(buff.data.size, 2400)

    def test_large_initial_capacity(self):
        buff = EquationBuffer(capacity=1000)
        self.assertFalse(buff.reserve(41))
        self.assertTrue(buff.reserve(42))
        self.assertEqual(buff.capacity, 2*42*24)

    def test_rows_view(self):
        buff = EquationBuffer()
        buff.reserve(5)
        rows = buff.rows(5)
        self.assertEqual(rows.shape, (20, 6))
        self.assertTrue(np.shares_memory(rows, buff.data))
        self.assertEqual(buff.rows(2).shape, (8, 6))

    def test_rows_without_room(self):
        buff = EquationBuffer()
        with self.assertRaises(InvalidInputError):
            buff.rows(2)

    def test_invalid_sizes(self):
        with self.assertRaises(InvalidInputError):
            EquationBuffer(capacity=0)
        buff = EquationBuffer()
        with self.assertRaises(InvalidInputError):
            buff.reserve(0)
        with self.assertRaises(InvalidInputError):
            buff.reserve(-3)

    def test_out_of_memory(self):
        buff = EquationBuffer()
        with mock.patch('gradellipse._buffer.np.empty', side_effect=MemoryError):
            with self.assertRaises(OutOfMemoryError) as cm:
                buff.reserve(10)
        self.assertIsInstance(cm.exception, MemoryError)
        self.assertEqual(buff.capacity, 1)

    def test_growth_is_logged(self):
        buff = EquationBuffer()
        with self.assertLogs(level='DEBUG') as cm:
            buff.reserve(2)
        self.assertIn('growing equation buffer from 1 to 96', cm.output[0])


if __name__ == '__main__':
    unittest.main()
