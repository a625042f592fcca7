"""
Memory model tests: pointer bounds and cell wraparound
"""

import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from bf_memory import Memory, wrap, DEFAULT_DATA_SIZE
from bf_errors import BoundaryError


class TestWrap(unittest.TestCase):

    def test_in_range_unchanged(self):
        for v in (0, 1, -1, 127, -128):
            self.assertEqual(wrap(v, 8), v)

    def test_wraps_signed(self):
        self.assertEqual(wrap(128, 8), -128)
        self.assertEqual(wrap(-129, 8), 127)
        self.assertEqual(wrap(2**31, 32), -2**31)
        self.assertEqual(wrap(-2**31 - 1, 32), 2**31 - 1)
        self.assertEqual(wrap(2**63, 64), -2**63)


class TestMemory(unittest.TestCase):

    def test_default_size(self):
        self.assertEqual(len(Memory()), DEFAULT_DATA_SIZE)
        self.assertEqual(len(Memory(0)), DEFAULT_DATA_SIZE)

    def test_bad_cell_width(self):
        with self.assertRaises(ValueError):
            Memory(10, cell_bits=12)

    def test_net_displacement(self):
        m = Memory(10)
        for step in ">>><>>><<":
            if step == ">": m.move_right()
            else: m.move_left()
        self.assertEqual(m.ptr, 6 - 3)

    def test_move_left_at_zero(self):
        m = Memory(5)
        with self.assertRaises(BoundaryError):
            m.move_left()
        self.assertEqual(m.ptr, 0)

    def test_move_right_at_end(self):
        m = Memory(3)
        m.move_right(); m.move_right()
        with self.assertRaises(BoundaryError):
            m.move_right()
        self.assertEqual(m.ptr, 2)

    def test_single_cell_tape(self):
        m = Memory(1)
        with self.assertRaises(BoundaryError):
            m.move_right()
        self.assertEqual(m.ptr, 0)

    def test_increment_decrement_inverse(self):
        m = Memory(2, cell_bits=8)
        m.set(5)
        for _ in range(300): m.increment()
        for _ in range(300): m.decrement()
        self.assertEqual(m.get(), 5)

    def test_increment_wraps(self):
        m = Memory(1, cell_bits=8)
        m.set(127)
        m.increment()
        self.assertEqual(m.get(), -128)
        m.decrement()
        self.assertEqual(m.get(), 127)

    def test_touches_single_cell(self):
        m = Memory(4)
        m.move_right()
        m.increment()
        self.assertEqual(m.cells, [0, 1, 0, 0])


if __name__ == "__main__":
    unittest.main()
