"""
Input/output provider tests
"""

import io
import os
import tempfile
import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from bf_io import FileReader, FileWriter, StdInReader, StdOutWriter
from bf_vm import BfInterpreter


class TestProviders(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def path(self, name):
        return os.path.join(self.tmp.name, name)

    def test_file_reader(self):
        p = self.path("in.bin")
        with open(p, "wb") as f:
            f.write(bytes([7, 200]))
        with FileReader(p) as r:
            self.assertEqual(r.read("hint"), 7)
            self.assertEqual(r.read("hint"), 200)
            with self.assertRaises(EOFError):
                r.read("hint")

    def test_file_writer(self):
        p = self.path("out.txt")
        with FileWriter(p) as w:
            w.write(3)
            w.write(-15)
        with open(p) as f:
            self.assertEqual(f.read(), "3 -15 ")

    def test_stdin_reader(self):
        prompt = io.StringIO()
        r = StdInReader(io.StringIO("42\nA\n-3\n"), prompt)
        self.assertEqual(r.read("enter value [#cmd: 1]"), 42)
        self.assertEqual(r.read("x"), ord("A"))
        self.assertEqual(r.read("y"), -3)
        self.assertEqual(prompt.getvalue(), "enter value [#cmd: 1]: x: y: ")
        with self.assertRaises(EOFError):
            r.read("z")

    def test_stdin_reader_rejects_words(self):
        r = StdInReader(io.StringIO("hello\n"), io.StringIO())
        with self.assertRaises(ValueError):
            r.read("")

    def test_stdout_writer(self):
        out = io.StringIO()
        with StdOutWriter(out) as w:
            w.write(1)
            w.write(-2)
        self.assertEqual(out.getvalue(), "1\n-2\n")

    def test_file_round_trip_through_vm(self):
        src, dst = self.path("in.bin"), self.path("out.txt")
        with open(src, "wb") as f:
            f.write(bytes([5, 6]))
        with FileReader(src) as r, FileWriter(dst) as w:
            BfInterpreter(2, input=r, output=w).run(",.>,+.")
        with open(dst) as f:
            self.assertEqual(f.read(), "5 7 ")


if __name__ == "__main__":
    unittest.main()
