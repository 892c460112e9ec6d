import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr

from placetools import place
from placetools.__main__ import parse_arguments, main

class TestCommandLine(unittest.TestCase):
	def setUp(self):
		self.folder = tempfile.TemporaryDirectory()
		self.addCleanup(self.folder.cleanup)

	def write(self, name, text):
		path = os.path.join(self.folder.name, name)
		with open(path, 'w') as fh: fh.write(text)
		return path

	def run_main(self, *argv):
		out, err = io.StringIO(), io.StringIO()
		status = 0
		with redirect_stdout(out), redirect_stderr(err):
			try: main(parse_arguments(list(argv)))
			except SystemExit as e: status = e.code
		return status, out.getvalue(), err.getvalue()

	def test_01_expand_to_stdout(self):
		source = self.write('a.rs', 'const __TO_CASE__(max_size): usize = 10;\n')
		self.assertEqual((0, 'const MAX_SIZE : usize = 10 ;\n', ''), self.run_main(source))

	def test_02_single_builtin(self):
		source = self.write('a.rs', 'a __head__(b c)')
		self.assertEqual((0, '(b c) __head__ a\n', ''), self.run_main(source, '-b', 'reverse'))

	def test_03_output_file_and_force(self):
		source = self.write('a.rs', '__string__(a b)')
		target = self.write('out.txt', 'old')
		status, out, err = self.run_main(source, '-o', target)
		self.assertEqual(1, status)
		self.assertIn('already exists', err)
		status, out, err = self.run_main(source, '-o', target, '-f')
		self.assertEqual(0, status)
		with open(target) as fh: self.assertEqual('"ab"\n', fh.read())

	def test_04_diagnostic(self):
		source = self.write('bad.rs', 'fn x() {\n    __string__\n}\n')
		status, out, err = self.run_main(source)
		self.assertEqual(1, status)
		self.assertEqual('', out)
		self.assertIn('line 2, column 5', err)
		self.assertIn('xpected a group', err)

	def test_05_scan_error(self):
		source = self.write('bad.rs', 'a (b')
		status, out, err = self.run_main(source)
		self.assertEqual(1, status)
		self.assertIn("line 1, column 3: Unclosed delimiter '('", err)

	def test_06_verbose(self):
		source = self.write('a.rs', '__reverse__(a b)')
		try: status, out, err = self.run_main(source, '-v')
		finally: place.VERBOSE = False
		self.assertEqual((0, 'b a\n'), (status, out))
		self.assertIn('__reverse__(a b)', err)


if __name__ == '__main__':
	unittest.main()
