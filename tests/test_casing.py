import unittest

from placetools import casing

class TestWords(unittest.TestCase):
	def test_words(self):
		for identifier, expect in [
			('my_var', ['my', 'var']),
			('MyVar', ['My', 'Var']),
			('myVar', ['my', 'Var']),
			('MY_VAR', ['MY', 'VAR']),
			('my-var name', ['my', 'var', 'name']),
			('XMLHttpRequest', ['XML', 'Http', 'Request']),
			('HTTP', ['HTTP']),
			('v2beta', ['v', '2', 'beta']),
			('__private__', ['private']),
			('', []),
		]:
			with self.subTest(identifier=identifier): self.assertEqual(expect, casing.words(identifier))

class TestConvert(unittest.TestCase):
	def test_01_every_style(self):
		for specifier, expect in [
			('TOCASE', 'HTTPREQUESTID'),
			('tocase', 'httprequestid'),
			('toCase', 'httpRequestId'),
			('ToCase', 'HttpRequestId'),
			('to_case', 'http_request_id'),
			('TO_CASE', 'HTTP_REQUEST_ID'),
		]:
			with self.subTest(specifier=specifier): self.assertEqual(expect, casing.convert(specifier, 'HTTPRequestId'))

	def test_02_my_var(self):
		self.assertEqual('MyVar', casing.convert('ToCase', 'my_var'))

	def test_03_round_trip(self):
		for identifier in ['my_var', 'some_longer_name', 'x', 'abc_2_def']:
			for there, back in [('ToCase', 'to_case'), ('toCase', 'to_case'), ('TO_CASE', 'to_case')]:
				with self.subTest(identifier=identifier, there=there):
					self.assertEqual(identifier, casing.convert(back, casing.convert(there, identifier)))

	def test_04_specifiers_are_case_sensitive(self):
		for specifier in ['TOcase', 'Tocase', 'to-case', '']:
			with self.subTest(specifier=specifier):
				with self.assertRaises(casing.UnknownCase): casing.convert(specifier, 'my_var')


if __name__ == '__main__':
	unittest.main()
