import unittest

from placetools import scanning
from placetools.interfaces import ScannerBlocked
from placetools.tokens import Span, Delimiter, Spacing, LiteralKind, Ident, Punct, Literal, Group, render

def kinds(text):
	return [(t.kind, t.raw) for t in scanning.scan(text)]

class TestScanner(unittest.TestCase):
	def test_00_smoke_test(self):
		self.assertEqual([], scanning.scan(''))
		self.assertEqual([], scanning.scan('  // nothing here\n  /* or here */ '))
		self.assertEqual([Ident("a")], scanning.scan("a"))

	def test_01_identifiers(self):
		self.assertEqual([Ident("foo"), Ident("_bar9"), Ident("r#type"), Ident("true")], scanning.scan("foo _bar9 r#type true"))

	def test_02_spans(self):
		a, b = scanning.scan("ab  (cd)")
		self.assertEqual(Span(0, 2), a.span)
		self.assertEqual(Span(4, 8), b.span)
		self.assertEqual(Span(5, 7), b.contents[0].span)

	def test_03_punctuation_spacing(self):
		self.assertEqual(
			[Ident("a"), Punct("-", Spacing.JOINT), Punct(">", Spacing.ALONE), Ident("b")],
			scanning.scan("a -> b"),
		)
		self.assertEqual(
			[Punct("&", Spacing.ALONE), Ident("x"), Punct(",", Spacing.ALONE), Punct("$", Spacing.ALONE)],
			scanning.scan("&x, $"),
		)
		# A slash that starts a comment does not make the one before it joint.
		self.assertEqual([Punct("=", Spacing.ALONE)], scanning.scan("=// comment"))

	def test_04_lifetimes(self):
		self.assertEqual([Punct("'", Spacing.JOINT), Ident("a")], scanning.scan("'a"))
		self.assertEqual([(LiteralKind.CHAR, "'a'")], kinds("'a'"))

	def test_05_literals(self):
		for text, kind in [
			('42', LiteralKind.INTEGER),
			('1_000u32', LiteralKind.INTEGER),
			('0x2F', LiteralKind.INTEGER),
			('0b1010', LiteralKind.INTEGER),
			('0o777', LiteralKind.INTEGER),
			('1.5', LiteralKind.FLOAT),
			('2.', LiteralKind.FLOAT),
			('1e10', LiteralKind.FLOAT),
			('2.5E-3f32', LiteralKind.FLOAT),
			('7f64', LiteralKind.FLOAT),
			("'x'", LiteralKind.CHAR),
			("'\\n'", LiteralKind.CHAR),
			("'\\u{1F600}'", LiteralKind.CHAR),
			("b'x'", LiteralKind.BYTE),
			('"hello\\n"', LiteralKind.STRING),
			('"two\nlines"', LiteralKind.STRING),
			('r#"raw "quoted" text"#', LiteralKind.STRING),
			('b"bytes"', LiteralKind.BYTE_STRING),
			('br"raw bytes"', LiteralKind.BYTE_STRING),
		]:
			with self.subTest(text=text): self.assertEqual([(kind, text)], kinds(text))

	def test_06_range_is_not_a_float(self):
		self.assertEqual(
			[Literal(LiteralKind.INTEGER, "1"), Punct(".", Spacing.JOINT), Punct(".", Spacing.ALONE), Literal(LiteralKind.INTEGER, "2")],
			scanning.scan("1..2"),
		)

	def test_07_field_access_on_integer(self):
		self.assertEqual([Ident("t"), Punct("."), Literal(LiteralKind.INTEGER, "0")], scanning.scan("t.0"))

	def test_08_groups(self):
		self.assertEqual(
			[Ident("f"), Group(Delimiter.PARENTHESIS, [Ident("a"), Group(Delimiter.BRACKET, [Group(Delimiter.BRACE, [])])])],
			scanning.scan("f(a [{}])"),
		)

	def test_09_nested_block_comments(self):
		self.assertEqual([Ident("a"), Ident("b")], scanning.scan("a /* one /* two */ still one */ b"))

	def test_10_punctuation_before_a_lifetime(self):
		self.assertEqual([Punct("&", Spacing.ALONE), Punct("'", Spacing.JOINT), Ident("a")], scanning.scan("&'a"))
		self.assertEqual("< 'a > & 'static str", render(scanning.scan("<'a> &'static str")))


class TestScannerBlocked(unittest.TestCase):
	def test_blockages(self):
		for text, position in [
			('a ` b', 2),
			('(a', 0),
			('a)', 1),
			('(a]', 2),
			('x /* never closed', 2),
			('"unterminated', 0),
		]:
			with self.subTest(text=text):
				with self.assertRaises(ScannerBlocked) as cm: scanning.scan(text)
				self.assertEqual(position, cm.exception.position)


class TestDefinition(unittest.TestCase):
	def test_01_rank_breaks_ties(self):
		d = scanning.Definition()
		d.ignore(r'\s+')
		@d.on(r'\w+')
		def word(yy): yy.token(Ident(yy.match()))
		@d.on(r'\d+', rank=1)
		def number(yy): yy.token(Literal.integer(int(yy.match())))
		self.assertEqual([Ident("abc"), Literal.integer(123), Ident("def456")], d.scan("abc 123 def456"))

	def test_02_forgotten_action(self):
		d = scanning.Definition()
		d.on(r'x')
		with self.assertRaises(AssertionError): d.on(r'y')


if __name__ == '__main__':
	unittest.main()
