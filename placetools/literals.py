"""
Literal tokens keep their raw spelling. This module works out what they mean.

`decode(literal)` gives the canonical text of a literal's value, which is what
`string` and `identifier` glue together: an integer becomes its decimal digits,
a string its unescaped content, and so on. `string_value(token)` answers the
narrower question the argument-taking builtins need: "is this a string literal,
and if so, what does it say?"

Malformed or out-of-range literals are reported as diagnostics at the
literal's own span.
"""

import decimal
import re
from typing import Optional

from .interfaces import Diagnostic
from .tokens import LiteralKind, Literal, Group

MAX_U128 = 2**128 - 1

_SUFFIX = re.compile(r'[^\W\d]\w*$')
_SUFFIX_AFTER_QUOTE = re.compile(r'(?<=["\'#])[^\W\d]\w*$')
_FLOAT_NUMBER = re.compile(r'[0-9_]*\.?[0-9_]*(?:[eE][+-]?[0-9_]+)?')
_SIMPLE_ESCAPES = {'n': '\n', 'r': '\r', 't': '\t', '\\': '\\', '0': '\0', "'": "'", '"': '"'}
_ESCAPE = re.compile(r'\\(?:x([0-9a-fA-F]{2})|u\{([0-9a-fA-F_]{1,8})\}|\r?\n\s*|(.))', re.DOTALL)
_RAW = re.compile(r'b?r(#*)"(.*)"\1', re.DOTALL)
_QUOTED = re.compile(r'b?(["\'])(.*)\1', re.DOTALL)


def decode(literal:Literal) -> str:
	""" The canonical text of a literal's value. """
	kind = literal.kind
	if kind is LiteralKind.BOOL: return literal.raw
	if kind is LiteralKind.INTEGER: return str(integer_value(literal))
	if kind is LiteralKind.FLOAT: return render_float(float_value(literal))
	if kind in (LiteralKind.CHAR, LiteralKind.STRING): return quoted_value(literal)
	if kind in (LiteralKind.BYTE, LiteralKind.BYTE_STRING): return literal.raw
	raise AssertionError(kind)


def integer_value(literal:Literal) -> int:
	digits, base = literal.raw.replace('_', ''), 10
	prefix = digits[:2].lower()
	if prefix in ('0x', '0o', '0b'):
		digits, base = digits[2:], {'0x': 16, '0o': 8, '0b': 2}[prefix]
		# Hexadecimal digits include e and f, so only a type suffix proper can end a hex literal.
		digits = re.sub(r'[iu](?:8|16|32|64|128|size)$', '', digits)
	else:
		digits = _SUFFIX.sub('', digits)
	try: value = int(digits, base)
	except ValueError: raise Diagnostic("Malformed integer literal.", literal.span) from None
	if value > MAX_U128: raise Diagnostic("Integer is too large", literal.span)
	return value


def float_value(literal:Literal) -> float:
	number = _FLOAT_NUMBER.match(literal.raw).group().replace('_', '')
	try: return float(number)
	except ValueError: raise Diagnostic("Malformed float literal.", literal.span) from None


def render_float(value:float) -> str:
	"""
	Plain positional notation with the shortest digits that round-trip:
	never an exponent, never a pointless trailing ".0".
	"""
	if value != value: return "NaN"
	if value in (float('inf'), float('-inf')): return "inf" if value > 0 else "-inf"
	text = format(decimal.Decimal(repr(value)), 'f')
	if '.' in text: text = text.rstrip('0').rstrip('.')
	return text


def quoted_value(literal:Literal) -> str:
	""" The content of a string or character literal, raw or otherwise, with escapes resolved. """
	raw = _SUFFIX_AFTER_QUOTE.sub('', literal.raw)
	m = _RAW.fullmatch(raw)
	if m: return m.group(2)
	m = _QUOTED.fullmatch(raw)
	if m is None: raise Diagnostic("Malformed literal.", literal.span)
	return unescape(m.group(2), literal)


def unescape(body:str, literal:Literal) -> str:
	def replace(m):
		hex_point, unicode_point, simple = m.groups()
		if hex_point is not None:
			code = int(hex_point, 16)
			if code > 0x7F and literal.kind in (LiteralKind.CHAR, LiteralKind.STRING):
				raise Diagnostic("Out of range hex escape.", literal.span)
			return chr(code)
		if unicode_point is not None:
			code = int(unicode_point.replace('_', ''), 16)
			if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF: raise Diagnostic("Invalid unicode escape.", literal.span)
			return chr(code)
		if simple is None: return ''  # Line continuation swallows the newline and following whitespace.
		if simple in _SIMPLE_ESCAPES: return _SIMPLE_ESCAPES[simple]
		raise Diagnostic("Unknown character escape: \\%s"%simple, literal.span)
	return _ESCAPE.sub(replace, body)


def string_value(token) -> Optional[str]:
	"""
	If the token is a string literal, or a group wrapping exactly one token that is, return its value.
	Otherwise None. Byte strings do not count.
	"""
	while isinstance(token, Group) and len(token.contents) == 1:
		token = token.contents[0]
	if isinstance(token, Literal) and token.kind is LiteralKind.STRING:
		return quoted_value(token)
	return None
