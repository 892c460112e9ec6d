"""
The fourteen builtin macros. Each maps a token sequence to a token sequence.

None of these knows anything about nesting or marker spellings; that is the
interpreter's job (see `place`). By the time a builtin runs, any markers in its
input have already been expanded, so the builtins are plain functions of
their arguments and can be called directly.

Misuse is reported by raising `Diagnostic`. The three builtins that take
comma-separated arguments also accept the span of the invocation, to have
somewhere to point when the complaint is about an argument that is missing.

A word on argument parsing: there is no grammar here. The argument-taking
builtins walk their input one token at a time, expecting an argument, then a
comma, then an argument, and so on. A single trailing comma is fine. Every
argument is one token: a string literal, an identifier, or a group wrapping
exactly one such token.
"""

import re
from typing import Optional

from .interfaces import Diagnostic
from .tokens import Span, Token, Ident, Punct, Literal, Group, Spacing, render
from . import literals, casing


def ignore(tokens) -> list:
	return []

def identity(tokens) -> list:
	return list(tokens)

def dollar(tokens) -> list:
	tokens = list(tokens)
	if tokens: raise Diagnostic("Macro `dollar` has no arguments.", tokens[0].span)
	return [Punct('$', Spacing.ALONE)]

def string(tokens) -> list:
	""" Glue the text of every token into one string literal; punctuation does not count. """
	return [Literal.string(concatenate(tokens))]

def identifier(tokens) -> list:
	""" Same as `string`, but the result is an identifier. Producing a valid one is up to the caller. """
	return [Ident(concatenate(tokens))]

def head(tokens) -> list:
	return list(tokens)[:1]

def tail(tokens) -> list:
	return list(tokens)[1:]

def start(tokens) -> list:
	return list(tokens)[:-1]

def last(tokens) -> list:
	return list(tokens)[-1:]

def reverse(tokens) -> list:
	return list(tokens)[::-1]

def stringify(tokens) -> list:
	""" A string literal of the input's canonical surface form. """
	return [Literal.string(render(tokens))]


# A newline and the Unicode White_Space after it. The separators \x1c through \x1f are not White_Space.
_NEWLINE_AND_INDENT = re.compile(r'\n[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]*')

def replace_newline(tokens, span:Optional[Span]=None) -> list:
	"""
	replace_newline(text, replacement): every newline in `text`, together with
	whatever whitespace immediately follows it, becomes `replacement`.
	"""
	text, replacement = Arguments(tokens, span).strings(2, "two")
	return [Literal.string(_NEWLINE_AND_INDENT.sub(lambda m: replacement, text))]

def str_replace(tokens, span:Optional[Span]=None) -> list:
	""" str_replace(text, from, to): ordinary left-to-right substring replacement. """
	text, old, new = Arguments(tokens, span).strings(3, "3")
	return [Literal.string(text.replace(old, new))]

def to_case(tokens, span:Optional[Span]=None) -> list:
	"""
	to_case(specifier, identifier): re-case the identifier in the style the specifier names.
	The specifier is usually a string literal, but a bare identifier works too,
	in which case the comma is optional: `to_case(ToCase my_var)`.
	"""
	args = Arguments(tokens, span)
	first = args.next_argument("Expected 2 arguments.")
	if isinstance(first, Ident): args.optional_comma()
	else: args.comma()
	second = args.next_argument("Expected 2 arguments")
	args.finish(2)
	if isinstance(first, Ident): specifier = first.text
	else: specifier = args.require_string(first)
	if not isinstance(second, Ident): raise Diagnostic("Expected identifier", second.span)
	try: respelled = casing.convert(specifier, second.text)
	except casing.UnknownCase: raise Diagnostic("Unknown case specifier: '%s'"%specifier, first.span or span) from None
	return [Ident(respelled, span=second.span)]


def concatenate(tokens) -> str:
	"""
	The text of each identifier and the decoded value of each literal, in order.
	Groups are flattened into their contents; punctuation is dropped.
	"""
	parts = []
	stack = [iter(tokens)]
	while stack:
		token = next(stack[-1], None)
		if token is None: stack.pop()
		elif isinstance(token, Group): stack.append(iter(token.contents))
		elif isinstance(token, Ident): parts.append(token.text)
		elif isinstance(token, Literal): parts.append(literals.decode(token))
	return ''.join(parts)


class Arguments:
	""" The token-by-token micro-parser behind the argument-taking builtins. """
	def __init__(self, tokens, span:Optional[Span]):
		self.__cursor = iter(tokens)
		self.span = span

	def next_argument(self, message:str) -> Token:
		token = next(self.__cursor, None)
		if token is None: raise Diagnostic(message, self.span)
		return token

	def comma(self):
		token = next(self.__cursor, None)
		if token is None: raise Diagnostic("Expected more arguments", self.span)
		if not (isinstance(token, Punct) and token.is_comma()): raise Diagnostic("Expected comma.", token.span)

	def optional_comma(self):
		token = next(self.__cursor, None)
		if token is None: raise Diagnostic("Expected more arguments", self.span)
		if not (isinstance(token, Punct) and token.is_comma()):
			self.__cursor = _pushed_back(token, self.__cursor)

	def finish(self, arity:int):
		""" Tolerate one trailing comma; anything more is an error. """
		token = next(self.__cursor, None)
		if token is None: return
		if not (isinstance(token, Punct) and token.is_comma()):
			raise Diagnostic("Unexpected token in macro invocation", token.span)
		extra = next(self.__cursor, None)
		if extra is not None: raise Diagnostic("Macro takes only %d arguments"%arity, extra.span)

	def require_string(self, token) -> str:
		value = literals.string_value(token)
		if value is None: raise Diagnostic("Expected string literal", token.span)
		return value

	def strings(self, arity:int, spelled:str) -> list:
		""" Exactly `arity` comma-separated string-literal arguments. """
		found = []
		for i in range(arity):
			if i: self.comma()
			found.append(self.next_argument("Expected %s arguments, got %d"%(spelled, i)))
		self.finish(arity)
		return [self.require_string(token) for token in found]

def _pushed_back(token, cursor):
	yield token
	yield from cursor
