"""
Turn source text into token trees.

The macro host normally does this part, but a library that only ever sees
pre-made tokens is hard to use and harder to test. So here is a small scanner
for Rust-flavoured text: identifiers, punctuation, the usual literal forms,
and the three kinds of bracket, which it assembles into nested groups as it goes.

It is organized the same way as any other pattern-action scanner: a `Definition`
holds (pattern, rank, action) rules; a `Scanner` walks the text, picks the rule
with the longest match (higher rank breaks ties, then earlier definition), and
calls the action. Actions talk back to the scanner through `yy`: they can
read the matched text, emit tokens, open or close groups, or move the cursor.

Brackets are matched with an explicit stack of open groups, not by recursion,
so nesting depth is limited only by memory.
"""

import re
from typing import Callable, Optional

from .interfaces import ScannerBlocked
from .tokens import Span, Delimiter, Spacing, LiteralKind, Ident, Punct, Literal, Group, OPENERS, CLOSERS

PUNCTUATION = set("~!@#$%^&*-=+|;:,<.>/?")

class Definition:
	""" Hook regular expression patterns up to actions on a scanner object. """
	def __init__(self):
		self.__rules = []
		self.__awaiting_action = False

	def on(self, pattern:str, *, rank=0):
		"""
		For instance:
		@definition.on(r'[A-Za-z_]+')
		def word(yy): yy.token(Ident(yy.match(), span=yy.span()))
		"""
		if self.__awaiting_action: raise AssertionError('You forgot to provide the action for the previous pattern!')
		self.__awaiting_action = True
		compiled = re.compile(pattern)
		def decorator(fn):
			assert self.__awaiting_action
			self.__awaiting_action = False
			assert callable(fn)
			self.__rules.append((compiled, rank, fn))
			return fn
		return decorator

	def ignore(self, pattern:str, *, rank=0):
		""" Tell the scanner to skip whatever matches the pattern. """
		@self.on(pattern, rank=rank)
		def action(yy): pass

	def literal(self, kind:LiteralKind, pattern:str, *, rank=0):
		""" Every match of the pattern is a literal of the given kind, spelled as matched. """
		@self.on(pattern, rank=rank)
		def action(yy): yy.token(Literal(kind, yy.match(), span=yy.span()))

	def best_match(self, text:str, position:int) -> tuple[int, Optional[Callable]]:
		"""
		Longest match wins; rank breaks ties; then the earliest rule.
		Zero-width matches never count.
		"""
		if self.__awaiting_action: raise AssertionError('You forgot to provide the action for the final pattern!')
		right, best, action = position, None, None
		for pattern, rank, fn in self.__rules:
			m = pattern.match(text, position)
			if m is None or m.end() == position: continue
			key = (m.end(), rank)
			if best is None or key > best:
				right, best, action = m.end(), key, fn
		return right, action

	def scan(self, text:str) -> list:
		return Scanner(text, self).scan_repeatedly()


class Scanner:
	"""
	Walks the text one lexeme at a time, keeping a stack of the groups still open.
	The bottom of the stack is the top-level token sequence.
	"""

	def __init__(self, text:str, definition:Definition):
		self.__text = text
		self.__size = len(text)
		self.__definition = definition
		self.__stack = [(Delimiter.NONE, [], None)]
		self.left = self.right = 0

	def scan_one_item(self):
		cursor = self.left = self.right
		self.right, action = self.__definition.best_match(self.__text, cursor)
		if action is None:
			self.right = cursor + 1
			raise ScannerBlocked(cursor, "Unexpected character %r."%self.__text[cursor])
		action(self)

	def scan_repeatedly(self) -> list:
		""" Consume all the text and return the top-level token sequence. """
		while self.has_more():
			self.scan_one_item()
		if len(self.__stack) > 1:
			delimiter, contents, opened = self.__stack[-1]
			raise ScannerBlocked(opened.left, "Unclosed delimiter %r."%delimiter.open)
		return self.__stack[0][1]

	def has_more(self):
		return self.right < self.__size

	def match(self):
		""" Return the actual matched text """
		return self.__text[self.left:self.right]

	def span(self) -> Span:
		""" The extent of matched text. """
		return Span(self.left, self.right)

	def peek(self, offset=0) -> str:
		""" The character just after the match, or the empty string at end of text. """
		return self.__text[self.right + offset:self.right + offset + 1]

	def seek(self, position):
		""" Scanning will next resume at the position given. """
		self.right = position

	def find(self, needle:str, start:int) -> int:
		return self.__text.find(needle, start)

	def token(self, token):
		""" Append a finished token to whichever group is innermost right now. """
		self.__stack[-1][1].append(token)

	def open(self, delimiter:Delimiter):
		self.__stack.append((delimiter, [], self.span()))

	def close(self, delimiter:Delimiter):
		if len(self.__stack) == 1:
			raise ScannerBlocked(self.left, "Unexpected closing delimiter %r."%delimiter.close)
		expected, contents, opened = self.__stack.pop()
		if expected is not delimiter:
			raise ScannerBlocked(self.left, "Mismatched closing delimiter %r; expected %r."%(delimiter.close, expected.close))
		self.token(Group(delimiter, contents, span=opened.join(self.span())))


SUFFIX = r'(?:[^\W\d]\w*)?'
DECIMAL = r'[0-9][0-9_]*'
EXPONENT = r'[eE][+-]?[0-9_]*[0-9][0-9_]*'
CHAR_BODY = r'(?:[^\'\\\n\r\t]|\\(?:x[0-9a-fA-F]{2}|u\{[0-9a-fA-F_]{1,8}\}|[nrt\\0\'"]))'
STRING_BODY = r'"(?:[^"\\]|\\[\s\S])*"'

RUST = Definition()

RUST.ignore(r'\s+')
RUST.ignore(r'//[^\n]*')

@RUST.on(r'/\*')
def _block_comment(yy:Scanner):
	# Block comments nest, which a regular expression cannot count.
	depth, cursor = 1, yy.right
	while depth:
		close = yy.find('*/', cursor)
		if close < 0: raise ScannerBlocked(yy.left, "Unterminated block comment.")
		nested = yy.find('/*', cursor)
		if 0 <= nested < close: depth, cursor = depth + 1, nested + 2
		else: depth, cursor = depth - 1, close + 2
	yy.seek(cursor)

@RUST.on(r'(?:r#)?[^\W\d]\w*')
def _identifier(yy:Scanner):
	yy.token(Ident(yy.match(), span=yy.span()))

@RUST.on(r"'[^\W\d]\w*")
def _lifetime(yy:Scanner):
	# A lifetime or loop label is a joint apostrophe followed by an identifier.
	left = yy.left
	yy.token(Punct("'", Spacing.JOINT, span=Span(left, left+1)))
	yy.token(Ident(yy.match()[1:], span=Span(left+1, yy.right)))

RUST.literal(LiteralKind.CHAR, "'" + CHAR_BODY + "'" + SUFFIX)
RUST.literal(LiteralKind.BYTE, "b'" + CHAR_BODY + "'" + SUFFIX)
RUST.literal(LiteralKind.STRING, STRING_BODY + SUFFIX)
RUST.literal(LiteralKind.STRING, r'r(#*)"[\s\S]*?"\1' + SUFFIX)
RUST.literal(LiteralKind.BYTE_STRING, 'b' + STRING_BODY + SUFFIX)
RUST.literal(LiteralKind.BYTE_STRING, r'br(#*)"[\s\S]*?"\1' + SUFFIX)

@RUST.on(r'(?:0x[0-9a-fA-F_]+|0o[0-7_]+|0b[01_]+|' + DECIMAL + ')' + SUFFIX)
def _integer(yy:Scanner):
	text = yy.match()
	# A plain decimal with a float type suffix is a float literal after all.
	is_float = text[:2] not in ('0x', '0o', '0b') and text.endswith(('f32', 'f64'))
	yy.token(Literal(LiteralKind.FLOAT if is_float else LiteralKind.INTEGER, text, span=yy.span()))

RUST.literal(LiteralKind.FLOAT, DECIMAL + r'\.[0-9][0-9_]*(?:' + EXPONENT + ')?' + SUFFIX, rank=1)
RUST.literal(LiteralKind.FLOAT, DECIMAL + EXPONENT + SUFFIX, rank=1)
RUST.literal(LiteralKind.FLOAT, DECIMAL + r'\.(?![.\w])', rank=1)

@RUST.on(r'[~!@#$%^&*\-=+|;:,<.>/?]')
def _punctuation(yy:Scanner):
	follower = yy.peek()
	starts_comment = yy.peek() == '/' and yy.peek(1) in ('/', '*')
	spacing = Spacing.JOINT if follower in PUNCTUATION and not starts_comment else Spacing.ALONE
	yy.token(Punct(yy.match(), spacing, span=yy.span()))

@RUST.on(r'[(\[{]')
def _open(yy:Scanner): yy.open(OPENERS[yy.match()])

@RUST.on(r'[)\]}]')
def _close(yy:Scanner): yy.close(CLOSERS[yy.match()])


def scan(text:str) -> list:
	""" Break Rust-flavoured source text into a sequence of token trees. """
	return RUST.scan(text)
