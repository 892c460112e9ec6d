"""
The token model: what a macro host hands to place-tools, and what it gets back.

A token is one of four things. Identifiers and punctuation are what they look
like. Literals keep their raw source spelling together with a kind tag, so that
nothing is lost by passing them through untouched: the decoding of a literal
into a value happens only when a builtin asks for it (see `literals`). Groups
are the only recursive case: a delimiter and an ordered run of tokens.

Every token may carry a span for the sake of error messages. Spans take no
part in equality. Two tokens spelled the same are the same token, no matter
where they came from.

The `render` function at the bottom gives the canonical re-printed surface form
of a token sequence. It is what `stringify` produces and what the command-line
driver prints.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional

class Span(NamedTuple):
	""" Character offsets (left inclusive, right exclusive) into the scanned text. """
	left: int
	right: int

	def slice(self): return slice(self.left, self.right)

	def join(self, other:Optional["Span"]) -> "Span":
		if other is None: return self
		return Span(min(self.left, other.left), max(self.right, other.right))

class Delimiter(Enum):
	PARENTHESIS = ("(", ")")
	BRACKET = ("[", "]")
	BRACE = ("{", "}")
	NONE = ("", "")

	@property
	def open(self): return self.value[0]

	@property
	def close(self): return self.value[1]

OPENERS = {d.open: d for d in Delimiter if d is not Delimiter.NONE}
CLOSERS = {d.close: d for d in Delimiter if d is not Delimiter.NONE}

class Spacing(Enum):
	ALONE = "alone"
	JOINT = "joint"  # Glued to the following punctuation, as in `->` or `::`.

class LiteralKind(Enum):
	BOOL = "bool"
	INTEGER = "integer"
	FLOAT = "float"
	CHAR = "char"
	STRING = "string"
	BYTE = "byte"
	BYTE_STRING = "byte-string"


class Token:
	""" Base class of the four token types. Only here to make `isinstance` checks read well. """
	__slots__ = ()
	span: Optional[Span]


@dataclass(frozen=True)
class Ident(Token):
	text: str
	span: Optional[Span] = field(default=None, compare=False, repr=False)

	def __str__(self): return self.text


@dataclass(frozen=True)
class Punct(Token):
	char: str
	spacing: Spacing = Spacing.ALONE
	span: Optional[Span] = field(default=None, compare=False, repr=False)

	def __str__(self): return self.char

	def is_comma(self): return self.char == ','


@dataclass(frozen=True)
class Literal(Token):
	kind: LiteralKind
	raw: str
	span: Optional[Span] = field(default=None, compare=False, repr=False)

	def __str__(self): return self.raw

	@staticmethod
	def string(value:str, span=None) -> "Literal":
		return Literal(LiteralKind.STRING, '"%s"'%escape(value), span=span)

	@staticmethod
	def integer(value:int, span=None) -> "Literal":
		assert value >= 0, value
		return Literal(LiteralKind.INTEGER, str(value), span=span)

	@staticmethod
	def boolean(value:bool, span=None) -> "Literal":
		return Literal(LiteralKind.BOOL, "true" if value else "false", span=span)


@dataclass(frozen=True)
class Group(Token):
	delimiter: Delimiter
	contents: tuple
	span: Optional[Span] = field(default=None, compare=False, repr=False)

	def __post_init__(self):
		# Accept any iterable of tokens, but keep a tuple so the group stays immutable.
		if not isinstance(self.contents, tuple):
			object.__setattr__(self, 'contents', tuple(self.contents))

	def __str__(self): return render([self])


_ESCAPES = {'\0': '\\0', '\t': '\\t', '\r': '\\r', '\n': '\\n', '\\': '\\\\', '"': '\\"'}

def escape(value:str) -> str:
	""" Spell a string the way it must appear between double-quotes in a string literal. """
	def one(c):
		if c in _ESCAPES: return _ESCAPES[c]
		if not c.isprintable() and c != ' ': return '\\u{%x}'%ord(c)
		return c
	return ''.join(map(one, value))


def render(tokens) -> str:
	"""
	Canonical surface form: one space between tokens, except after joint punctuation.
	Parenthesis and bracket groups hug their contents; brace groups get a space inside.
	Delimiter-free groups print only their contents.
	"""
	parts = []
	# Each level is [cursor, enclosing group, at first token, after joint punctuation].
	stack = [[iter(tokens), None, True, False]]
	while stack:
		level = stack[-1]
		cursor, group, first, joint = level
		token = next(cursor, None)
		if token is None:
			stack.pop()
			if group is not None:
				if group.delimiter is Delimiter.BRACE and group.contents: parts.append(' ')
				parts.append(group.delimiter.close)
			continue
		if not (first or joint): parts.append(' ')
		level[2] = False
		level[3] = isinstance(token, Punct) and token.spacing is Spacing.JOINT
		if isinstance(token, Group):
			parts.append(token.delimiter.open)
			if token.delimiter is Delimiter.BRACE: parts.append(' ')
			stack.append([iter(token.contents), token, True, False])
		else:
			parts.append(str(token))
	return ''.join(parts)
