"""
The rewrite interpreter: find builtin markers in a token sequence and expand them.

A marker is an identifier like `__string__` followed by a group, which holds
its arguments. Markers nest, and the innermost ones run first, so that an
outer builtin always sees arguments that are already fully expanded:

	__string__(a __reverse__(b c))  ->  "acb"

The walk uses an explicit stack of frames rather than recursion. A frame is one
group being walked: a cursor over its remaining tokens, the marker (if any)
waiting for the frame's output, the delimiter to rebuild the group with, and
the output accumulated so far. When a frame runs dry, its output either goes
through the pending builtin or gets wrapped back up as a group, and in either
case lands in the output of the frame underneath.

Three markers get special treatment:

	* `__dollar__` takes no group at all, and expands on the spot to `$`.
	* `__identity__` copies its group's contents out without walking them,
	  so whatever markers are inside stay inert.
	* `__ignore__` directly followed by another marker drops that marker.
	  `__ignore__ __dollar__` vanishes completely; `__ignore__ __m__(...)`
	  splices the group's contents into the surrounding sequence unexpanded
	  by `__m__`, which is how to write a marker-shaped name that is not a call.

`rewrite` raises `Diagnostic` for the first malformed marker it meets.
`place` and `invoke` are the host-facing surfaces: they never raise a
diagnostic; they return it rendered as tokens.
"""

import itertools
import sys
from typing import Optional

from .interfaces import Diagnostic
from .tokens import Span, Delimiter, Token, Ident, Punct, Literal, Group, Spacing, render
from .markers import Builtin, Marker, lookup

VERBOSE = False

class Frame:
	__slots__ = ('cursor', 'marker', 'delimiter', 'output')
	def __init__(self, tokens, marker:Optional[Marker], delimiter:Delimiter):
		self.cursor = iter(tokens)
		self.marker = marker
		self.delimiter = delimiter
		self.output = []

def rewrite(tokens) -> list:
	""" Expand every marker in the token sequence, innermost first. Raises `Diagnostic` on misuse. """
	stack = [Frame(tokens, None, Delimiter.NONE)]
	while True:
		frame = stack[-1]
		token = next(frame.cursor, None)
		if token is None:
			if frame.marker is not None:
				stack.pop()
				stack[-1].output.extend(_apply(frame.marker, frame.output))
			elif len(stack) > 1:
				stack.pop()
				stack[-1].output.append(Group(frame.delimiter, frame.output))
			else:
				return frame.output
		elif isinstance(token, Group):
			stack.append(Frame(token.contents, None, token.delimiter))
		else:
			marker = lookup(token.text, token.span) if isinstance(token, Ident) else None
			if marker is None: frame.output.append(token)
			elif marker.builtin is Builtin.DOLLAR: frame.output.append(Punct('$', Spacing.ALONE))
			else: _call(stack, marker, next(frame.cursor, None))

def _call(stack, marker:Marker, group:Optional[Token]):
	""" A marker and whatever follows it, which ought to be its argument group. """
	frame = stack[-1]
	builtin = marker.builtin
	if not isinstance(group, Group):
		if builtin is Builtin.IGNORE: _ignore_marker(frame, group, marker)
		else: _expected_group(marker.spelling, marker.span, group)
	elif builtin is Builtin.IDENTITY:
		frame.output.extend(group.contents)
	elif builtin is Builtin.TO_CASE:
		specifier = Literal.string(marker.case_specifier(), span=marker.span)
		prefix = (specifier, Punct(',', Spacing.ALONE, span=marker.span))
		stack.append(Frame(prefix + group.contents, marker, group.delimiter))
	else:
		stack.append(Frame(group.contents, marker, group.delimiter))

def _expected_group(spelling:str, span:Optional[Span], found:Optional[Token]):
	if found is None: raise Diagnostic("Expected a group after builtin macro `%s`."%spelling, span)
	raise Diagnostic("Expected a group after builtin macro `%s`, found `%s`."%(spelling, found), found.span)

def _ignore_marker(frame:Frame, follower:Optional[Token], ignore:Marker):
	"""
	`__ignore__` followed by another marker instead of a group. The other marker is
	dropped, and its group (if it takes one) is spliced into the current frame.
	"""
	other = lookup(follower.text, follower.span) if isinstance(follower, Ident) else None
	if other is None:
		if follower is None: _expected_group(ignore.spelling, ignore.span, None)
		raise Diagnostic("Expected a group or builtin macro after `%s`, found `%s`."%(ignore.spelling, follower), follower.span)
	if other.builtin is Builtin.DOLLAR: return
	group = next(frame.cursor, None)
	if not isinstance(group, Group): _expected_group(other.spelling, other.span, group)
	frame.cursor = itertools.chain(group.contents, frame.cursor)

def _apply(marker:Marker, arguments:list) -> list:
	if VERBOSE: print("%s(%s)"%(marker.spelling, render(arguments)), file=sys.stderr)
	return marker.invoke(arguments)


def place(tokens) -> list:
	"""
	Same as `rewrite`, but a misused marker produces a `compile_error!(...)`
	token sequence in place of the expansion instead of an exception.
	"""
	try: return rewrite(tokens)
	except Diagnostic as d: return d.tokens()

def call(name:str, tokens, span:Optional[Span]=None) -> list:
	"""
	Apply one builtin, by its plain name (like "str_replace"), directly to the tokens.
	There is no marker expansion: any markers among the tokens are just identifiers.
	Raises `Diagnostic` on misuse, and ValueError if there is no builtin by that name.
	"""
	return _apply(Marker(Builtin(name), name, span), list(tokens))

def invoke(name:str, tokens, span:Optional[Span]=None) -> list:
	""" Same as `call`, but misuse produces diagnostic tokens, as with `place`. """
	try: return call(name, tokens, span)
	except Diagnostic as d: return d.tokens()
