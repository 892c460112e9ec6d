"""
This file aggregates the exception types which place-tools deals in.

There are exactly two ways for a caller's input to be wrong. Either the text
cannot be broken into tokens at all (the scanner gets blocked), or the tokens
are fine but a builtin macro is being used incorrectly. The latter is called
a diagnostic, after the way a compiler treats it: it is not a crash, it is a
message with a location, and the host gets to decide how to show it.

Diagnostics have a second life as tokens. A macro host expects a token
sequence back no matter what, so `Diagnostic.tokens()` renders the message as
`compile_error!("...")` positioned at the offending span. Code that calls
into the interpreter through `place(...)` never sees the exception itself.
"""

from typing import Optional

from .tokens import Ident, Punct, Group, Literal, Delimiter, Span

class LanguageError(ValueError):
	""" Base class of all exceptions arising from the language machinery. """

class ScannerBlocked(LanguageError):
	"""
	Raised if the scanner gets blocked.
	Parameters are:
		the string offset where it happened.
		a short description of what went wrong there.
	"""
	def __init__(self, position:int, message:str="Lexical scan got stuck."):
		super().__init__(position, message)
		self.position, self.message = position, message

class Diagnostic(LanguageError):
	"""
	A user-facing complaint about the way a builtin macro was used.
	The span may be None when no token is available to blame.
	"""
	def __init__(self, message:str, span:Optional[Span]=None):
		super().__init__(message, span)
		self.message, self.span = message, span
	
	def __str__(self): return self.message
	
	def tokens(self) -> list:
		""" The token sequence a macro host would substitute in place of a normal expansion. """
		text = Literal.string(self.message, span=self.span)
		return [
			Ident("compile_error", span=self.span),
			Punct("!"),
			Group(Delimiter.PARENTHESIS, (text,), span=self.span),
		]
