"""
Marker spellings, and what they select.

Inside `place`, a builtin is invoked by writing its name fenced in double
underscores, like `__string__(...)`, which is unlikely to collide with anything
a macro author means literally. A few builtins have a short alias as well.

Looking up a spelling gives a `Marker`: the builtin it selects, the exact
spelling used, and where it was written. The spelling matters for the
case-conversion family, which is matched without regard to case and then
takes its case specifier from how the marker itself was spelled:
`__ToCase__(my_var)` means `to_case("ToCase", my_var)`.
"""

from enum import Enum
from typing import NamedTuple, Optional

from .tokens import Span
from . import builtins

class Builtin(Enum):
	IGNORE = "ignore"
	IDENTITY = "identity"
	DOLLAR = "dollar"
	STRING = "string"
	HEAD = "head"
	TAIL = "tail"
	START = "start"
	LAST = "last"
	REVERSE = "reverse"
	IDENTIFIER = "identifier"
	STRINGIFY = "stringify"
	REPLACE_NEWLINE = "replace_newline"
	STR_REPLACE = "str_replace"
	TO_CASE = "to_case"

	@property
	def function(self):
		return getattr(builtins, self.value)

	@property
	def takes_span(self) -> bool:
		return self in _POSITIONAL

_POSITIONAL = {Builtin.REPLACE_NEWLINE, Builtin.STR_REPLACE, Builtin.TO_CASE}

SPELLINGS = {
	"__ignore__": Builtin.IGNORE,
	"__identity__": Builtin.IDENTITY,
	"__id__": Builtin.IDENTITY,
	"__dollar__": Builtin.DOLLAR,
	"__s__": Builtin.DOLLAR,
	"__string__": Builtin.STRING,
	"__str__": Builtin.STRING,
	"__head__": Builtin.HEAD,
	"__tail__": Builtin.TAIL,
	"__start__": Builtin.START,
	"__last__": Builtin.LAST,
	"__reverse__": Builtin.REVERSE,
	"__identifier__": Builtin.IDENTIFIER,
	"__ident__": Builtin.IDENTIFIER,
	"__stringify__": Builtin.STRINGIFY,
	"__strfy__": Builtin.STRINGIFY,
	"__replace_newline__": Builtin.REPLACE_NEWLINE,
	"__repnl__": Builtin.REPLACE_NEWLINE,
	"__str_replace__": Builtin.STR_REPLACE,
	"__repstr__": Builtin.STR_REPLACE,
}

CASE_INSENSITIVE_SPELLINGS = {
	"__tocase__": Builtin.TO_CASE,
	"__to_case__": Builtin.TO_CASE,
}

class Marker(NamedTuple):
	builtin: Builtin
	spelling: str
	span: Optional[Span]

	def case_specifier(self) -> str:
		""" The marker's own spelling, stripped of its underscore fence. """
		return self.spelling.strip('_')

	def invoke(self, tokens) -> list:
		if self.builtin.takes_span: return self.builtin.function(tokens, self.span)
		return self.builtin.function(tokens)

def lookup(spelling:str, span:Optional[Span]=None) -> Optional[Marker]:
	""" Return the marker this spelling denotes, or None for an ordinary identifier. """
	if spelling in SPELLINGS:
		return Marker(SPELLINGS[spelling], spelling, span)
	if spelling.startswith("__") and spelling.endswith("__") and spelling.lower() in CASE_INSENSITIVE_SPELLINGS:
		return Marker(CASE_INSENSITIVE_SPELLINGS[spelling.lower()], spelling, span)
	return None
