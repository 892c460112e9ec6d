"""
This module is all about showing where things went wrong in a piece of source text.

The scanner and the builtins know locations only as character offsets (the
`Span` on each token). A person wants a line, a column, and a picture. The
`SourceText` wrapper converts the one into the other, and `illustration`
draws the picture: the offending line with a caret underline beneath it.

`SourceText.explain(error)` takes any of the errors place-tools raises on
purpose and turns it into such a located complaint; `complain(error)` prints
it to standard error. A diagnostic without a span (which happens when the
builtin was called directly, with no source text behind it) just gets its
message.

Line breaks are a funny thing. Unix calls for \n, old Apple for \r, DOS for \r\n,
and the Unicode line-breaking algorithm names eleven ways. The default here
treats the first three as line breaks, which matches what editors do. Pass a
different key from LINEBREAK_MODE if you need something else.
"""

import bisect, re, sys
from typing import Optional

from ..interfaces import LanguageError, ScannerBlocked, Diagnostic

LINEBREAK_MODE = {
	'normal': re.compile(r'\r\n?|\n'),
	'unicode': re.compile(r'\r\n|[\x0a-\x0d\x1c-\x1e\u0085\u2028\u2029]'),
	'unix': re.compile(r'\n'),
	'apple': re.compile(r'\r'),
	'dos': re.compile(r'\r\n'),
}

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. Useful for polite error messages. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline_width = max(1, min(width, len(single_line.rstrip())-start))
	underline = '^'*underline_width
	return prefix + single_line.rstrip() + '\n' + blanks + underline + " " + caption

class SourceText:
	""" Wrapper for (a section of) source text: participates in half-respectable error-display with context. """
	def __init__(self, content:str, line_breaks='normal', filename:Optional[str]=None, first_line=1):
		self.content = content
		self.filename = filename
		self.line_breaks = line_breaks
		self.first_line = first_line
		self.__bounds = None

	def __make_bounds(self):
		""" Lazily only find line breaks if it turns out to be necessary for a particular text. """
		if self.__bounds is None:
			inside = [m.end() for m in LINEBREAK_MODE[self.line_breaks].finditer(self.content)]
			self.__bounds = [0] + inside + [len(self.content)]

	def find_row_col(self, index:int):
		""" Based on a character index offset from the start of text. Respects self.first_line. """
		self.__make_bounds()
		row = bisect.bisect_right(self.__bounds, index, hi=len(self.__bounds) - 1) - 1
		col = index - self.__bounds[row]
		return row+self.first_line, col

	def line_of_text(self, row):
		""" Argument respects self.first_line. """
		self.__make_bounds()
		r = max(0, row - self.first_line)
		return self.content[self.__bounds[r]:self.__bounds[r + 1]]

	def _format_message(self, row, col, message):
		prefix = "At" if self.filename is None else str(self.filename)+":"
		return "%s line %d, column %d: %s" % (prefix, row, col + 1, message)

	def complaint(self, a_slice:slice, message:str):
		left, right = a_slice.start, a_slice.stop
		row, col = self.find_row_col(left)
		reference = self._format_message(row, col, message)
		line = self.line_of_text(row)
		illustrated = illustration(line, col, right - left, prefix=' >>> ')
		return "%s\n%s"%(reference, illustrated)

	def complain(self, error:LanguageError):
		""" Print the located complaint for an error to standard error. """
		print(self.explain(error), file=sys.stderr)

	def explain(self, error:LanguageError) -> str:
		""" A located complaint for a scanner blockage or a diagnostic. """
		if isinstance(error, ScannerBlocked):
			return self.complaint(slice(error.position, error.position+1), error.message)
		if isinstance(error, Diagnostic):
			if error.span is None:
				prefix = "Error" if self.filename is None else str(self.filename)
				return "%s: %s"%(prefix, error.message)
			return self.complaint(error.span.slice(), error.message)
		raise TypeError(error)
