"""
Re-case an identifier: `my_var` -> `MyVar`, `HttpRequest` -> `HTTP_REQUEST`, and so on.

Re-casing is two steps. First break the spelling into words, by whatever
convention it happens to be written in. Then join the words back up in the
requested style. Words break as follows:

	* underscores, hyphens and spaces separate words (and vanish);
	* a lower-case letter followed by an upper-case one starts a new word;
	* a run of capitals followed by a capitalized word is an acronym: `XMLHttp` is `XML` + `Http`;
	* letters and digits never share a word: `v2beta` is `v` + `2` + `beta`.
"""

import re

_BREAK = re.compile(r'''
	[A-Z]+(?=[A-Z][a-z])   # acronym, when a capitalized word follows
	| [A-Z]?[a-z]+         # capitalized or lower-case word
	| [A-Z]+               # all-capitals word
	| [0-9]+
	| [^\W\d_]+            # letters without case
''', re.VERBOSE)

def words(identifier:str) -> list:
	""" Break a spelling into its words. """
	result = []
	for chunk in re.split(r'[_\- ]+', identifier):
		result.extend(_BREAK.findall(chunk))
	return result

def _capitalize(word:str) -> str:
	return word[:1].upper() + word[1:].lower()

def _camel(ws):
	return ''.join(w.lower() if i == 0 else _capitalize(w) for i, w in enumerate(ws))

STYLES = {
	"TOCASE": lambda ws: ''.join(w.upper() for w in ws),
	"tocase": lambda ws: ''.join(w.lower() for w in ws),
	"toCase": _camel,
	"ToCase": lambda ws: ''.join(map(_capitalize, ws)),
	"to_case": lambda ws: '_'.join(w.lower() for w in ws),
	"TO_CASE": lambda ws: '_'.join(w.upper() for w in ws),
}

class UnknownCase(KeyError):
	pass

def convert(specifier:str, identifier:str) -> str:
	"""
	Re-spell the identifier in the style named by the specifier, which must be
	one of the keys of STYLES. Specifiers are case-sensitive: they name the
	style by example.
	"""
	try: style = STYLES[specifier]
	except KeyError: raise UnknownCase(specifier) from None
	return style(words(identifier))
