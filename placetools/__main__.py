"""
Expand the builtin markers in a file of Rust-flavoured source text
and print the canonical rendering of the result.

For example, a file containing

	fn __identifier__(get_ __to_case__(Widget))() {}

comes out as

	fn get_widget () { }

Use `-` as the source path to read standard input.
"""

import sys, os, argparse

from placetools import place, scanning
from placetools.interfaces import LanguageError
from placetools.markers import Builtin
from placetools.tokens import render
from placetools.support.failureprone import SourceText

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m placetools', description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument('source_path', help='path to input file, or - for standard input')
	parser.add_argument('-f', '--force', action='store_true', dest='force', help='allow to write over existing file')
	parser.add_argument('-o', '--output', help='path to output file; standard output if not given')
	parser.add_argument('-b', '--builtin', choices=[b.value for b in Builtin], help='apply just this one builtin to the whole text, with no marker expansion')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about each builtin as it runs.")
	return parser.parse_args(argv)

def main(args):
	if args.verbose: place.VERBOSE = True
	if args.output and os.path.exists(args.output) and not args.force:
		print('Target file already exists and --force command-line argument was not given.', file=sys.stderr)
		exit(1)
	if args.source_path == '-':
		source = SourceText(sys.stdin.read(), filename='<stdin>')
	else:
		with open(args.source_path) as fh: source = SourceText(fh.read(), filename=args.source_path)
	try:
		tokens = scanning.scan(source.content)
		if args.builtin: result = place.call(args.builtin, tokens)
		else: result = place.rewrite(tokens)
	except LanguageError as e:
		source.complain(e)
		exit(1)
	else:
		text = render(result)
		if args.output:
			with open(args.output, 'w') as fh: print(text, file=fh)
			print('Wrote expansion to:')
			print('\t'+args.output)
		else:
			print(text)

if __name__ == '__main__': main(parse_arguments())
