"""
# Order version strings by the versions they describe.

# Strings describing equal versions retain their relative order. Strings that
# cannot be parsed are reported and excluded from the output.
"""
import sys

from .. import library
from .parse import lines

def main(args, input=None, output=None, status=None):
	input = input or sys.stdin
	output = output or sys.stdout
	status = status or sys.stderr

	layout, *strings = args
	try:
		l = library.compile(layout)
	except library.LayoutError as err:
		status.write(str(err) + '\n')
		return 2

	versions = []
	failed = 0
	for s in strings or lines(input):
		try:
			versions.append((l.parse(s), s))
		except library.Error as err:
			status.write("%s: %s\n" %(s, err))
			failed += 1

	versions.sort(key=(lambda x: x[0]))
	for v, s in versions:
		output.write(s + '\n')

	return 1 if failed else 0

if __name__ == '__main__':
	sys.exit(main(sys.argv[1:]))
