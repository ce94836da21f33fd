"""
# Translate version strings from one layout into another.

# The strings are parsed with the first layout and rendered with the second.
# Strings are read from standard input when none are given after the layouts.
"""
import sys

from .. import library
from .parse import lines

def main(args, input=None, output=None, status=None):
	input = input or sys.stdin
	output = output or sys.stdout
	status = status or sys.stderr

	source, target, *strings = args
	try:
		reader = library.compile(source)
		writer = library.compile(target)
	except library.LayoutError as err:
		status.write(str(err) + '\n')
		return 2

	failed = 0
	for s in strings or lines(input):
		try:
			output.write(writer.format(reader.parse(s)) + '\n')
		except library.Error as err:
			status.write("%s: %s\n" %(s, err))
			failed += 1

	return 1 if failed else 0

if __name__ == '__main__':
	sys.exit(main(sys.argv[1:]))
