"""
# Print the fields of version strings parsed with a layout.

# Each string is printed as a tab separated line holding the major, minor,
# patch, stage, build, and other fields. Strings are read from standard input
# when none are given after the layout.
"""
import sys

from .. import library

def lines(file):
	for line in file:
		line = line.rstrip('\n')
		if line:
			yield line

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

	failed = 0
	for s in strings or lines(input):
		try:
			v = l.parse(s)
		except library.Error as err:
			status.write("%s: %s\n" %(s, err))
			failed += 1
			continue

		fields = (v.major, v.minor, v.patch, v.prerelease.name, v.build, v.other)
		output.write('\t'.join(map(str, fields)) + '\n')

	return 1 if failed else 0

if __name__ == '__main__':
	sys.exit(main(sys.argv[1:]))
