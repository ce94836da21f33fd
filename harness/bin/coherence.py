"""
# Test the coherence of the specified projects.

# Every `test_*` module in the `test` package of each project is imported and
# its tests are sealed in order. A status line is written to standard error for
# each test, and the traceback of each failure follows its status line.

#!syntax/sh
	python -m harness.bin.coherence versioning
"""
import sys
import traceback

from .. import engine

class Harness(engine.Harness):
	"""
	# &engine.Harness reporting fates to a status stream.
	"""
	status = sys.stderr

	def dispatch(self, test):
		super().dispatch(test)
		fate = test.fate
		xid = '#'.join((self.identity, test.identifier))
		self.status.write("%s: %s\n" %(xid, fate.descriptor[0]))

		if fate.negative:
			cause = fate.__cause__ or fate
			self.status.write(''.join(traceback.format_exception(type(cause), cause, cause.__traceback__)))

def main(args, status=None):
	failures = 0
	total = 0

	for project in args:
		for module in engine.modules(project):
			h = Harness.from_module(module)
			if status is not None:
				h.status = status
			failures += len(h.reveal())
			total += h.count

	(status or sys.stderr).write("%d tests, %d failed\n" %(total, failures))
	return 1 if failures else 0

if __name__ == '__main__':
	sys.exit(main(sys.argv[1:]))
