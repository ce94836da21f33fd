"""
# Harness implementation and support functions.
"""
import importlib
import pkgutil

from . import core

def get_test_index(tester, int=int, AttributeError=AttributeError):
	"""
	# Returns the first line number of the underlying code object.
	"""
	try:
		return int(tester.__code__.co_firstlineno)
	except AttributeError:
		return None

def gather(container, prefix='test_', getattr=getattr):
	"""
	# Returns an ordered list of attribute names that match the &prefix.
	# Tests are ordered by their position in the module.
	"""
	tests = [name for name in dir(container) if name.startswith(prefix)]
	tests.sort() # Order by name first.
	tests.sort(key=(lambda x: get_test_index(getattr(container, x)) or 0))
	return tests

def modules(package:str, prefix='test_'):
	"""
	# Import the test modules of &package's `test` package.
	"""
	container = importlib.import_module(package + '.test')
	for finder, name, ispkg in pkgutil.iter_modules(container.__path__):
		if not ispkg and name.startswith(prefix):
			yield importlib.import_module('.'.join((container.__name__, name)))

class Harness(object):
	"""
	# Execute a sequence of tests.

	# Subclasses override &dispatch to control execution and reporting.
	"""

	Test = core.Test
	collect = staticmethod(gather)

	@classmethod
	def from_module(Class, module, identity=None):
		tests = [Class.Test(name, getattr(module, name)) for name in Class.collect(module)]
		return Class(identity or module.__name__, module, tests)

	def __init__(self, identity, module, tests):
		self.identity = identity
		self.module = module
		self.tests = tests

	@property
	def count(self):
		return len(self.tests)

	def dispatch(self, test):
		"""
		# Dispatch the given &Test to resolve its fate.
		"""
		with test.exits:
			test.seal()

	def reveal(self):
		"""
		# Reveal the fate of the tests.
		"""
		for test in self.tests:
			self.dispatch(test)

		return [x for x in self.tests if x.fate.negative]

def execute(module):
	"""
	# Resolve the fate of the tests contained in &module. No status information
	# is printed and the exception of the first failure will be raised.
	"""

	for id in gather(module):
		func = getattr(module, id)
		test = core.Test(id, func)
		with test.exits:
			test.seal()
		if test.fate.negative:
			raise test.fate
