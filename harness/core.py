"""
# Contentions and fates of the tests run by &.engine.

# A test function receives a &Test and makes claims about objects with the
# division operators; a claim that does not hold raises &Absurdity, and
# &Test.seal records how the function concluded as a &Fate.
"""
import builtins
import operator
import functools
import contextlib

# Symbols used when an &Absurdity is displayed.
symbols = {
	'__eq__': '==',
	'__ne__': '!=',
	'__lt__': '<',
	'__gt__': '>',
	'__le__': '<=',
	'__ge__': '>=',
	'__contains__': 'contains',
}

class Absurdity(Exception):
	"""
	# A claim made by a &Contention that did not hold.
	"""

	def __init__(self, operator, former, latter, inverse=None):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse

	def __str__(self):
		expression = ' '.join((repr(self.former), symbols.get(self.operator, self.operator), repr(self.latter)))
		if self.inverse:
			return 'not ' + expression
		return expression

class Contention(object):
	"""
	# A pending claim about &object.

	# `test/x` makes the claim and `test//x` inverts it; the comparison
	# that follows decides it.

	#!syntax/python
		test/parse('1.2') == Version(1, 2)
		test//parse('1.2') == Version(1, 3)
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse

	def _check(self, operand, name, holds):
		if bool(holds(self.object, operand)) is bool(self.inverse):
			raise self.test.Absurdity(name, self.object, operand, inverse=self.inverse)

	def __eq__(self, operand):
		self._check(operand, '__eq__', operator.eq)

	def __ne__(self, operand):
		self._check(operand, '__ne__', operator.ne)

	def __lt__(self, operand):
		self._check(operand, '__lt__', operator.lt)

	def __gt__(self, operand):
		self._check(operand, '__gt__', operator.gt)

	def __le__(self, operand):
		self._check(operand, '__le__', operator.le)

	def __ge__(self, operand):
		self._check(operand, '__ge__', operator.ge)

	def __lshift__(self, item):
		"""
		# Claim that &item is in the object.

		#!syntax/python
			test/layout.fields() << 'major'
		"""
		self._check(item, '__contains__', operator.contains)

	__hash__ = None

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		self.storage = val
		if isinstance(val, self.test.Fate):
			return

		if not isinstance(val, self.object):
			raise self.test.Absurdity("isinstance", self.object, val)
		return True

	def __xor__(self, subject):
		"""
		# Claim that calling &subject raises the object, an exception type,
		# and return the raised instance.

		#!syntax/python
			test/LayoutError ^ (lambda: compile('6'))
		"""
		with self as raised:
			subject()
		return raised()

class Fate(BaseException):
	"""
	# How a test concluded. Raised to end a test early, or assigned by &Test.seal.

	# [ Properties ]
	# /subtype/
		# Key of &descriptors; `'return'`, `'skip'`, `'fail'`, or `'interrupt'`.
	"""
	content = None
	line = None

	# Subtype: (label, impact)
	descriptors = {
		'return': ("passed", 1),
		'skip': ("skipped", 0),
		'fail': ("failed", -1),
		'interrupt': ("interrupted", -1),
	}

	def __init__(self, content, subtype='fail'):
		self.content = content
		self.subtype = subtype

	@property
	def descriptor(self):
		return self.descriptors[self.subtype]

	@property
	def impact(self):
		return self.descriptor[1]

	@property
	def negative(self):
		return self.impact < 0

class Test(object):
	"""
	# A test function and its fate.

	# [ Properties ]
	# /identifier/
		# Name of the test within its module.
	# /subject/
		# The test function; called with the &Test as its only argument.
	# /fate/
		# The &Fate assigned by &seal.
	# /exits/
		# &contextlib.ExitStack closed by whatever runs the test.
	"""
	__slots__ = ('subject', 'identifier', 'fate', 'exits',)

	Absurdity = Absurdity
	Contention = Contention
	Fate = Fate

	def __init__(self, identifier, subject, ExitStack=contextlib.ExitStack):
		self.identifier = identifier
		self.subject = subject
		self.exits = ExitStack()

	def __truediv__(self, object):
		return self.Contention(self, object)

	def __floordiv__(self, object):
		return self.Contention(self, object, True)

	def isinstance(self, object, types):
		if not builtins.isinstance(object, types):
			raise self.Absurdity("isinstance", object, types, inverse=True)

	def skip(self, condition):
		"""
		# End the test as skipped when &condition is true.
		"""
		if condition:
			raise self.Fate(condition, subtype='skip')

	def seal(self):
		"""
		# Call the subject and assign the outcome to &fate.

		# Exceptions are recorded as a `'fail'` fate. &KeyboardInterrupt and
		# &SystemExit are recorded as `'interrupt'` and raised again.
		"""
		if hasattr(self, 'fate'):
			raise RuntimeError("test has already been sealed")
		self.fate = None

		trace = None
		try:
			self.subject(self)
		except self.Fate as fate:
			self.fate = fate
			trace = fate.__traceback__.tb_next
		except Exception as err:
			self.fate = self.Fate('test raised exception')
			self.fate.__cause__ = err
			trace = err.__traceback__.tb_next
		except BaseException as err:
			self.fate = self.Fate('test interrupted', subtype='interrupt')
			self.fate.__cause__ = err
			raise
		else:
			self.fate = self.Fate(None, subtype='return')

		if trace is not None:
			self.fate.line = trace.tb_lineno
