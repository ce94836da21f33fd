from .. import tags as module
from ..types import Stage

def test_Style_from_token(test):
	"""
	# - &module.Style.from_token
	"""
	Type = module.Style

	s = Type.from_token('b')
	test/s.leading == False
	test/s.trailing == False
	test/dict(s.spelling) == {
		Stage.alpha: 'a',
		Stage.beta: 'b',
		Stage.release_candidate: 'rc',
	}

	s = Type.from_token('-Beta-')
	test/s.leading == True
	test/s.trailing == True
	test/dict(s.spelling) == {
		Stage.alpha: 'Alpha',
		Stage.beta: 'Beta',
		Stage.release_candidate: 'RC',
	}

	s = Type.from_token('B-')
	test/s.leading == False
	test/s.trailing == True
	test/dict(s.spelling)[Stage.release_candidate] == 'RC'

	s = Type.from_token('-beta')
	test/s.leading == True
	test/s.trailing == False
	test/dict(s.spelling)[Stage.alpha] == 'alpha'

	# The tag selector names no spelling table.
	s = Type.from_token('2')
	test/s.spelling == ()
	test/s == Type(())
	test/module.read(s, 'b1') == (Stage.release, 0)
	test/module.write(s, Stage.beta) == ''
	test/module.write(Type.from_token('-x-'), Stage.alpha) == '--'

def test_read(test):
	s = module.Style.from_token('b')
	f = module.read
	test/f(s, 'rc1') == (Stage.release_candidate, 2)
	test/f(s, 'a') == (Stage.alpha, 1)
	test/f(s, 'b2') == (Stage.beta, 1)
	test/f(s, 'x.b2', 2) == (Stage.beta, 1)
	test/f(s, '1') == (Stage.release, 0)
	test/f(s, '') == (Stage.release, 0)

def test_read_dashes(test):
	"""
	# - &module.read

	# Declared dashes are optional in the string.
	"""
	f = module.read

	s = module.Style.from_token('-beta-')
	test/f(s, '-alpha-1') == (Stage.alpha, 7)
	test/f(s, 'alpha1') == (Stage.alpha, 5)
	test/f(s, 'rc-') == (Stage.release_candidate, 3)
	# Without a spelling, a leading dash is not consumed.
	test/f(s, '-1') == (Stage.release, 0)

	s = module.Style.from_token('beta')
	test/f(s, 'beta-1') == (Stage.beta, 4)
	test/f(s, '-beta') == (Stage.release, 0)

def test_read_case(test):
	s = module.Style.from_token('B')
	test/module.read(s, 'RC') == (Stage.release_candidate, 2)
	test/module.read(s, 'rc') == (Stage.release, 0)

	s = module.Style.from_token('Beta')
	test/module.read(s, 'Alpha') == (Stage.alpha, 5)
	test/module.read(s, 'alpha') == (Stage.release, 0)

def test_write(test):
	Type = module.Style
	f = module.write

	test/f(Type.from_token('b'), Stage.release) == ''
	test/f(Type.from_token('-b-'), Stage.release) == ''
	test/f(Type.from_token('b-'), Stage.release_candidate) == 'rc-'
	test/f(Type.from_token('-beta'), Stage.alpha) == '-alpha'
	test/f(Type.from_token('-beta-'), Stage.beta) == '-beta-'
	test/f(Type.from_token('Beta'), Stage.beta) == 'Beta'
	test/f(Type.from_token('B'), Stage.release_candidate) == 'RC'

if __name__ == '__main__':
	import sys
	from harness import engine
	engine.execute(sys.modules['__main__'])
