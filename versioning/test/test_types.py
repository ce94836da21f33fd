import itertools
import dataclasses

from .. import types as module

V = module.Version
S = module.Stage

def test_Stage_order(test):
	test/S.alpha < S.beta
	test/S.beta < S.release_candidate
	test/S.release_candidate < S.release
	test/sorted(S) == [S.alpha, S.beta, S.release_candidate, S.release]

def test_Version_defaults(test):
	v = V()
	test/v.major == 0
	test/v.minor == 0
	test/v.patch == 0
	test/v.build == 0
	test/v.prerelease == S.release
	test/v.other == ''
	test/v.key() == (0, 0, 0, S.release, 0)

def test_Version_immutable(test):
	v = V(1, 2, 3)
	test/dataclasses.FrozenInstanceError ^ (lambda: setattr(v, 'major', 2))

	r = v.replace(build=4, other='x')
	test/r.build == 4
	test/r.other == 'x'
	test/v.build == 0

def test_Version_order(test):
	"""
	# - &module.Version.__eq__
	# - &module.Version.__lt__
	# - &module.Version.__le__
	"""
	v = V(2, 3, 4, S.beta)

	lesser = [
		V(1, 4, 5, S.release),
		V(2, 2, 4, S.release),
		V(2, 3, 3, S.release),
		V(2, 3, 4, S.alpha),
	]
	greater = [
		V(3, 4, 5, S.release),
		V(2, 4, 4, S.release),
		V(2, 3, 5, S.release),
		V(2, 3, 4, S.release_candidate),
		V(2, 3, 4, S.beta, 123),
	]
	equal = [
		V(2, 3, 4, S.beta),
		V(2, 3, 4, S.beta, other='123'),
	]

	for x in lesser:
		test/x != v
		test/x < v
		test/x <= v
		test//v <= x

	for x in greater:
		test/x != v
		test//x < v
		test//x <= v
		test/x > v

	for x in equal:
		test/x == v
		test//x < v
		test/x <= v
		test/hash(x) == hash(v)

def test_Version_total_order(test):
	"""
	# Exactly one of less than, equal, or greater than holds for any pair.
	"""
	values = [
		V(*x) for x in itertools.product((0, 1), (0, 1), (0, 2), (S.alpha, S.release), (0, 1))
	]
	for u, v in itertools.product(values, values):
		test/[u < v, u == v, v < u].count(True) == 1
		test/(u <= v) == (u < v or u == v)

def test_Field_slot(test):
	"""
	# - &module.Field.slot
	# - &module.Field.numeral

	# Alphabetic fields share storage with their decimal counterpart.
	"""
	F = module.Field
	test/F.alphabetic_build.slot == F.build.slot
	test/F.alphabetic_patch.slot == F.patch.slot
	test/F.tag.slot == 'prerelease'
	test/F.other.slot == 'other'
	test/F.literal.slot == None
	test/F.end.slot == None

	test/F.major.numeral == 'decimal'
	test/F.alphabetic_build.numeral == 'alphabetic'
	test/F.tag.numeral == None

	fields = {x.name for x in dataclasses.fields(V)}
	for f in F:
		if f.slot is not None:
			test/fields << f.slot

if __name__ == '__main__':
	import sys
	from harness import engine
	engine.execute(sys.modules['__main__'])
