"""
# Test engine for the projects in this repository.

# Test modules are `test_*` modules inside a project's `test` package. Each
# function whose name starts with `test_` is given a &.core.Test instance
# and asserts by contention:

#!syntax/python
	def test_feature(test):
		test/module.feature() == expected
		test/ValueError ^ (lambda: module.feature(None))

# [ Executables ]
# /&.bin.coherence/
	# Seal the fate of every test in a project and report to standard error.
"""
