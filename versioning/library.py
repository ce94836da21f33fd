"""
# Parse and format version strings using layout patterns.

#!syntax/python
	from versioning import library as libversion

	v = libversion.parse('5.4$.3$.1', '2.7')
	assert v == libversion.Version(2, 7)
	assert libversion.format('5.4$.3$.1', v.replace(patch=1)) == '2.7.1'

# &parse and &format compile the layout on every call. Layouts used repeatedly
# should be compiled once with &compile.
"""
from .core import Error, LayoutError, FieldError, TrailingInput
from .types import Version, Stage, Field, Token
from .layout import Layout

def compile(layout:str) -> Layout:
	"""
	# Tokenize and validate the &layout pattern for repeated use.
	"""
	return Layout.from_pattern(layout)

def parse(layout:str, string:str) -> Version:
	"""
	# Construct the &Version described by &string according to &layout.
	"""
	return Layout.from_pattern(layout).parse(string)

def format(layout:str, version:Version) -> str:
	"""
	# Render &version as a string according to &layout.
	"""
	return Layout.from_pattern(layout).format(version)
