"""
# Reading and rendering of individual layout fields.

# &read and &render dispatch on the &.types.Field of a token using the
# &readers and &renderers tables. Every field kind has an entry in both.
"""
from . import core
from . import characters
from . import numerals
from . import tags
from .types import Field, Stage

def overflow(token, string, start, run):
	length = characters.span(string, run, start)
	return core.FieldError(token.field, string[start:start+length], "exceeds 64-bit range")

def read_decimal(token, string, start):
	try:
		value, length = numerals.read_decimal(string, start)
	except OverflowError as err:
		raise overflow(token, string, start, characters.digits) from err

	if value is None:
		raise core.FieldError(token.field, string[start:], "expected digits")
	return (value, length)

def read_alphabetic(token, string, start):
	try:
		return numerals.read_alphabetic(string, start)
	except OverflowError as err:
		raise overflow(token, string, start, characters.letters) from err

def read_tag(token, string, start):
	return tags.read(token.style, string, start)

def read_literal(token, string, start):
	# Mismatches consume nothing and are left for the trailing input check.
	if string.startswith(token.text, start):
		return (None, len(token.text))
	return (None, 0)

def read_other(token, string, start):
	return (string[start:], len(string) - start)

def read_end(token, string, start):
	return (None, 0)

readers = {
	Field.major: read_decimal,
	Field.minor: read_decimal,
	Field.patch: read_decimal,
	Field.build: read_decimal,
	Field.alphabetic_patch: read_alphabetic,
	Field.alphabetic_build: read_alphabetic,
	Field.tag: read_tag,
	Field.literal: read_literal,
	Field.other: read_other,
	Field.end: read_end,
}

def read(token, string:str, start:int=0):
	"""
	# Read the field identified by &token at &start in &string.

	# [ Returns ]
	# A pair holding the value for the &Field.slot of the token's field and
	# the number of characters consumed. The value is &None for fields without storage.
	"""
	return readers[token.field](token, string, start)

def render_decimal(token, version):
	value = getattr(version, token.field.slot)
	return (numerals.decimal(value), value == 0)

def render_alphabetic(token, version):
	value = getattr(version, token.field.slot)
	try:
		return (numerals.alphabetic(value), value == 0)
	except ValueError as err:
		raise core.FieldError(token.field, str(value), "negative values have no letters") from err

def render_tag(token, version):
	return (tags.write(token.style, version.prerelease), version.prerelease == Stage.release)

def render_literal(token, version):
	return (token.text, True)

def render_other(token, version):
	return (version.other, not version.other)

def render_end(token, version):
	return ('', True)

renderers = {
	Field.major: render_decimal,
	Field.minor: render_decimal,
	Field.patch: render_decimal,
	Field.build: render_decimal,
	Field.alphabetic_patch: render_alphabetic,
	Field.alphabetic_build: render_alphabetic,
	Field.tag: render_tag,
	Field.literal: render_literal,
	Field.other: render_other,
	Field.end: render_end,
}

def render(token, version):
	"""
	# Render the field identified by &token using the values of &version.

	# [ Returns ]
	# A pair holding the text and whether the text may be elided by a preceding
	# &Field.end token.
	"""
	return renderers[token.field](token, version)
