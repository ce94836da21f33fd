"""
# Layout pattern tokenization and the compiled &Layout.

# [ Tokens ]
# /Digits/
	# A run of digits selecting a numeric field or the tag by its value:
	# `5` major, `4` minor, `3` patch, `2` tag, and `1` build.
# /`y`, `Y`/
	# The patch number written as letters.
# /`z`, `Z`/
	# The build number written as letters.
# /`$`/
	# The string may end here. When formatting, the text following the
	# marker is dropped if every field rendered after it holds its default.
# /`.`, `v`, `V`/
	# Literal text.
# /`o`/
	# The remainder of the string is captured as &.types.Version.other.
	# Consumes the rest of the layout.
# /`-b-`, `beta`, `-Beta`, .../
	# A pre-release tag; see &.tags for the spellings selected by the letters.
	# The leading and trailing dashes are optional.
# /Any other character/
	# Literal text of one character.

# Literal text is matched leniently by &Layout.parse: a literal absent from the
# string consumes nothing, and is only noticed when the string is not completely
# consumed by the layout.
"""
from . import core
from . import characters
from . import fields
from .tags import Style
from .types import Field, Token, Version

#: Field selected by a digit run.
selectors = {
	1: Field.build,
	2: Field.tag,
	3: Field.patch,
	4: Field.minor,
	5: Field.major,
}

single = {
	'z': Field.alphabetic_build,
	'Z': Field.alphabetic_build,
	'y': Field.alphabetic_patch,
	'Y': Field.alphabetic_patch,
	'$': Field.end,
	'.': Field.literal,
	'v': Field.literal,
	'V': Field.literal,
}

def chunk(layout:str, start:int=0):
	"""
	# Identify the token at &start in the &layout pattern.

	# [ Returns ]
	# A triple holding the text of the token, its &Field, and the offset
	# following the token.
	"""
	lead = layout[start]

	if characters.isdigit(lead):
		stop = start + characters.span(layout, characters.digits, start)
		text = layout[start:stop]
		digit = text.lstrip('0')
		if len(digit) != 1 or int(digit) not in selectors:
			raise core.LayoutError(layout, start, text)
		return (text, selectors[int(digit)], stop)

	if lead in single:
		return (lead, single[lead], start + 1)

	if lead == 'o':
		return (layout[start:], Field.other, len(layout))

	# Pre-release tag: -?(b|B)(eta)?-?
	index = start + 1 if lead == '-' else start
	if layout[index:index+1] not in ('b', 'B'):
		return (lead, Field.literal, start + 1)

	if layout[index:index+4] in ('beta', 'Beta'):
		index += 4
	else:
		index += 1

	if layout[index:index+1] == '-':
		index += 1

	return (layout[start:index], Field.tag, index)

def tokenize(layout:str):
	"""
	# Produce the &Token sequence of the &layout pattern.
	"""
	offset = 0
	while offset < len(layout):
		text, field, stop = chunk(layout, offset)
		if field is Field.tag:
			yield Token(field, text, offset, Style.from_token(text))
		else:
			yield Token(field, text, offset)
		offset = stop

class Layout(object):
	"""
	# A tokenized layout pattern used to parse and format version strings.

	# [ Properties ]
	# /pattern/
		# The source pattern.
	# /tokens/
		# The &Token sequence of &pattern.
	"""
	__slots__ = ('pattern', 'tokens')

	@classmethod
	def from_pattern(Class, pattern:str):
		"""
		# Tokenize &pattern; raises &core.LayoutError if any token is invalid.
		"""
		return Class(pattern, tuple(tokenize(pattern)))

	def __init__(self, pattern, tokens):
		self.pattern = pattern
		self.tokens = tokens

	def __repr__(self):
		return "%s.from_pattern(%r)" %(self.__class__.__name__, self.pattern)

	def __str__(self):
		return self.pattern

	def __iter__(self):
		return iter(self.tokens)

	def __eq__(self, operand):
		return isinstance(operand, Layout) and self.pattern == operand.pattern

	def __hash__(self):
		return hash(self.pattern)

	def fields(self):
		"""
		# The set of &Version attributes that the layout reads and writes.
		"""
		return {x.field.slot for x in self.tokens if x.field.slot is not None}

	def parse(self, string:str) -> Version:
		"""
		# Construct the &Version described by &string.

		# [ Exceptions ]
		# /&core.FieldError/
			# A numeric field was absent or out of range.
		# /&core.TrailingInput/
			# The layout was exhausted before &string.
		"""
		values = {}
		position = 0
		size = len(string)

		for token in self.tokens:
			if token.field is Field.end and position == size:
				break

			value, consumed = fields.read(token, string, position)
			if token.field.slot is not None:
				values[token.field.slot] = value
			position += consumed

		if position < size:
			raise core.TrailingInput(string[position:])

		return Version(**values)

	def format(self, version:Version) -> str:
		"""
		# Render &version as a string of the layout.

		# Text following a &Field.end token is dropped when every field rendered
		# after the token holds its default value.
		"""
		parts = []
		checkpoint = None

		for token in self.tokens:
			if token.field is Field.end:
				if checkpoint is None:
					checkpoint = len(parts)
				continue

			text, omittable = fields.render(token, version)
			if not omittable:
				checkpoint = None
			parts.append(text)

		if checkpoint is not None:
			del parts[checkpoint:]

		return ''.join(parts)
