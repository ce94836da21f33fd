"""
# Exceptions raised by layout compilation, parsing, and formatting.
"""

class Error(Exception):
	"""
	# Base class for layout and version string errors.
	"""

class LayoutError(Error):
	"""
	# The layout pattern contained a token that does not identify a field.

	# [ Properties ]
	# /pattern/
		# The complete layout pattern.
	# /offset/
		# The position of the errant token in &pattern.
	# /text/
		# The errant token.
	"""

	def __init__(self, pattern, offset, text):
		self.pattern = pattern
		self.offset = offset
		self.text = text

	def __str__(self):
		return "invalid field selector %r at offset %d of layout %r" %(self.text, self.offset, self.pattern)

class FieldError(Error):
	"""
	# A numeric field could not be read or rendered.

	# [ Properties ]
	# /field/
		# The &.types.Field being processed.
	# /string/
		# The text that was being read, or the rendered value's string form.
	# /reason/
		# Short description of the failure.
	"""

	def __init__(self, field, string, reason):
		self.field = field
		self.string = string
		self.reason = reason

	def __str__(self):
		return "%s field: %s: %r" %(self.field.name, self.reason, self.string)

class TrailingInput(Error):
	"""
	# The layout was exhausted before the version string.

	# Literal mismatches are reported by this error as the literal leaves
	# the input unconsumed.

	# [ Properties ]
	# /remainder/
		# The unconsumed portion of the version string.
	"""

	def __init__(self, remainder):
		self.remainder = remainder

	def __str__(self):
		return "version string not ended, left: %s" %(self.remainder,)
