"""
# Version record, field kinds, and layout tokens.
"""
import enum
import dataclasses
from dataclasses import dataclass

class Stage(enum.IntEnum):
	"""
	# Pre-release stage of a version. Members are ordered from the earliest stage
	# to the final release.

	# [ Elements ]
	# /alpha/
		# Alpha quality pre-release.
	# /beta/
		# Beta quality pre-release.
	# /release_candidate/
		# Pre-release expected to become the release.
	# /release/
		# The release itself; the default stage of a &Version.
	"""

	alpha = -3
	beta = -2
	release_candidate = -1
	release = 0

class Field(enum.Enum):
	"""
	# The kind of field identified by a layout token.

	# Alphabetic fields are alternate notations of a numeric field and share
	# its storage; &slot resolves the &Version attribute that a kind reads and writes.

	# [ Elements ]
	# /major/
		# Decimal major number; layout selector `5`.
	# /minor/
		# Decimal minor number; layout selector `4`.
	# /patch/
		# Decimal patch number; layout selector `3`.
	# /build/
		# Decimal build number; layout selector `1`.
	# /tag/
		# Pre-release stage spelling; layout selector `2` or a `b` token.
	# /alphabetic_patch/
		# Patch number written as letters; layout token `y`.
	# /alphabetic_build/
		# Build number written as letters; layout token `z`.
	# /literal/
		# Text matched and emitted verbatim; `.`, `v`, and stray characters.
	# /other/
		# Free-form suffix capturing the rest of the string; layout token `o`.
	# /end/
		# Position where the string may end; layout token `$`.
	"""

	other = 0
	build = 1
	tag = 2
	patch = 3
	minor = 4
	major = 5
	literal = 6
	end = 7
	alphabetic_build = 8
	alphabetic_patch = 9

	@property
	def slot(self):
		"""
		# The &Version attribute holding the field's value; &None for kinds without storage.
		"""
		return field_slots.get(self)

	@property
	def numeral(self):
		"""
		# The numeral system used by the field: `'decimal'`, `'alphabetic'`, or &None.
		"""
		return field_numerals.get(self)

field_slots = {
	Field.major: 'major',
	Field.minor: 'minor',
	Field.patch: 'patch',
	Field.alphabetic_patch: 'patch',
	Field.build: 'build',
	Field.alphabetic_build: 'build',
	Field.tag: 'prerelease',
	Field.other: 'other',
}

field_numerals = {
	Field.major: 'decimal',
	Field.minor: 'decimal',
	Field.patch: 'decimal',
	Field.build: 'decimal',
	Field.alphabetic_patch: 'alphabetic',
	Field.alphabetic_build: 'alphabetic',
}

@dataclass(eq=True, order=True, frozen=True)
class Version(object):
	"""
	# Structured version.

	# Instances compare by (major, minor, patch, prerelease, build); &other
	# does not participate in equality, hashing, or ordering.

	# [ Properties ]
	# /major/
		# Major number.
	# /minor/
		# Minor number.
	# /patch/
		# Patch number.
	# /prerelease/
		# The &Stage of the version.
	# /build/
		# Build number; ordered after &prerelease so that builds of a release
		# candidate precede the release.
	# /other/
		# Free-form suffix captured by an `o` layout token.
	"""

	major: (int) = 0
	minor: (int) = 0
	patch: (int) = 0
	prerelease: (Stage) = Stage.release
	build: (int) = 0
	other: (str) = dataclasses.field(default='', compare=False)

	def key(self):
		"""
		# The tuple used to compare versions.
		"""
		return (self.major, self.minor, self.patch, self.prerelease, self.build)

	def replace(self, **fields):
		"""
		# Construct a new instance with the given &fields replaced.
		"""
		return dataclasses.replace(self, **fields)

@dataclass(eq=True, frozen=True)
class Token(object):
	"""
	# A token of a compiled layout.

	# [ Properties ]
	# /field/
		# The &Field identified by the token.
	# /text/
		# The layout text of the token.
	# /offset/
		# Position of &text in the layout pattern.
	# /style/
		# The &..tags.Style selected by a &Field.tag token; &None for other kinds.
	"""

	field: (Field)
	text: (str)
	offset: (int) = 0
	style: (object) = None
