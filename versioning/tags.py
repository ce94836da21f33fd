"""
# Pre-release tag spellings.

# A tag token in a layout selects one of four spelling tables by its letters, and
# declares optional dashes before and after the tag by its leading and trailing
# (char)`-` characters.

# [ Spellings ]
# /`b`/
	# `a`, `b`, and `rc`.
# /`B`/
	# `A`, `B`, and `RC`.
# /`beta`/
	# `alpha`, `beta`, and `rc`.
# /`Beta`/
	# `Alpha`, `Beta`, and `RC`.

# The release stage has no spelling; it is rendered as an empty string, dashes
# included, and read whenever no spelling is present.

# Any other token, the (char)`2` selector among them, has an empty spelling
# table: it always reads as the release stage and renders nothing but its dashes.
"""
from dataclasses import dataclass

from .types import Stage

spellings = {
	'b': ('a', 'b', 'rc'),
	'B': ('A', 'B', 'RC'),
	'beta': ('alpha', 'beta', 'rc'),
	'Beta': ('Alpha', 'Beta', 'RC'),
}

stages = (Stage.alpha, Stage.beta, Stage.release_candidate)

@dataclass(eq=True, frozen=True)
class Style(object):
	"""
	# The spelling and delimiters of a tag.

	# [ Properties ]
	# /spelling/
		# Mapping of the pre-release &Stage members to their text.
	# /leading/
		# Whether a (char)`-` precedes the tag.
	# /trailing/
		# Whether a (char)`-` follows the tag.
	"""

	spelling: (tuple)
	leading: (bool) = False
	trailing: (bool) = False

	@classmethod
	def from_token(Class, text:str):
		"""
		# Construct the style selected by the layout token &text; `'-beta-'`, `'B'`, etc.
		"""
		leading = text[:1] == '-'
		if leading:
			text = text[1:]

		trailing = text[-1:] == '-'
		if trailing:
			text = text[:-1]

		return Class(tuple(zip(stages, spellings.get(text, ()))), leading, trailing)

def read(style:Style, string:str, start:int=0):
	"""
	# Read the tag at &start in &string.

	# [ Returns ]
	# A pair holding the &Stage and the number of characters consumed.
	# When no spelling is present, &Stage.release is returned and nothing is consumed.
	"""
	position = start
	if style.leading and string[position:position+1] == '-':
		position += 1

	for stage, text in style.spelling:
		if string.startswith(text, position):
			position += len(text)
			break
	else:
		return (Stage.release, 0)

	if style.trailing and string[position:position+1] == '-':
		position += 1

	return (stage, position - start)

def write(style:Style, stage:Stage) -> str:
	"""
	# Render &stage in the given &style.
	"""
	if stage == Stage.release:
		return ''

	text = dict(style.spelling).get(stage, '')
	return ''.join((
		'-' if style.leading else '',
		text,
		'-' if style.trailing else '',
	))
