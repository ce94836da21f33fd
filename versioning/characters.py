"""
# ASCII character classes used by layouts and version strings.

# &str.isdigit and &str.isalpha recognize the whole of Unicode; version strings
# are limited to ASCII digits and letters.
"""
import itertools

digits = frozenset('0123456789')
letters = frozenset('abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ')

def isdigit(character:str) -> bool:
	return character in digits

def isalpha(character:str) -> bool:
	return character in letters

def ordinal(letter:str, offset=ord('a') - 1) -> int:
	"""
	# Position of &letter in the alphabet, `1` through `26`, regardless of case.
	"""
	return ord(letter.lower()) - offset

def span(string:str, characters:frozenset, start:int=0, take=itertools.takewhile) -> int:
	"""
	# Length of the run of &characters at &start in &string.
	"""
	return sum(1 for x in take(characters.__contains__, itertools.islice(string, start, None)))
