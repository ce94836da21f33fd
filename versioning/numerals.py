"""
# Decimal and alphabetic numeral systems used by version fields.

# Alphabetic numerals are bijective base-26: there is no zero digit, `a` through `z`
# are the digits one through twenty-six, and zero is the empty string.

#!syntax/python
	assert alphabetic(26) == 'z'
	assert alphabetic(27) == 'aa'
	assert read_alphabetic('AA') == (27, 2)
"""
from . import characters

#: Largest value a field may hold; fields are signed 64-bit integers.
maximum = (2 ** 63) - 1

#: Number of decimal digits in &maximum.
width = len(str(maximum))

radix = 26
alphabet = 'abcdefghijklmnopqrstuvwxyz'

def read_decimal(string:str, start:int=0):
	"""
	# Read the run of decimal digits at &start in &string.

	# [ Returns ]
	# A pair holding the integer and the length of the run.
	# The integer is &None when there are no digits at &start.

	# [ Exceptions ]
	# /&OverflowError/
		# The run's value is greater than &maximum.
	"""
	length = characters.span(string, characters.digits, start)
	if not length:
		return (None, 0)

	significant = string[start:start+length].lstrip('0')
	if len(significant) > width:
		raise OverflowError("decimal numeral exceeds %d" %(maximum,))

	value = int(significant or '0', 10)
	if value > maximum:
		raise OverflowError("decimal numeral exceeds %d" %(maximum,))

	return (value, length)

def decimal(value:int) -> str:
	return str(value)

def read_alphabetic(string:str, start:int=0, ordinal=characters.ordinal):
	"""
	# Read the run of letters at &start in &string as an alphabetic numeral.
	# Letter case is ignored.

	# [ Returns ]
	# A pair holding the integer and the length of the run.
	# An empty run is zero.

	# [ Exceptions ]
	# /&OverflowError/
		# The run's value is greater than &maximum.
	"""
	length = characters.span(string, characters.letters, start)

	value = 0
	for letter in string[start:start+length]:
		value = (value * radix) + ordinal(letter)
		if value > maximum:
			raise OverflowError("alphabetic numeral exceeds %d" %(maximum,))

	return (value, length)

def alphabetic(value:int) -> str:
	"""
	# Render &value as an alphabetic numeral; zero is the empty string.
	"""
	if value < 0:
		raise ValueError("alphabetic numerals cannot represent negative integers")

	digits = []
	while value > 0:
		value, remainder = divmod(value, radix)
		if remainder == 0:
			# No zero digit; borrow from the next position.
			digits.append('z')
			value -= 1
		else:
			digits.append(alphabet[remainder - 1])

	digits.reverse()
	return ''.join(digits)
