"""
# Layout driven version string codec.

# A layout pattern describes a family of version strings. The same pattern is used to
# parse strings of the family into &.types.Version instances and to render instances
# back into strings of the family.

# [ Executables ]
# /&.bin.parse/
	# Print the fields of version strings parsed with a layout.
# /&.bin.reformat/
	# Translate version strings from one layout into another.
# /&.bin.sort/
	# Order version strings by the versions they describe.
"""
