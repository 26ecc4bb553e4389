"""
Core primitives of seximal: errors, type descriptors, base-6 codec and
the conversion matrix.

Nothing in this package knows about the numeral classes themselves; it
operates on native values and NumeralSpec descriptors only.
"""
