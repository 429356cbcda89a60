"""
CLI Module.

Thin command layer over the API package. Each script parses its own
long flags, makes one call and prints the result.
"""
