"""palindrome_filter.core — Foundation layer.

Contains the digit helpers, the palindrome predicate, the selector entry
points, input validation, settings and the report builder.
This module has NO dependencies on palindrome_filter.strategies or palindrome_filter.registry.
Only stdlib and numpy are allowed here.
"""
