"""Strategy modules.

Every .py file in this package that defines a `strategy` object is
auto-registered by palindrome_filter.registry.discover().
"""
