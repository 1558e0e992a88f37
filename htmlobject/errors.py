"""
Exceptions raised by the opt-in markup checks.
"""


class MarkupError(ValueError): pass

class InvalidName(MarkupError):
    """A tag or attribute name is not a legal XML/HTML name."""

class NotSingleRoot(MarkupError):
    """An XML document body is not exactly one root element."""
