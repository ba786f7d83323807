"""
Exceptions raised by htmlq.

Absence (no matching node, missing attribute, out-of-range index) is never an
error; these cover input that cannot be read, parsed, matched or rendered.
"""

from typing import Optional


class HtmlQError(Exception):
    """Base class for all htmlq errors."""


class ParseError(HtmlQError):
    """The source could not be read or was rejected by the HTML parser."""


class SelectorError(HtmlQError, ValueError):
    """
    A CSS selector could not be compiled.
    
    Attributes:
        selector: The offending selector text
    """
    
    def __init__(self, message: str, selector: Optional[str] = None):
        super().__init__(message)
        self.selector = selector


class RenderError(HtmlQError):
    """A node could not be serialized to markup."""
