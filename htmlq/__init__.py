"""
htmlq - jQuery-like queries over parsed HTML documents.
"""

import logging

from htmlq.exceptions import HtmlQError, ParseError, SelectorError, RenderError
from htmlq.nodeset import NodeSet, parse
from htmlq.rendering import TextRenderer

# Library code only emits records; the CLI decides where they go
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Package information
__version__ = "0.1.0"
__description__ = "jQuery-like queries over parsed HTML documents"

__all__ = [
    'NodeSet',
    'parse',
    'TextRenderer',
    'HtmlQError',
    'ParseError',
    'SelectorError',
    'RenderError',
]
