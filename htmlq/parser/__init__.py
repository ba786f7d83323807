"""
Parser and selector boundaries for htmlq.
"""

from .html_parser import HTMLParser
from .selector import SelectorEngine, get_selector_engine

__all__ = ['HTMLParser', 'SelectorEngine', 'get_selector_engine']
