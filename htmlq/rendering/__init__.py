"""
Rendering for htmlq: serialize subtrees back to markup.
"""

from .sink import TextRenderer
from .renderer import render, render_to_string, DEFAULT_FORMATTER

__all__ = ['TextRenderer', 'render', 'render_to_string', 'DEFAULT_FORMATTER']
