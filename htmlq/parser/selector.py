"""
CSS Selector Engine implementation.
This module compiles CSS selectors with soupsieve and matches them against
parsed documents.
"""

import logging
from typing import Dict, List

import soupsieve
from bs4.element import PageElement

from htmlq.dom.node import has_children
from htmlq.exceptions import SelectorError

logger = logging.getLogger(__name__)


class SelectorEngine:
    """
    CSS Selector Engine for document queries.

    Selector grammar and matching are soupsieve's; this class adds the
    compiled-selector cache and error translation.
    """

    def __init__(self):
        """Initialize the selector engine."""
        # Cache for compiled selectors
        self._selector_cache: Dict[str, soupsieve.SoupSieve] = {}

        logger.debug("SelectorEngine initialized")

    def compile(self, selector: str) -> soupsieve.SoupSieve:
        """
        Get a compiled selector, using cache if available.

        Args:
            selector: The CSS selector string

        Returns:
            Compiled soupsieve matcher

        Raises:
            SelectorError: If the selector is empty or not valid CSS
        """
        if not isinstance(selector, str):
            raise SelectorError(f"Selector must be a string, got {type(selector).__name__}",
                                selector=None)
        if not selector.strip():
            raise SelectorError("Selector is empty", selector=selector)

        compiled = self._selector_cache.get(selector)
        if compiled is None:
            try:
                compiled = soupsieve.compile(selector)
            except soupsieve.SelectorSyntaxError as e:
                logger.debug(f"Error compiling selector '{selector}': {e}")
                raise SelectorError(f"Invalid selector '{selector}': {e}", selector=selector) from e
            self._selector_cache[selector] = compiled
            logger.debug(f"Compiled selector '{selector}'")

        return compiled

    @staticmethod
    def match_all(compiled: soupsieve.SoupSieve, node: PageElement) -> List[PageElement]:
        """
        Run an already compiled selector under a node.

        Text, comment and other string nodes have no descendants and never
        produce matches.
        """
        if not has_children(node):
            return []
        return compiled.select(node)


# Shared engine so compiled selectors are reused across queries
_default_engine = SelectorEngine()


def get_selector_engine() -> SelectorEngine:
    """Get the shared selector engine."""
    return _default_engine
