"""
HTML parser implementation.
This module is responsible for parsing HTML content with full HTML5 support.
"""

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.builder import ParserRejectedMarkup

from htmlq.exceptions import ParseError
from htmlq.utils.config import get_config

logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = '\ufeff'


class HTMLParser:
    """HTML parser using BeautifulSoup with html5lib for full HTML5 support."""

    def __init__(self, features: Optional[str] = None,
                 fallback_features: Optional[str] = None,
                 from_encoding: Optional[str] = None):
        """
        Initialize the HTML parser.

        Args:
            features: BeautifulSoup tree builder to use (default from config)
            fallback_features: Tree builder used when the first is not installed
            from_encoding: Encoding to assume for byte input instead of sniffing it
        """
        config = get_config()
        self.features = features or config.get("parser.features", "html5lib")
        self.fallback_features = fallback_features or config.get("parser.fallback_features")
        self.from_encoding = from_encoding or config.get("parser.from_encoding")
        logger.debug(f"HTML parser initialized (features: {self.features}, "
                     f"fallback: {self.fallback_features})")

    def parse(self, html_content: Union[str, bytes]) -> BeautifulSoup:
        """
        Parse HTML content into a document tree.

        Malformed markup is recovered the way browsers do (implied html/body,
        unclosed tags), so only markup the tree builder refuses outright fails.

        Args:
            html_content: HTML content to parse

        Returns:
            BeautifulSoup: The parsed document root

        Raises:
            ParseError: If the tree builder rejects the markup or none is installed
        """
        if isinstance(html_content, str):
            html_content = self._clean_html_content(html_content)
        elif isinstance(html_content, bytearray):
            html_content = bytes(html_content)
        elif not isinstance(html_content, bytes):
            raise ParseError(f"Cannot parse object of type {type(html_content).__name__}")

        try:
            dom = self._build(html_content, self.features)
        except FeatureNotFound as e:
            if not self.fallback_features or self.fallback_features == self.features:
                raise ParseError(f"HTML tree builder '{self.features}' is not available") from e
            logger.warning(f"{self.features} parser unavailable: {e}, "
                           f"falling back to '{self.fallback_features}'")
            try:
                dom = self._build(html_content, self.fallback_features)
            except FeatureNotFound as fallback_error:
                raise ParseError(f"HTML tree builder '{self.fallback_features}' "
                                 f"is not available") from fallback_error
            except ParserRejectedMarkup as rejected:
                raise ParseError(f"Markup rejected by parser: {rejected}") from rejected
        except ParserRejectedMarkup as e:
            raise ParseError(f"Markup rejected by parser: {e}") from e

        if dom.original_encoding:
            logger.debug(f"Parsed document using encoding {dom.original_encoding}")
        return dom

    def _build(self, html_content: Union[str, bytes], features: str) -> BeautifulSoup:
        kwargs = {'multi_valued_attributes': None}
        # from_encoding only applies to bytes; bs4 warns when given with str
        if self.from_encoding and not isinstance(html_content, str):
            kwargs['from_encoding'] = self.from_encoding
        return BeautifulSoup(html_content, features, **kwargs)

    def _clean_html_content(self, html_content: str) -> str:
        """
        Clean HTML content to prevent parsing issues.

        Args:
            html_content: HTML content to clean

        Returns:
            str: Cleaned HTML content
        """
        # A BOM shows up as a character when bytes were decoded without stripping it
        if html_content.startswith(BYTE_ORDER_MARK):
            logger.debug("Removing BOM marker from the beginning of HTML content")
            html_content = html_content[1:]

        return html_content
