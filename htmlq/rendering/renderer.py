"""
Markup renderer.
Serializes a node and its subtree into a sink using BeautifulSoup's formatters.
"""

import logging
from typing import Optional

from bs4.element import Doctype, NavigableString, PageElement, Tag

from htmlq.exceptions import RenderError

logger = logging.getLogger(__name__)

DEFAULT_FORMATTER = "minimal"


def render_to_string(node: PageElement, formatter: Optional[str] = DEFAULT_FORMATTER) -> str:
    """
    Serialize a single node (tags included) to markup.

    Args:
        node: Element, text, comment or doctype node
        formatter: BeautifulSoup formatter name ("minimal", "html", "html5" or None)

    Returns:
        str: Markup for the node and its subtree
    """
    if isinstance(node, Tag):
        return node.decode(formatter=formatter)
    if isinstance(node, Doctype):
        # bs4 appends a newline after the doctype; markup output has none
        return f"<!DOCTYPE {node}>"
    if isinstance(node, NavigableString):
        # Adds comment/CDATA delimiters and escapes plain text
        return node.output_ready(formatter=formatter)
    raise RenderError(f"Cannot render object of type {type(node).__name__}")


def render(node: PageElement, sink, formatter: Optional[str] = DEFAULT_FORMATTER) -> None:
    """
    Write the markup for a node into a sink.

    Args:
        node: Node to render
        sink: Object with a write(str) method
        formatter: BeautifulSoup formatter name

    Raises:
        RenderError: If the node cannot be serialized
    """
    try:
        markup = render_to_string(node, formatter)
    except RenderError:
        raise
    except Exception as e:
        logger.debug(f"Error rendering {type(node).__name__}: {e}")
        raise RenderError(f"Error rendering node: {e}") from e
    sink.write(markup)
