"""
NodeSet: a jQuery-like wrapper around a (perhaps empty) set of parsed nodes.

A NodeSet holds references into a tree owned by the parsed document. Queries
return new NodeSets over the same tree; only attribute edits mutate it.
"""

import logging
from typing import Callable, Iterable, Iterator, Optional, Tuple, Union

from bs4.element import PageElement

from htmlq.dom.attr import check_attr_name, get_attr, set_attr
from htmlq.dom.node import child_nodes, is_element, is_value_node
from htmlq.exceptions import ParseError
from htmlq.parser.html_parser import HTMLParser
from htmlq.parser.selector import get_selector_engine
from htmlq.rendering.renderer import render
from htmlq.rendering.sink import TextRenderer
from htmlq.utils.config import get_config

logger = logging.getLogger(__name__)

Source = Union[str, bytes]


class NodeSet:
    """
    Ordered collection of document nodes with query and accessor operations.

    An empty NodeSet is a valid value: every accessor returns an empty result
    on it instead of failing.
    """

    __slots__ = ('_nodes',)

    def __init__(self, nodes: Optional[Iterable[PageElement]] = None):
        """
        Initialize a NodeSet.

        Args:
            nodes: Node references to wrap, kept in the given order
        """
        self._nodes = list(nodes) if nodes is not None else []

    # Parsing

    def parse(self, source, parser: Optional[HTMLParser] = None) -> 'NodeSet':
        """
        Parse a document and reset this set to hold only its root.

        Args:
            source: Markup as str or bytes, or a readable stream (text or binary)
            parser: Parser to use (default built from the configuration)

        Returns:
            NodeSet: self, for chaining

        Raises:
            ParseError: If the stream cannot be read or the markup is rejected
        """
        if hasattr(source, 'read'):
            return self.parse_reader(source, parser)
        if isinstance(source, (str, bytes, bytearray)):
            return self.parse_string(source, parser)
        raise TypeError(f"Cannot parse {type(source).__name__}; expected str, bytes or a readable stream")

    def parse_string(self, text: Source, parser: Optional[HTMLParser] = None) -> 'NodeSet':
        """Parse in-memory markup and reset this set to its root."""
        root = (parser or HTMLParser()).parse(text)
        self._nodes = [root]
        logger.debug("Parsed document into a single-root node set")
        return self

    def parse_reader(self, stream, parser: Optional[HTMLParser] = None) -> 'NodeSet':
        """Read all markup from a stream, parse it and reset this set to its root."""
        try:
            data = stream.read()
        except (OSError, ValueError) as e:
            logger.debug(f"Error reading HTML source: {e}")
            raise ParseError(f"Error reading HTML source: {e}") from e
        return self.parse_string(data, parser)

    # Queries

    def find(self, selector: str) -> 'NodeSet':
        """
        Find descendants of the nodes in this set that match a CSS selector.

        Matches are kept in discovery order. A node reachable from several
        nodes of this set appears only once.

        Args:
            selector: CSS selector

        Returns:
            NodeSet: New set of matching nodes (this set is not modified)

        Raises:
            SelectorError: If the selector is not valid CSS
        """
        engine = get_selector_engine()
        compiled = engine.compile(selector)

        working_set = []
        seen = set()
        for node in self._nodes:
            for match in engine.match_all(compiled, node):
                # bs4 nodes compare by content, so dedup by identity
                if id(match) not in seen:
                    seen.add(id(match))
                    working_set.append(match)

        logger.debug(f"Selector '{selector}' matched {len(working_set)} node(s) "
                     f"under {len(self._nodes)} node(s)")
        return NodeSet(working_set)

    def index(self, idx: int) -> 'NodeSet':
        """
        Get a set holding only the node at the given position.

        Out-of-range positions, negative ones included, give an empty set.
        """
        if idx < 0 or idx >= len(self._nodes):
            return NodeSet()
        return NodeSet([self._nodes[idx]])

    def for_each(self, visitor: Callable[['NodeSet'], None]) -> 'NodeSet':
        """
        Call visitor once per node, in order, with a single-node set.

        Returns:
            NodeSet: self, for chaining
        """
        if not callable(visitor):
            raise TypeError(f"visitor must be callable, got {type(visitor).__name__}")
        for node in self._nodes:
            visitor(NodeSet([node]))
        return self

    def len(self) -> int:
        """Number of nodes in the set."""
        return len(self._nodes)

    def node(self) -> Optional[PageElement]:
        """The first underlying node, or None if the set is empty."""
        return self._nodes[0] if self._nodes else None

    @property
    def nodes(self) -> Tuple[PageElement, ...]:
        """The underlying node references, in set order."""
        return tuple(self._nodes)

    # Accessors

    def get_value(self) -> str:
        """
        Get the value of the first value-bearing element (input, textarea, select).

        The whole set is scanned, so leading non-form nodes are skipped.

        Returns:
            str: The "value" attribute, or "" if there is no such element or attribute
        """
        element = self._first_value_node()
        if element is None:
            return ""
        return get_attr(element, "value")

    def set_value(self, value: str) -> None:
        """Set "value" on the first value-bearing element; no-op if there is none."""
        element = self._first_value_node()
        if element is not None:
            set_attr(element, "value", value)

    def get_attr(self, name: str) -> str:
        """
        Get an attribute of the first element in the set.

        Only the first element node is consulted; document, text and comment
        nodes before it are skipped.

        Args:
            name: Attribute name

        Returns:
            str: The attribute value, or "" if absent or the set has no element
        """
        check_attr_name(name)
        element = self._first_element()
        if element is None:
            return ""
        return get_attr(element, name)

    def set_attr(self, name: str, value: str) -> None:
        """Set (or create) an attribute on the first element in the set."""
        check_attr_name(name)
        element = self._first_element()
        if element is not None:
            set_attr(element, name, value)

    def text(self, idx: int = 0) -> str:
        """
        Render the inner markup of the node at the given position.

        Each direct child is serialized in full (tags included) and the results
        are concatenated in child order.

        Args:
            idx: Position of the node in the set

        Returns:
            str: Inner markup, or "" if the position is out of range

        Raises:
            RenderError: If a child cannot be serialized
        """
        if idx < 0 or idx >= len(self._nodes):
            return ""

        formatter = get_config().get("render.formatter", "minimal")
        work = TextRenderer()
        for child in child_nodes(self._nodes[idx]):
            render(child, work, formatter)
        return work.getvalue()

    # Python protocols

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __iter__(self) -> Iterator['NodeSet']:
        for node in self._nodes:
            yield NodeSet([node])

    def __repr__(self) -> str:
        names = [getattr(n, 'name', None) or type(n).__name__ for n in self._nodes[:5]]
        if len(self._nodes) > 5:
            names.append('...')
        return f"NodeSet([{', '.join(names)}])"

    def _first_element(self) -> Optional[PageElement]:
        for node in self._nodes:
            if is_element(node):
                return node
        return None

    def _first_value_node(self) -> Optional[PageElement]:
        for node in self._nodes:
            if is_value_node(node):
                return node
        return None


def parse(source, parser: Optional[HTMLParser] = None) -> NodeSet:
    """
    Parse a document into a new single-root NodeSet.

    Args:
        source: Markup as str or bytes, or a readable stream

    Returns:
        NodeSet: Set holding the document root
    """
    return NodeSet().parse(source, parser)
