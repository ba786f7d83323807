"""
Node classification for parsed documents.
This module maps BeautifulSoup's node classes onto the DOM node types.
"""

from enum import IntEnum
from typing import Iterator, Optional

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    PageElement,
    ProcessingInstruction,
    Tag,
)

# Elements that carry a form "value"
VALUE_ELEMENTS = frozenset({'input', 'textarea', 'select'})


class NodeType(IntEnum):
    """Node types as defined in the HTML5 specification."""
    ELEMENT_NODE = 1
    ATTRIBUTE_NODE = 2
    TEXT_NODE = 3
    CDATA_SECTION_NODE = 4
    ENTITY_REFERENCE_NODE = 5  # Legacy
    ENTITY_NODE = 6  # Legacy
    PROCESSING_INSTRUCTION_NODE = 7
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9
    DOCUMENT_TYPE_NODE = 10
    DOCUMENT_FRAGMENT_NODE = 11
    NOTATION_NODE = 12  # Legacy


def node_type(node: PageElement) -> Optional[NodeType]:
    """
    Classify a parsed node.
    
    Args:
        node: A node from a BeautifulSoup tree
        
    Returns:
        The node's NodeType, or None for objects that are not tree nodes
    """
    # BeautifulSoup subclasses Tag, so the document check comes first
    if isinstance(node, BeautifulSoup):
        return NodeType.DOCUMENT_NODE
    if isinstance(node, Tag):
        return NodeType.ELEMENT_NODE
    if isinstance(node, Comment):
        return NodeType.COMMENT_NODE
    if isinstance(node, (Doctype, Declaration)):
        return NodeType.DOCUMENT_TYPE_NODE
    if isinstance(node, CData):
        return NodeType.CDATA_SECTION_NODE
    if isinstance(node, ProcessingInstruction):
        return NodeType.PROCESSING_INSTRUCTION_NODE
    if isinstance(node, NavigableString):
        return NodeType.TEXT_NODE
    return None


def is_element(node: PageElement) -> bool:
    """Check whether a node is an element (not the document, text or comment)."""
    return node_type(node) == NodeType.ELEMENT_NODE


def is_value_node(node: PageElement) -> bool:
    """Check whether a node is a value-bearing form element."""
    return is_element(node) and node.name in VALUE_ELEMENTS


def has_children(node: PageElement) -> bool:
    """Documents and elements can contain other nodes; strings cannot."""
    return isinstance(node, Tag)


def child_nodes(node: PageElement) -> Iterator[PageElement]:
    """
    Iterate over the direct children of a node, left to right.
    
    Strings have no children, so nothing is yielded for them.
    """
    if not has_children(node):
        return
    child = node.contents[0] if node.contents else None
    while child is not None:
        yield child
        child = child.next_sibling
