"""
DOM helpers for htmlq.
Node classification and attribute access over BeautifulSoup trees.
"""

from .node import (
    NodeType,
    VALUE_ELEMENTS,
    node_type,
    is_element,
    is_value_node,
    has_children,
    child_nodes,
)
from .attr import check_attr_name, get_attr, set_attr

__all__ = [
    'NodeType', 'VALUE_ELEMENTS', 'node_type', 'is_element', 'is_value_node',
    'has_children', 'child_nodes', 'check_attr_name', 'get_attr', 'set_attr',
]
