"""
Attribute helpers for element nodes.
Attribute values are read and written through the element's attribute mapping,
so a key is never stored twice.
"""

from bs4.element import Tag


def check_attr_name(name: str) -> None:
    """Raise ValueError unless name is a non-empty string."""
    if not isinstance(name, str) or not name:
        raise ValueError(f"Attribute name must be a non-empty string, got {name!r}")


def get_attr(element: Tag, name: str) -> str:
    """
    Get an attribute value from an element.
    
    Args:
        element: Element to read from
        name: Attribute name
        
    Returns:
        The attribute value, or an empty string if the attribute is absent
    """
    check_attr_name(name)
    value = element.attrs.get(name)
    if value is None:
        return ""
    # Multi-valued attributes (e.g. class) come back as lists from some builders
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def set_attr(element: Tag, name: str, value: str) -> None:
    """
    Set an attribute on an element, creating it if absent.
    
    Args:
        element: Element to modify
        name: Attribute name
        value: New attribute value
    """
    check_attr_name(name)
    element.attrs[name] = "" if value is None else str(value)

