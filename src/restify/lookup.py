"""
Lookup helpers over a parsed document.

Every helper takes the document returned by a loader (or any element inside
it) and walks the tree depth-first in document order. A ``Tag`` passed as
``root`` is itself a candidate; the ``BeautifulSoup`` document object never is.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional

import structlog
from bs4 import BeautifulSoup, Tag

from .tags import lookup_tag

logger = structlog.get_logger(__name__)

Matcher = Callable[[Tag], bool]


def attr(node: Tag, name: str) -> str:
    """Return the value of attribute ``name`` on ``node``, or "" when it is absent.

    Multi-valued attributes such as ``class`` are returned space-joined.
    """
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return value


def _is_element(node: object) -> bool:
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def _iter_matches(root: Tag, matcher: Matcher, nested: bool) -> Iterator[Tag]:
    # Explicit stack: deeply nested documents would overflow recursion.
    stack: List[Tag] = [root]
    while stack:
        node = stack.pop()
        if _is_element(node) and matcher(node):
            yield node
            if not nested:
                continue
        children = [child for child in node.contents if isinstance(child, Tag)]
        stack.extend(reversed(children))


def find(root: Tag, matcher: Matcher) -> Optional[Tag]:
    """Return the first element in document order accepted by ``matcher``."""
    return next(_iter_matches(root, matcher, nested=True), None)


def find_all(root: Tag, matcher: Matcher, *, nested: bool = True) -> List[Tag]:
    """Return every element accepted by ``matcher``, in document order.

    With ``nested=False`` the walk does not descend into an element once it has
    matched, so matches inside a match are left out.
    """
    return list(_iter_matches(root, matcher, nested))


def find_by_id(root: Tag, id: str) -> Optional[Tag]:
    """Locate the element whose ``id`` attribute equals ``id``.

    Returns None when no element carries that id.
    """
    return find(root, lambda node: node.get("id") == id)


def find_all_by_class(root: Tag, class_name: str, *, nested: bool = True) -> List[Tag]:
    """Return the elements whose class list contains the ``class_name`` token."""

    def matcher(node: Tag) -> bool:
        return class_name in attr(node, "class").split()

    return find_all(root, matcher, nested=nested)


def _match_by_attribute(name: str, value: Optional[str]) -> Matcher:
    def matcher(node: Tag) -> bool:
        if not node.has_attr(name):
            return False
        return value is None or attr(node, name) == value

    return matcher


def find_all_by_attribute(
    root: Tag, name: str, value: Optional[str] = None, *, nested: bool = True
) -> List[Tag]:
    """Return the elements carrying attribute ``name``.

    ``value=None`` matches on presence alone. Any string, the empty string
    included, must equal the attribute value exactly.
    """
    return find_all(root, _match_by_attribute(name, value), nested=nested)


def find_all_by_attribute_name(root: Tag, name: str, *, nested: bool = True) -> List[Tag]:
    """Return the elements that have attribute ``name``, whatever its value."""
    return find_all_by_attribute(root, name, None, nested=nested)


def find_all_by_attribute_name_value(root: Tag, name: str, value: str, *, nested: bool = True) -> List[Tag]:
    """Return the elements whose attribute ``name`` equals ``value``.

    An empty ``value`` matches on presence alone, like
    :func:`find_all_by_attribute_name`. Use :func:`find_all_by_attribute` to
    match an empty value exactly.
    """
    return find_all_by_attribute(root, name, value or None, nested=nested)


def find_all_by_tag_name(root: Tag, tag_name: str, *, nested: bool = True) -> List[Tag]:
    """Return the elements with the given tag name, compared case-insensitively.

    Names outside the recognised element vocabulary match nothing.
    """
    wanted = lookup_tag(tag_name)
    if wanted is None:
        logger.debug("Unrecognised tag name", tag_name=tag_name)
        return []
    return find_all(root, lambda node: node.name.lower() == wanted, nested=nested)
