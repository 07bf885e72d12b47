"""
Tree enumeration helpers: text leaves with a filter predicate and a
structural query for elements holding a given text.
"""

from typing import Callable, Iterator, Optional

from .tree import Element, Node, TextLeaf

LeafPredicate = Callable[[TextLeaf], bool]

# Leaves under these tags are never rendered as text
NON_RENDERED_TAGS = frozenset({"script", "style", "template"})


def iter_text_leaves(root: Node, predicate: Optional[LeafPredicate] = None) -> Iterator[TextLeaf]:
    """
    Yield the text leaves under ``root`` in document order.

    A leaf root yields itself. Leaves rejected by ``predicate`` are skipped.
    The generator reads the live tree, so callers that mutate leaves must
    materialise the sequence first.
    """
    if isinstance(root, TextLeaf):
        candidates = iter([root])
    elif isinstance(root, Element):
        candidates = (node for node in root.iter_descendants() if isinstance(node, TextLeaf))
    else:
        return
    for leaf in candidates:
        if predicate is None or predicate(leaf):
            yield leaf


def is_rendered_text(leaf: TextLeaf) -> bool:
    """Non-blank leaf outside of script/style/template content."""
    if not leaf.data.strip():
        return False
    parent = leaf.parent
    while parent is not None:
        if parent.tag in NON_RENDERED_TAGS:
            return False
        parent = parent.parent
    return True


def query_elements(root: Node, contains: str) -> Iterator[Element]:
    """
    Yield elements under ``root`` (root included) that own a direct text
    leaf containing ``contains``, in document order.
    """
    if not isinstance(root, Element):
        return
    for node in [root, *root.iter_descendants()]:
        if not isinstance(node, Element) or node.tag in NON_RENDERED_TAGS:
            continue
        if any(isinstance(child, TextLeaf) and contains in child.data for child in node.children):
            yield node
