"""
HTML adapter: load markup into the host tree and serialise it back.
"""

import html
from typing import List, Union

from bs4 import BeautifulSoup
from bs4.element import Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

from .tree import Document, Element, Node, TextLeaf

VOID_TAGS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
})
RAW_TEXT_TAGS = frozenset({"script", "style"})

_SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


def _convert(tag: Tag) -> Element:
    attributes = {}
    for name, value in tag.attrs.items():
        # multi-valued attributes (class, rel) come back as lists
        attributes[name] = " ".join(value) if isinstance(value, list) else str(value)
    children: List[Node] = []
    for child in tag.children:
        if isinstance(child, Tag):
            children.append(_convert(child))
        elif isinstance(child, NavigableString) and not isinstance(child, _SKIPPED_STRINGS):
            children.append(TextLeaf(str(child)))
    return Element(tag.name, attributes, children)


def parse_html(markup: Union[str, bytes]) -> Document:
    """
    Build a Document from HTML. Comments and doctypes are dropped; a
    fragment without a single root is wrapped in ``<body>``.
    """
    soup = BeautifulSoup(markup, "html.parser")
    top = [child for child in soup.children if isinstance(child, Tag)]
    stray_text = any(
        isinstance(child, NavigableString) and not isinstance(child, _SKIPPED_STRINGS) and child.strip()
        for child in soup.children
    )
    if len(top) == 1 and not stray_text:
        return Document(_convert(top[0]))
    wrapper = soup.new_tag("body")
    for child in list(soup.children):
        wrapper.append(child.extract())
    return Document(_convert(wrapper))


def _serialise(node: Node, out: List[str], raw: bool = False):
    if isinstance(node, TextLeaf):
        out.append(node.data if raw else html.escape(node.data, quote=False))
        return
    attrs = "".join(
        f' {name}="{html.escape(value, quote=True)}"' for name, value in node.attributes.items()
    )
    out.append(f"<{node.tag}{attrs}>")
    if node.tag in VOID_TAGS:
        return
    for child in node.children:
        _serialise(child, out, raw=node.tag in RAW_TEXT_TAGS)
    out.append(f"</{node.tag}>")


def to_html(document: Union[Document, Element]) -> str:
    root = document.root if isinstance(document, Document) else document
    out: List[str] = []
    _serialise(root, out)
    return "".join(out)
