"""
In-memory host tree.

A small DOM stand-in: elements with attributes and ordered children, text
leaves with mutable data, and a document that reports every mutation to its
registered observers as a ChangeRecord, the way a browser MutationObserver
would for ``childList``, ``attributes`` and ``subtree`` changes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional


class ChangeKind(str, Enum):
    CHILD_LIST = "childList"
    ATTRIBUTES = "attributes"
    # text data of a leaf changed
    SUBTREE = "subtree"


@dataclass(frozen=True)
class ChangeRecord:
    """One reported change to the tree."""
    target: "Node"
    kind: ChangeKind
    attribute_name: Optional[str] = None

    @property
    def subtree_root(self) -> Optional["Element"]:
        """Element whose subtree should be re-scanned for this change."""
        if isinstance(self.target, Element):
            return self.target
        return self.target.parent


class Node:
    def __init__(self):
        self.parent: Optional["Element"] = None

    @property
    def document(self) -> Optional["Document"]:
        node = self
        while node.parent is not None:
            node = node.parent
        return getattr(node, "owner_document", None)

    def is_descendant_of(self, other: "Node") -> bool:
        """True when ``other`` is this node or one of its ancestors."""
        node: Optional[Node] = self
        while node is not None:
            if node is other:
                return True
            node = node.parent
        return False

    def _notify(self, kind: ChangeKind, attribute_name: Optional[str] = None):
        document = self.document
        if document is not None:
            document.notify(ChangeRecord(self, kind, attribute_name))


class TextLeaf(Node):
    def __init__(self, data: str = ""):
        super().__init__()
        self._data = data

    @property
    def data(self) -> str:
        return self._data

    @data.setter
    def data(self, value: str):
        if value == self._data:
            return
        self._data = value
        self._notify(ChangeKind.SUBTREE)

    def __repr__(self) -> str:
        return f"TextLeaf({self._data!r})"


class Element(Node):
    def __init__(self, tag: str, attributes: Optional[Dict[str, str]] = None,
                 children: Optional[List[Node]] = None):
        super().__init__()
        self.tag = tag.lower()
        self._attributes: Dict[str, str] = dict(attributes or {})
        self.children: List[Node] = []
        # Build silently: a freshly constructed subtree has no observers yet
        for child in children or []:
            child.parent = self
            self.children.append(child)

    # -- structure -------------------------------------------------------

    def append_child(self, child: Node) -> Node:
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        self._notify(ChangeKind.CHILD_LIST)
        return child

    def remove_child(self, child: Node) -> Node:
        self.children.remove(child)
        child.parent = None
        self._notify(ChangeKind.CHILD_LIST)
        return child

    def iter_descendants(self) -> Iterator[Node]:
        """Yield every descendant in document order (pre-order)."""
        for child in self.children:
            yield child
            if isinstance(child, Element):
                yield from child.iter_descendants()

    # -- text ------------------------------------------------------------

    @property
    def text(self) -> str:
        """Concatenated data of all descendant leaves."""
        return "".join(
            node.data for node in self.iter_descendants() if isinstance(node, TextLeaf)
        )

    @text.setter
    def text(self, value: str):
        for child in self.children:
            child.parent = None
        leaf = TextLeaf(value)
        leaf.parent = self
        self.children = [leaf]
        self._notify(ChangeKind.CHILD_LIST)

    # -- attributes ------------------------------------------------------

    @property
    def attributes(self) -> Dict[str, str]:
        return dict(self._attributes)

    def get_attribute(self, name: str) -> Optional[str]:
        return self._attributes.get(name)

    def set_attribute(self, name: str, value: str):
        if self._attributes.get(name) == value:
            return
        self._attributes[name] = value
        self._notify(ChangeKind.ATTRIBUTES, name)

    def remove_attribute(self, name: str):
        if name not in self._attributes:
            return
        del self._attributes[name]
        self._notify(ChangeKind.ATTRIBUTES, name)

    @property
    def style(self) -> "InlineStyle":
        return InlineStyle(self)

    def find(self, tag: str) -> Optional["Element"]:
        """First descendant element with the given tag."""
        tag = tag.lower()
        for node in self.iter_descendants():
            if isinstance(node, Element) and node.tag == tag:
                return node
        return None

    def __repr__(self) -> str:
        return f"<{self.tag} children={len(self.children)}>"


class InlineStyle:
    """View over an element's ``style`` attribute."""

    def __init__(self, element: Element):
        self.element = element

    def _declarations(self) -> Dict[str, str]:
        declarations: Dict[str, str] = {}
        for chunk in (self.element.get_attribute("style") or "").split(";"):
            if ":" not in chunk:
                continue
            name, value = chunk.split(":", 1)
            declarations[name.strip().lower()] = value.strip()
        return declarations

    def _write(self, declarations: Dict[str, str]):
        if declarations:
            css = "; ".join(f"{name}: {value}" for name, value in declarations.items())
            self.element.set_attribute("style", css + ";")
        else:
            self.element.remove_attribute("style")

    def get_property(self, name: str) -> Optional[str]:
        return self._declarations().get(name.lower())

    def set_property(self, name: str, value: str):
        declarations = self._declarations()
        declarations[name.lower()] = value
        self._write(declarations)

    def remove_property(self, name: str) -> Optional[str]:
        """Drop a declaration; returns the removed value, None if absent."""
        declarations = self._declarations()
        removed = declarations.pop(name.lower(), None)
        if removed is not None:
            self._write(declarations)
        return removed


class Document:
    """Owner of the tree and fan-out point for change records."""

    def __init__(self, root: Element):
        self.root = root
        root.owner_document = self
        self._observers: List[Callable[[ChangeRecord], None]] = []

    @property
    def body(self) -> Element:
        """The root container: first ``body`` element, else the root."""
        if self.root.tag == "body":
            return self.root
        return self.root.find("body") or self.root

    def add_observer(self, callback: Callable[[ChangeRecord], None]):
        self._observers.append(callback)

    def remove_observer(self, callback: Callable[[ChangeRecord], None]):
        if callback in self._observers:
            self._observers.remove(callback)

    def notify(self, record: ChangeRecord):
        for callback in list(self._observers):
            callback(record)
