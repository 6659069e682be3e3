"""Read-only view over a parsed XML response"""

from typing import List, Optional
from xml.etree import ElementTree

from amazon_catalog.core.errors import ParseFailure


def _local_name(tag) -> str:
    # '{namespace}Name' -> 'Name'
    if isinstance(tag, str) and tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


class Document:
    """
    Parsed response document with lookup by element name

    Paths are '/'-separated element names relative to the root element,
    e.g. 'Items/Request/IsValid'. parse_document strips XML namespaces.
    """

    def __init__(self, root: ElementTree.Element):
        self.root = root

    @property
    def tag(self) -> str:
        return self.root.tag

    def find(self, path: str) -> Optional["Document"]:
        element = self.root.find(path)
        if element is None:
            return None
        return Document(element)

    def find_all(self, path: str) -> List["Document"]:
        return [Document(element) for element in self.root.findall(path)]

    def exists(self, path: str) -> bool:
        return self.root.find(path) is not None

    def text(self, path: str, default: str = "") -> str:
        element = self.root.find(path)
        if element is None or element.text is None:
            return default
        return element.text.strip()

    def number(self, path: str, default: float = 0.0) -> float:
        value = self.text(path)
        if not value:
            return default
        try:
            return float(value)
        except ValueError:
            return default

    def is_empty(self) -> bool:
        """True when the element has neither children nor text"""
        return len(self.root) == 0 and not (self.root.text or "").strip()

    def to_string(self) -> str:
        return ElementTree.tostring(self.root, encoding="unicode")

    def __repr__(self) -> str:
        return f"<Document {self.tag}>"


def parse_document(body: bytes) -> Document:
    """Parse a response body into a Document"""
    if not body or not body.strip():
        raise ParseFailure("Empty response body")
    try:
        root = ElementTree.fromstring(body)
    except ElementTree.ParseError as e:
        raise ParseFailure(f"Response is not valid XML: {e}")

    for element in root.iter():
        element.tag = _local_name(element.tag)
    return Document(root)
