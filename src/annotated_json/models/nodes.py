"""Array-form node model.

Every element of an array-form sequence is exactly one of three shapes:

* ``Comment`` - a bare string, emitted verbatim as a JSON string literal
* ``Section`` - a ``[name, [children...]]`` pair opening a nested scope
* ``Leaf`` - a single-key object ``{name: value}`` holding a data value

Generic JSON values are converted into these variants once, by
``decode_node``/``decode_nodes``; everything downstream dispatches on the
variant type instead of re-checking shapes.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Union

from ..types import ArrayForm, InvalidAnnotatedJsonError, JSONValue


@dataclass
class Comment:
    """Free text attached to a position in the document."""

    text: str

    def to_json(self) -> str:
        return self.text


@dataclass
class Section:
    """A named nested scope."""

    name: str
    children: List["Node"] = field(default_factory=list)

    def to_json(self) -> list:
        return [self.name, encode_nodes(self.children)]


@dataclass
class Leaf:
    """A named terminal value."""

    name: str
    value: JSONValue = None

    def to_json(self) -> dict:
        return {self.name: self.value}


Node = Union[Comment, Section, Leaf]


def decode_node(item: Any, path: Optional[List[str]] = None) -> Node:
    """
    Convert one generic JSON value into an array-form node.

    Args:
        item: Decoded JSON value (or an already-built node)
        path: Location of the enclosing scope, used in error context

    Returns:
        Comment, Section or Leaf

    Raises:
        InvalidAnnotatedJsonError: If the value matches none of the shapes
    """
    path = path or []

    if isinstance(item, (Comment, Section, Leaf)):
        return item

    if isinstance(item, str):
        return Comment(item)

    if (isinstance(item, list) and len(item) == 2 and
            isinstance(item[0], str) and isinstance(item[1], list)):
        name = item[0]
        return Section(name, decode_nodes(item[1], path + [name]))

    if isinstance(item, dict) and len(item) == 1:
        name, value = next(iter(item.items()))
        return Leaf(name, value)

    raise InvalidAnnotatedJsonError(context={"path": path, "node": item})


def decode_nodes(items: Sequence[Any], path: Optional[List[str]] = None) -> List[Node]:
    """Convert a whole array-form sequence, recursing into sections."""
    return [decode_node(item, path) for item in items]


def encode_nodes(nodes: Sequence[Node]) -> ArrayForm:
    """Convert nodes back into plain JSON values."""
    return [node.to_json() for node in nodes]
