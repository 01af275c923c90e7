"""Generic schema tree consumed by the XSD compiler."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

UNBOUNDED = "unbounded"


class SchemaKind(str, Enum):
    """Closed set of node kinds."""
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    UNKNOWN = "unknown"

    @classmethod
    def from_tag(cls, tag: Any) -> "SchemaKind":
        """Resolve a JSON Schema type tag; a list resolves to its first entry."""
        if isinstance(tag, (list, tuple)):
            tag = tag[0] if tag else None
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_primitive(self) -> bool:
        return self in PRIMITIVE_KINDS


PRIMITIVE_KINDS = frozenset({
    SchemaKind.STRING, SchemaKind.NUMBER, SchemaKind.INTEGER, SchemaKind.BOOLEAN,
})


class Occurrence:
    """Cardinality bounds of a repeating element."""

    def __init__(self, min_occurs: int = 0, max_occurs: Union[int, str] = UNBOUNDED):
        self.min = max(0, int(min_occurs))
        self.max = max_occurs if max_occurs == UNBOUNDED else int(max_occurs)

    @property
    def is_bounded(self) -> bool:
        return self.max != UNBOUNDED

    def as_attributes(self) -> Dict[str, str]:
        """minOccurs/maxOccurs rendered as XSD attribute values."""
        return {"minOccurs": str(self.min), "maxOccurs": str(self.max)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Occurrence):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"Occurrence({self.min!r}, {self.max!r})"

    def __str__(self) -> str:
        return f"[{self.min}..{self.max}]"


@dataclass
class SchemaNode(ABC):
    """Base class for every node of the generic schema tree."""
    description: Optional[str] = None

    @property
    @abstractmethod
    def kind(self) -> SchemaKind:
        """The node's kind tag."""

    @abstractmethod
    def accept(self, visitor: "SchemaVisitor", element_name: str) -> Any:
        """Accept visitor pattern."""


@dataclass
class ObjectNode(SchemaNode):
    """A record with ordered, named properties."""
    properties: Dict[str, SchemaNode] = field(default_factory=dict)

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind.OBJECT

    def accept(self, visitor: "SchemaVisitor", element_name: str) -> Any:
        return visitor.visit_object(self, element_name)


@dataclass
class ArrayNode(SchemaNode):
    """A repeated value; ``items`` is None when the item shape is unknown."""
    items: Optional[SchemaNode] = None
    occurs: Occurrence = field(default_factory=Occurrence)

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind.ARRAY

    def accept(self, visitor: "SchemaVisitor", element_name: str) -> Any:
        return visitor.visit_array(self, element_name)


@dataclass
class PrimitiveNode(SchemaNode):
    """A string, number, integer or boolean leaf."""
    primitive: SchemaKind = SchemaKind.STRING

    def __post_init__(self):
        self.primitive = SchemaKind(self.primitive)
        if not self.primitive.is_primitive:
            raise ValueError(f"{self.primitive.value!r} is not a primitive kind")

    @property
    def kind(self) -> SchemaKind:
        return self.primitive

    def accept(self, visitor: "SchemaVisitor", element_name: str) -> Any:
        return visitor.visit_primitive(self, element_name)


@dataclass
class UnknownNode(SchemaNode):
    """A leaf whose type tag was missing or unrecognised."""
    type_tag: Optional[str] = None

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind.UNKNOWN

    def accept(self, visitor: "SchemaVisitor", element_name: str) -> Any:
        return visitor.visit_unknown(self, element_name)


class SchemaVisitor(ABC):
    """Visitor pattern for traversing schema trees."""

    @abstractmethod
    def visit_object(self, node: ObjectNode, element_name: str) -> Any:
        pass

    @abstractmethod
    def visit_array(self, node: ArrayNode, element_name: str) -> Any:
        pass

    @abstractmethod
    def visit_primitive(self, node: PrimitiveNode, element_name: str) -> Any:
        pass

    @abstractmethod
    def visit_unknown(self, node: UnknownNode, element_name: str) -> Any:
        pass
