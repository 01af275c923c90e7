"""Compile a generic schema tree into an XSD document."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from .annotation import INDENT, annotation_lines, escape_attribute, wrap_with_annotation
from .config import Config
from .logger import BridgeLogger, create_logger
from .schema_model import (
    ArrayNode, ObjectNode, PrimitiveNode, SchemaKind, SchemaNode, SchemaVisitor, UnknownNode,
    UNBOUNDED,
)

XSD_HEADER = """<?xml version="1.0" encoding="UTF-8"?>
<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema"
           elementFormDefault="qualified"
           attributeFormDefault="unqualified">"""

XSD_FOOTER = "</xs:schema>"

XSD_TYPE_MAP: Dict[SchemaKind, str] = {
    SchemaKind.STRING: "xs:string",
    SchemaKind.NUMBER: "xs:double",
    SchemaKind.INTEGER: "xs:int",
    SchemaKind.BOOLEAN: "xs:boolean",
}

DEFAULT_XSD_TYPE = "xs:string"


def xsd_type_for(kind: SchemaKind) -> str:
    """Map a node kind to its XSD built-in type."""
    return XSD_TYPE_MAP.get(kind, DEFAULT_XSD_TYPE)


@dataclass
class XsdElement:
    """An xs:element before rendering.

    ``complex`` elements render an xs:complexType/xs:sequence body holding
    ``children``; all others render as a single typed tag.
    """
    name: str
    type_name: Optional[str] = None
    occurs: Dict[str, str] = field(default_factory=dict)
    documentation: List[str] = field(default_factory=list)
    children: List["XsdElement"] = field(default_factory=list)
    complex: bool = False

    def opening_tag(self) -> str:
        attributes = [("name", self.name)]
        if self.type_name:
            attributes.append(("type", self.type_name))
        attributes.extend(self.occurs.items())
        rendered = " ".join(f'{key}="{escape_attribute(str(value))}"' for key, value in attributes)
        return f"<xs:element {rendered}"

    def render(self, depth: int = 0) -> str:
        pad = INDENT * depth

        if not self.complex:
            return wrap_with_annotation(f"{pad}{self.opening_tag()}/>", self.documentation)

        lines = [f"{pad}{self.opening_tag()}>"]
        lines.extend(annotation_lines(self.documentation, depth + 1))
        lines.append(f"{pad}{INDENT}<xs:complexType>")
        lines.append(f"{pad}{INDENT * 2}<xs:sequence>")
        lines.extend(child.render(depth + 3) for child in self.children)
        lines.append(f"{pad}{INDENT * 2}</xs:sequence>")
        lines.append(f"{pad}{INDENT}</xs:complexType>")
        lines.append(f"{pad}</xs:element>")
        return "\n".join(lines)

    def walk(self) -> Iterator["XsdElement"]:
        yield self
        for child in self.children:
            yield from child.walk()


class TreeToXsdCompiler(SchemaVisitor):
    """Turns a SchemaNode tree into an XSD document string."""

    def __init__(self, config: Optional[Config] = None, logger: Optional[BridgeLogger] = None):
        self.config = config or Config()
        self.logger = logger or create_logger(level=self.config.logging.level, component="compiler")

    def compile(self, tree: SchemaNode, root_name: Optional[str] = None) -> str:
        """Compile ``tree`` into a complete XSD document rooted at ``root_name``."""
        root_name = root_name or self.config.root_name
        root = self.build(tree, root_name)

        elements = list(root.walk())
        self.logger.debug(
            "XSD compilation completed",
            rootName=root_name,
            elements=len(elements),
            annotated=sum(1 for element in elements if element.documentation),
        )

        return f"{XSD_HEADER}\n{root.render()}\n{XSD_FOOTER}"

    def build(self, tree: SchemaNode, element_name: str) -> XsdElement:
        """Build the element structure for ``tree`` without rendering it."""
        return tree.accept(self, element_name)

    def visit_object(self, node: ObjectNode, element_name: str) -> XsdElement:
        self.logger.mapping_decision(
            "object to complexType", "object", "xs:sequence",
            elementName=element_name, properties=len(node.properties),
        )
        return XsdElement(
            name=element_name,
            documentation=_documentation(node),
            children=[child.accept(self, name) for name, child in node.properties.items()],
            complex=True,
        )

    def visit_array(self, node: ArrayNode, element_name: str) -> XsdElement:
        if node.items is None:
            self.logger.mapping_decision(
                "array without items", "array", DEFAULT_XSD_TYPE, elementName=element_name,
            )
            return XsdElement(
                name=element_name,
                type_name=DEFAULT_XSD_TYPE,
                occurs={"minOccurs": "0", "maxOccurs": UNBOUNDED},
                documentation=_documentation(node),
            )

        element = node.items.accept(self, element_name)
        # only the outermost element carries the bounds; nested arrays overwrite
        element.occurs = node.occurs.as_attributes()
        element.documentation = _documentation(node) + element.documentation

        self.logger.mapping_decision(
            "array to repeated element", "array", str(node.occurs),
            elementName=element_name, itemKind=node.items.kind.value,
        )
        return element

    def visit_primitive(self, node: PrimitiveNode, element_name: str) -> XsdElement:
        return XsdElement(
            name=element_name,
            type_name=xsd_type_for(node.kind),
            documentation=_documentation(node),
        )

    def visit_unknown(self, node: UnknownNode, element_name: str) -> XsdElement:
        self.logger.mapping_decision(
            "unrecognised type", str(node.type_tag), DEFAULT_XSD_TYPE, elementName=element_name,
        )
        return XsdElement(
            name=element_name,
            type_name=DEFAULT_XSD_TYPE,
            documentation=_documentation(node),
        )


def _documentation(node: SchemaNode) -> List[str]:
    return [node.description] if node.description else []
