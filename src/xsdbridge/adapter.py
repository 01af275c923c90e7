"""Adapt pydantic models and JSON Schema documents into generic schema trees."""

from typing import Any, Dict, FrozenSet, Optional

from pydantic import BaseModel, TypeAdapter

from .config import Config
from .logger import BridgeLogger, create_logger
from .schema_model import (
    ArrayNode, ObjectNode, Occurrence, PrimitiveNode, SchemaKind, SchemaNode, UnknownNode,
    UNBOUNDED,
)

REF_PREFIXES = ("#/$defs/", "#/definitions/")


class SchemaModelAdapter:
    """Converts a schema description into a SchemaNode tree.

    Accepts an existing SchemaNode, a pydantic model class, a JSON Schema
    dict, or any type pydantic's TypeAdapter understands.
    """

    def __init__(self, config: Optional[Config] = None, logger: Optional[BridgeLogger] = None):
        self.config = config or Config()
        self.logger = logger or create_logger(level=self.config.logging.level, component="adapter")

    def adapt(self, schema: Any) -> SchemaNode:
        if isinstance(schema, SchemaNode):
            return schema
        return self.from_json_schema(self.to_json_schema(schema))

    def to_json_schema(self, schema: Any) -> Dict[str, Any]:
        """Render ``schema`` as a JSON Schema dict."""
        if isinstance(schema, dict):
            return schema
        if isinstance(schema, type) and issubclass(schema, BaseModel):
            self.logger.debug("Rendering pydantic model", model=schema.__name__)
            return schema.model_json_schema()
        return TypeAdapter(schema).json_schema()

    def from_json_schema(self, document: Dict[str, Any]) -> SchemaNode:
        """Convert a JSON Schema document, resolving local $refs against it."""
        definitions = {}
        for key in ("definitions", "$defs"):
            if isinstance(document.get(key), dict):
                definitions.update(document[key])
        return self._convert(document, definitions, frozenset(), 0)

    def _convert(self, schema: Any, definitions: Dict[str, Any],
                 expanding: FrozenSet[str], depth: int) -> SchemaNode:
        if not isinstance(schema, dict):
            return UnknownNode()

        if depth >= self.config.max_recursion_depth:
            self.logger.warn("Schema nesting too deep, falling back to string", depth=depth)
            return UnknownNode(description=_description(schema), type_tag="depth-limit")

        schema, expanding, cycle = self._resolve(schema, definitions, expanding)
        if cycle is not None:
            self.logger.warn("Recursive schema reference, falling back to string", ref=cycle)
            return UnknownNode(description=_description(schema), type_tag=cycle)

        description = _description(schema)
        kind = SchemaKind.from_tag(schema.get("type"))
        if kind is SchemaKind.UNKNOWN and "type" not in schema and isinstance(schema.get("properties"), dict):
            kind = SchemaKind.OBJECT

        if kind is SchemaKind.OBJECT:
            properties = schema.get("properties")
            if not isinstance(properties, dict):
                properties = {}
            return ObjectNode(
                description=description,
                properties={
                    name: self._convert(child, definitions, expanding, depth + 1)
                    for name, child in properties.items()
                },
            )

        if kind is SchemaKind.ARRAY:
            items = schema.get("items")
            if items is None or items is True:
                items = schema.get("prefixItems")
            if isinstance(items, list):
                items = items[0] if items else None
            return ArrayNode(
                description=description,
                items=self._convert(items, definitions, expanding, depth + 1) if isinstance(items, dict) else None,
                occurs=Occurrence(_bound(schema.get("minItems"), 0), _bound(schema.get("maxItems"), UNBOUNDED)),
            )

        if kind.is_primitive:
            return PrimitiveNode(description=description, primitive=kind)

        tag = schema.get("type")
        self.logger.mapping_decision("unrecognised type tag", str(tag), "unknown")
        return UnknownNode(description=description, type_tag=tag if isinstance(tag, str) else None)

    def _resolve(self, schema: Dict[str, Any], definitions: Dict[str, Any], expanding: FrozenSet[str]):
        """Inline $ref, single-member allOf and nullable anyOf/oneOf wrappers.

        Returns the flattened schema, the refs now being expanded and, when a
        ref is already on the path, its name.
        """
        while True:
            ref = schema.get("$ref")
            if isinstance(ref, str):
                name = _ref_name(ref)
                if name is None or name not in definitions:
                    self.logger.warn("Unresolvable schema reference", ref=ref)
                    return _without(schema, "$ref"), expanding, None
                if name in expanding:
                    return schema, expanding, name
                expanding = expanding | {name}
                schema = _merge(definitions[name], _without(schema, "$ref"))
                continue

            all_of = schema.get("allOf")
            if isinstance(all_of, list) and len(all_of) == 1 and isinstance(all_of[0], dict):
                schema = _merge(all_of[0], _without(schema, "allOf"))
                continue

            for key in ("anyOf", "oneOf"):
                branches = schema.get(key)
                if isinstance(branches, list) and "type" not in schema:
                    branch = _first_non_null(branches)
                    if branch is not None:
                        schema = _merge(branch, _without(schema, key))
                        break
            else:
                return schema, expanding, None


def _ref_name(ref: str) -> Optional[str]:
    for prefix in REF_PREFIXES:
        if ref.startswith(prefix):
            return ref[len(prefix):]
    return None


def _without(schema: Dict[str, Any], key: str) -> Dict[str, Any]:
    return {k: v for k, v in schema.items() if k != key}


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    merged.update(overrides)
    return merged


def _first_non_null(branches) -> Optional[Dict[str, Any]]:
    for branch in branches:
        if isinstance(branch, dict) and branch.get("type") != "null":
            return branch
    return None


def _description(schema: Dict[str, Any]) -> Optional[str]:
    description = schema.get("description")
    return description if isinstance(description, str) else None


def _bound(value: Any, default):
    """An integer minItems/maxItems, or ``default`` for anything else."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return default
