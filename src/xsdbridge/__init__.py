"""xsdbridge: pydantic schemas to XML Schema, and XML documents to plain objects."""

__version__ = "0.1.0"

from typing import Any, Dict, Optional, Union

from .config import Config, ConfigurationError
from .converter import Converter


def model_to_xml_schema(schema: Any, root_name: Optional[str] = None, config: Optional[Config] = None) -> str:
    """Convert a pydantic model (or JSON Schema dict) to an XSD document.

    Args:
        schema: pydantic model class, any type pydantic can render, a JSON
            Schema dict, or a prebuilt SchemaNode tree.
        root_name: name of the root element, ``Config.root_name`` ("Root")
            when omitted.
        config: optional configuration.

    Returns:
        The XSD document as a string.
    """
    return Converter(config).schema_to_xsd(schema, root_name)


def parse_xml_to_object(xml_text: Union[str, bytes], config: Optional[Config] = None) -> Dict[str, Any]:
    """Parse an XML string into a normalized dict.

    The root element is unwrapped, values stay strings, and a plural
    container of repeated elements (``<tags><tag/>..</tags>``) becomes a list.
    """
    return Converter(config).parse_xml(xml_text)


__all__ = [
    "Config",
    "ConfigurationError",
    "Converter",
    "model_to_xml_schema",
    "parse_xml_to_object",
]
