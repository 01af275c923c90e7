"""Converter wiring the schema-to-XSD and XML-to-object pipelines."""

import time
from typing import Any, Dict, Optional, Union

from .adapter import SchemaModelAdapter
from .compiler import TreeToXsdCompiler
from .config import Config, ConfigurationError
from .logger import create_logger
from .normalizer import ObjectNormalizer
from .parser import XmlTreeParser


class Converter:
    """Main entry point holding one configured instance of each pipeline stage."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

        errors = self.config.validate()
        if errors:
            raise ConfigurationError(errors)

        level = self.config.logging.level
        self.logger = create_logger(level=level, component="converter")

        # Pipeline A
        self.adapter = SchemaModelAdapter(self.config, create_logger(level=level, component="adapter"))
        self.compiler = TreeToXsdCompiler(self.config, create_logger(level=level, component="compiler"))

        # Pipeline B
        self.parser = XmlTreeParser(self.config, create_logger(level=level, component="parser"))
        self.normalizer = ObjectNormalizer(self.config, create_logger(level=level, component="normalizer"))

    def schema_to_xsd(self, schema: Any, root_name: Optional[str] = None) -> str:
        """Derive an XSD document from a pydantic model, type or JSON Schema dict."""
        start_time = time.time()
        root_name = root_name or self.config.root_name

        tree = self.adapter.adapt(schema)
        xsd = self.compiler.compile(tree, root_name)

        self.logger.performance_metric(
            "schema_to_xsd", time.time() - start_time, "s",
            rootName=root_name, rootKind=tree.kind.value, outputLength=len(xsd),
        )
        return xsd

    def parse_xml(self, xml_text: Union[str, bytes]) -> Dict[str, Any]:
        """Parse XML text into a normalized object."""
        start_time = time.time()

        raw_tree = self.parser.parse(xml_text)
        result = self.normalizer.normalize(raw_tree)

        self.logger.performance_metric(
            "parse_xml", time.time() - start_time, "s", fields=len(result),
        )
        return result
