"""XML text to nested mapping, backed by xmltodict."""

from typing import Any, Dict, Optional, Union

import xmltodict

from .config import Config
from .logger import BridgeLogger, create_logger


class XmlTreeParser:
    """Parses XML text into a raw nested mapping.

    Repeated sibling elements become lists, element text stays a string and
    empty elements map to None. Attributes are not retained.
    """

    def __init__(self, config: Optional[Config] = None, logger: Optional[BridgeLogger] = None):
        self.config = config or Config()
        self.logger = logger or create_logger(level=self.config.logging.level, component="parser")

    def parse(self, xml_text: Union[str, bytes]) -> Dict[str, Any]:
        """Parse ``xml_text``; expat errors propagate unchanged."""
        # expat rejects anything before the XML declaration
        xml_text = xml_text.lstrip()
        self.logger.debug("Parsing XML document", length=len(xml_text))
        tree = xmltodict.parse(xml_text, xml_attribs=False, strip_whitespace=True)
        self.logger.debug("XML document parsed", topLevelKeys=list(tree.keys()))
        return tree
