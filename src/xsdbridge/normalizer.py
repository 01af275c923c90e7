"""Normalize a raw parsed XML tree into a plain object."""

from typing import Any, Dict, Optional

from .config import Config
from .logger import BridgeLogger, create_logger


class ObjectNormalizer:
    """Strips the declaration and root wrapper and collapses plural containers.

    A child such as ``{"tags": {"tag": ["a", "b"]}}`` becomes
    ``{"tags": ["a", "b"]}``. The singular form is the key with one trailing
    plural suffix removed; irregular plurals are left alone, as are
    containers holding a single item (the parser gives those as a scalar,
    not a list).
    """

    def __init__(self, config: Optional[Config] = None, logger: Optional[BridgeLogger] = None):
        self.config = config or Config()
        self.logger = logger or create_logger(level=self.config.logging.level, component="normalizer")

    def normalize(self, raw_tree: Any) -> Dict[str, Any]:
        """Return the wrapper's content, or the stripped tree when there is no wrapper.

        The input mapping is never modified.
        """
        if not isinstance(raw_tree, dict):
            self.logger.debug("Nothing to normalize", inputType=type(raw_tree).__name__)
            return {}

        tree = {key: value for key, value in raw_tree.items() if key != self.config.declaration_key}

        wrapper_key = self.find_wrapper(tree)
        if wrapper_key is None:
            self.logger.debug("No root wrapper found", topLevelKeys=list(tree.keys()))
            return tree

        # an empty root element parses to None
        result = dict(tree[wrapper_key] or {})
        for key, value in list(result.items()):
            if not isinstance(value, dict):
                continue
            singular = self.singular(key)
            if isinstance(value.get(singular), list):
                result[key] = value[singular]
                self.logger.debug("Collapsed repeated elements", field=key, itemKey=singular,
                                  items=len(value[singular]))

        return result

    def find_wrapper(self, tree: Dict[str, Any]) -> Optional[str]:
        """Key of the document's single root element, if it holds a mapping or nothing."""
        if len(tree) != 1:
            return None
        key, value = next(iter(tree.items()))
        return key if value is None or isinstance(value, dict) else None

    def singular(self, key: str) -> str:
        suffix = self.config.plural_suffix
        if key.endswith(suffix):
            return key[:-len(suffix)]
        return key
