"""Configuration management for xsdbridge."""

from dataclasses import dataclass, field
from typing import List

from .logger import LogLevel


class ConfigurationError(ValueError):
    """Raised when a Config fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Invalid configuration: " + "; ".join(self.errors))


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: LogLevel = LogLevel.INFO


@dataclass
class Config:
    """Main configuration for both conversion pipelines."""

    # Schema -> XSD
    root_name: str = "Root"
    max_recursion_depth: int = 50

    # XML -> object
    declaration_key: str = "?xml"
    plural_suffix: str = "s"

    # System Configuration
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> List[str]:
        """Validate configuration and return any errors."""
        errors = []

        if not self.root_name:
            errors.append("root_name must not be empty")

        if self.max_recursion_depth < 1:
            errors.append("max_recursion_depth must be at least 1")

        if not self.declaration_key:
            errors.append("declaration_key must not be empty")

        if not self.plural_suffix:
            errors.append("plural_suffix must not be empty")

        return errors

    @classmethod
    def from_kwargs(cls, **kwargs) -> "Config":
        """Create config from keyword arguments, skipping unset values."""
        config = cls()

        for key, value in kwargs.items():
            if key != "logging" and hasattr(config, key) and value is not None:
                setattr(config, key, value)

        if kwargs.get("log_level") is not None:
            config.logging.level = LogLevel(kwargs["log_level"])

        return config
