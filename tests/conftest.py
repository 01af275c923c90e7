"""Pytest configuration and fixtures for xsdbridge tests."""

from typing import List, Optional

import pytest
from pydantic import BaseModel, Field

from xsdbridge.config import Config
from xsdbridge.logger import LogLevel


@pytest.fixture
def default_config() -> Config:
    """Default configuration for testing."""
    config = Config()
    config.logging.level = LogLevel.ERROR  # Suppress logs in tests
    return config


class User(BaseModel):
    name: str = Field(description="User's name")
    age: float = Field(description="User's age")


class Tagged(BaseModel):
    tags: List[str] = Field(description="List of tags")


class Address(BaseModel):
    """Postal address"""
    street: str
    zip_code: Optional[int] = None


class Customer(BaseModel):
    name: str
    active: bool
    visits: int
    address: Address
    previous: List[Address] = Field(default_factory=list, min_length=1, max_length=3)


class TreeNode(BaseModel):
    label: str
    children: List["TreeNode"] = Field(default_factory=list)


@pytest.fixture
def user_model():
    return User


@pytest.fixture
def tagged_model():
    return Tagged


@pytest.fixture
def customer_model():
    return Customer


@pytest.fixture
def tree_model():
    return TreeNode


@pytest.fixture
def simple_xml() -> str:
    return """
      <?xml version="1.0" encoding="UTF-8"?>
      <User>
        <name>John Doe</name>
        <age>30</age>
      </User>
    """


@pytest.fixture
def tags_xml() -> str:
    return """
      <?xml version="1.0" encoding="UTF-8"?>
      <Root>
        <tags>
          <tag>typescript</tag>
          <tag>xml</tag>
          <tag>zod</tag>
        </tags>
      </Root>
    """
