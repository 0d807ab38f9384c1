"""Shared pytest fixtures for mockrender tests."""

import os
from unittest.mock import patch

import pytest
from hypothesis import settings

from mockrender.core.config import MockRenderConfig
from mockrender.core.models import Context, MockableTypeKind

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile("dev")


@pytest.fixture
def config() -> MockRenderConfig:
    """Provide default settings unaffected by the environment."""
    with patch.dict(os.environ, {}, clear=True):
        return MockRenderConfig(_env_file=None)


@pytest.fixture
def class_context() -> Context:
    """Provide the context of a mocked class `Bird`."""
    return Context(
        mockable_type_name="Bird",
        mockable_type_kind=MockableTypeKind.CLASS,
        scoped_mock_type_name="BirdMock",
        abstract_mock_protocol_name="Mockingbird.Mock",
    )


@pytest.fixture
def protocol_context() -> Context:
    """Provide the context of a mocked pure protocol `Flyable`."""
    return Context(
        mockable_type_name="Flyable",
        mockable_type_kind=MockableTypeKind.PROTOCOL,
        scoped_mock_type_name="FlyableMock",
        abstract_mock_protocol_name="Mockingbird.Mock",
    )
