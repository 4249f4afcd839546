"""
Pytest configuration and shared fixtures for neo-jinja tests.
"""

import sys
from pathlib import Path
from typing import Any

import pytest

# Add src and tests to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from fakes import (  # noqa: E402
    FakeBaseFieldDefinition,
    FakeEntity,
    FakeFieldConfig,
    FakeFieldItem,
    FakeFieldItemList,
)

from neo_jinja.template import RenderFilters  # noqa: E402


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


# =============================================================================
# Filter Fixtures
# =============================================================================


@pytest.fixture
def filters() -> RenderFilters:
    """RenderFilters with the default configuration."""
    return RenderFilters()


@pytest.fixture
def tag_entities() -> list[FakeEntity]:
    """Two taxonomy terms."""
    return [FakeEntity(label="Python"), FakeEntity(label="Jinja")]


@pytest.fixture
def article(tag_entities: list[FakeEntity]) -> FakeEntity:
    """Article entity with body and tags fields."""
    return FakeEntity(
        label="Hello",
        fields={
            "body": FakeFieldItemList([FakeFieldItem(value="<p>Hi</p>", format="basic_html")]),
            "field_tags": FakeFieldItemList([FakeFieldItem(entity=e) for e in tag_entities]),
        },
    )


@pytest.fixture
def field_node(article: FakeEntity) -> dict[str, Any]:
    """Render node of a two-value field with children and #items."""
    return {
        "#theme": "field",
        "#title": "Tags",
        "#field_name": "field_tags",
        "#object": article,
        "#items": FakeFieldItemList(
            [FakeFieldItem(target_id=1), FakeFieldItem(target_id=2)],
            definition=FakeFieldConfig(),
        ),
        0: {"#markup": "Python", "#weight": 0},
        1: {"#markup": "Jinja", "#weight": 1},
    }


@pytest.fixture
def base_definition() -> FakeBaseFieldDefinition:
    """Base field definition without label settings."""
    return FakeBaseFieldDefinition()


# =============================================================================
# Markers Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "integration: Jinja2 integration tests")
