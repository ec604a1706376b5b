"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest
from tree_sitter import Parser
from tree_sitter_language_pack import get_parser

from builders import make_field, make_record, path_type
from record_synth.models import RecordTypeDefinition

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag every test under tests/unit as "unit"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def rust_parser() -> Parser:
    """Return a tree-sitter parser for Rust."""
    return get_parser("rust")


@pytest.fixture
def point_record() -> RecordTypeDefinition:
    """``Point { x: u8, #[unprolix(default)] y: u8 }``."""
    return make_record("Point", [make_field("x"), make_field("y", "u8", "default")])


@pytest.fixture
def wrapper_record() -> RecordTypeDefinition:
    """``Wrapper { #[unprolix(skip)] secret: u8, #[unprolix(as_slice)] data: Vec<u8> }``."""
    return make_record(
        "Wrapper",
        [
            make_field("secret", "u8", "skip"),
            make_field("data", path_type("Vec", path_type("u8")), "as_slice"),
        ],
    )


@pytest.fixture
def sample_source() -> str:
    return """
#[derive(Debug, Constructor, Getters, Setters)]
pub struct Account {
    /// Account identifier.
    #[unprolix(copy)]
    id: u32,
    pub label: String,
    #[unprolix(as_slice)]
    tags: Vec<String>,
    #[unprolix(skip)]
    secret: u8,
    #[unprolix(default)]
    hits: u64,
}
"""
