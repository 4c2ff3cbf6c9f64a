"""Shared fixtures for generator tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from jaxrs_scaffold.config import GeneratorConfig
from jaxrs_scaffold.loader import load_spec

FIXTURES = Path(__file__).parent / "fixtures"
PETSTORE_PATH = FIXTURES / "petstore.yaml"


@pytest.fixture
def petstore():
    """A freshly loaded petstore Specification (mutable per test)."""
    return load_spec(PETSTORE_PATH)


@pytest.fixture
def config(tmp_path):
    """Config writing under the test's temporary directory."""
    return GeneratorConfig(output_folder=str(tmp_path))
