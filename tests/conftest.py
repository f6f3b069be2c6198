"""Shared test fixtures."""

import pytest

from importmap_manifest.manifest import ImportMapStore


@pytest.fixture
def manifest_file(tmp_path):
    """Manifest path inside a temporary project directory."""
    return tmp_path / "importmap.yaml"


@pytest.fixture
def store(manifest_file):
    return ImportMapStore(manifest_file)
