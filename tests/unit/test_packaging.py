"""
Unit tests for project metadata in pyproject.toml.
"""

from pathlib import Path

import pytest

import nostromo_toolkit

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


@pytest.fixture
def project_table():
    with PYPROJECT.open("rb") as f:
        return tomllib.load(f)["project"]


def test_version_matches_package(project_table):
    assert project_table["version"] == nostromo_toolkit.__version__


def test_no_design_notes_as_long_description(project_table):
    assert project_table.get("readme") != "DESIGN.md"


def test_runtime_dependencies(project_table):
    assert project_table["dependencies"] == ["python-dotenv>=1.0"]
