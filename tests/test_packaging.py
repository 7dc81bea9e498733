"""
Tests for the distribution metadata.
"""

from pathlib import Path
import tomllib

import stripekit

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class TestPyproject:

    def test_readme_is_the_project_readme(self):
        with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
            project = tomllib.load(f)["project"]

        assert project["readme"] == "README.md"
        assert (PROJECT_ROOT / project["readme"]).is_file()

    def test_version_matches_package(self):
        with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
            project = tomllib.load(f)["project"]

        assert project["version"] == stripekit.__version__
