"""Unit tests for the ponyurl package layout."""

import ast
import importlib
import pathlib

import pytest

import ponyurl

PACKAGE_DIR = pathlib.Path(ponyurl.__file__).parent
SOURCES = sorted(PACKAGE_DIR.glob("*.py"))


class TestSources:
    """Tests for the package source files."""

    @pytest.mark.parametrize("path", SOURCES, ids=lambda path: path.name)
    def test_source_parses(self, path):
        """Test every module is valid Python."""
        ast.parse(path.read_text(encoding="utf-8"), filename=str(path))

    @pytest.mark.parametrize("path", SOURCES, ids=lambda path: path.name)
    def test_license_header_is_closed(self, path):
        """Test the license header, when present, is a complete docstring."""
        tree = ast.parse(path.read_text(encoding="utf-8"))
        docstring = ast.get_docstring(tree, clean=False)

        if docstring is None or "MIT License" not in docstring:
            pytest.skip("no license header")

        assert docstring.rstrip().endswith("SOFTWARE.")

    @pytest.mark.parametrize(
        "name",
        ["errors", "installer", "multidict", "parser", "resolver", "settings", "types", "url", "utils"],
    )
    def test_module_imports(self, name):
        """Test each module imports on its own."""
        module = importlib.import_module(f"ponyurl.{name}")
        for exported in getattr(module, "__all__", ()):
            assert hasattr(module, exported)

    def test_package_exports(self):
        """Test the top-level names are available from the package."""
        assert ponyurl.URL("https://example.com/a?b=c").search_params.get("b") == "c"
        assert ponyurl.URLSearchParams("a=1").get("a") == "1"
