"""Tests for source file discovery."""

from pathlib import Path

import pytest

from code_documenter.discovery import discover_files


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Create a mixed source tree."""
    (tmp_path / "src" / "components").mkdir(parents=True)
    (tmp_path / "node_modules" / "dep").mkdir(parents=True)
    (tmp_path / "index.js").write_text("")
    (tmp_path / "src" / "app.js").write_text("")
    (tmp_path / "src" / "components" / "button.js").write_text("")
    (tmp_path / "src" / "styles.css").write_text("")
    (tmp_path / "node_modules" / "dep" / "lib.js").write_text("")
    (tmp_path / "weird.js").mkdir()
    return tmp_path


class TestDiscoverFiles:
    """Tests for discover_files."""

    def test_recursive_match(self, tree: Path) -> None:
        files = discover_files(tree)
        relative = {f.relative_to(tree).as_posix() for f in files}
        assert relative == {
            "index.js",
            "src/app.js",
            "src/components/button.js",
            "node_modules/dep/lib.js",
        }

    def test_directories_excluded(self, tree: Path) -> None:
        files = discover_files(tree)
        assert tree / "weird.js" not in files
        assert all(f.is_file() for f in files)

    def test_paths_joined_onto_folder(self, tree: Path) -> None:
        files = discover_files(str(tree))
        assert all(str(f).startswith(str(tree)) for f in files)

    def test_sorted(self, tree: Path) -> None:
        files = discover_files(tree)
        assert files == sorted(files)

    def test_exclude_patterns(self, tree: Path) -> None:
        files = discover_files(tree, exclude_patterns=["node_modules"])
        assert not any("node_modules" in f.parts for f in files)
        assert len(files) == 3

    def test_custom_pattern(self, tree: Path) -> None:
        files = discover_files(tree, pattern="**/*.css")
        assert files == [tree / "src" / "styles.css"]

    def test_empty_result(self, tmp_path: Path) -> None:
        (tmp_path / "readme.txt").write_text("")
        assert discover_files(tmp_path) == []
