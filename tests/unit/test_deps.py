"""Unit tests for rebuild input collection."""

import pytest

from apkpack.packaging.deps import AAPT_IGNORE_FILENAMES, IgnoreMatcher, collect_deps
from tests.conftest import write_file


class TestIgnoreMatcher:
    """Tests for aapt ignore patterns."""

    @pytest.mark.parametrize(
        "name",
        [".svn", ".git", ".DS_Store", "layout.scc", ".hidden", "CVS", "Thumbs.db", "picasa.ini", "strings.xml~"],
    )
    def test_ignored_names(self, name):
        assert IgnoreMatcher(AAPT_IGNORE_FILENAMES).matches(name)

    @pytest.mark.parametrize("name", ["strings.xml", "icon.png", "cvs.txt", "scc", "data~.txt"])
    def test_kept_names(self, name):
        assert not IgnoreMatcher(AAPT_IGNORE_FILENAMES).matches(name)

    def test_custom_patterns(self):
        matcher = IgnoreMatcher(["tmp*", "*.bak", "exact"])
        assert matcher.matches("tmpfile")
        assert matcher.matches("x.bak")
        assert matcher.matches("exact")
        assert not matcher.matches("exactly")


class TestCollectDeps:
    """Tests for collect_deps."""

    def test_ignored_files_and_trees_are_skipped(self, temp_dir):
        res = temp_dir / "res"
        keep = write_file(res / "values/strings.xml")
        write_file(res / ".DS_Store")
        write_file(res / "Thumbs.db")
        write_file(res / "values/layout.scc")
        write_file(res / "values/strings.xml~")
        write_file(res / ".git/config")
        write_file(res / "CVS/Entries")

        files, found = collect_deps([res])

        assert files == [keep]
        assert found

    def test_empty_directory(self, temp_dir):
        (temp_dir / "res").mkdir()
        write_file(temp_dir / "res/.gitkeep")

        files, found = collect_deps([temp_dir / "res"])

        assert files == []
        assert not found

    def test_directory_order_and_stable_file_order(self, temp_dir):
        first = temp_dir / "overlay"
        second = temp_dir / "res"
        write_file(second / "values/b.xml")
        write_file(second / "values/a.xml")
        write_file(second / "drawable/icon.png")
        write_file(first / "values/a.xml")

        files, _ = collect_deps([first, second])

        assert files == [
            first / "values/a.xml",
            second / "drawable/icon.png",
            second / "values/a.xml",
            second / "values/b.xml",
        ]
        assert collect_deps([first, second])[0] == files

    def test_symlinked_subdirectory_is_followed(self, temp_dir):
        shared = write_file(temp_dir / "shared/values/strings.xml")
        res = temp_dir / "res"
        res.mkdir()
        (res / "values").symlink_to(shared.parent, target_is_directory=True)

        files, found = collect_deps([res])

        assert files == [res / "values/strings.xml"]
        assert found

    def test_symlink_loop_is_walked_once(self, temp_dir):
        res = temp_dir / "res"
        keep = write_file(res / "values/strings.xml")
        (res / "values/loop").symlink_to(res, target_is_directory=True)

        files, found = collect_deps([res])

        assert files == [keep]
        assert found

    def test_only_ignored_trees_means_no_resources(self, temp_dir):
        res = temp_dir / "res"
        write_file(res / ".svn/values/strings.xml")
        write_file(res / "CVS/drawable/icon.png")

        files, found = collect_deps([res])

        assert files == []
        assert not found
