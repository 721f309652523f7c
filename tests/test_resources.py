"""Tests for module path classification into XLF resources."""

import pytest

from locbuild.constants import EDITOR_PROJECT, SERVER_PROJECT, WORKBENCH_PROJECT
from locbuild.diagnostics import ClassificationError
from locbuild.resources import Resource, get_resource


class TestGetResource:
    """Test get_resource() rule ordering and bucket naming."""

    @pytest.mark.parametrize(
        ("path", "name", "project"),
        [
            ("vs/platform/files/common/files", "vs/platform", EDITOR_PROJECT),
            ("vs/editor/contrib/find/browser/findWidget", "vs/editor/contrib", EDITOR_PROJECT),
            ("vs/editor/common/config/editorOptions", "vs/editor", EDITOR_PROJECT),
            ("vs/base/common/errors", "vs/base", EDITOR_PROJECT),
            ("vs/code/electron-main/app", "vs/code", WORKBENCH_PROJECT),
            ("vs/server/node/server.cli", "vs/server", SERVER_PROJECT),
            (
                "vs/workbench/contrib/terminal/browser/terminal",
                "vs/workbench/contrib/terminal",
                WORKBENCH_PROJECT,
            ),
            (
                "vs/workbench/services/files/common/files",
                "vs/workbench/services/files",
                WORKBENCH_PROJECT,
            ),
            ("vs/workbench/browser/parts/editor", "vs/workbench", WORKBENCH_PROJECT),
        ],
    )
    def test_classification(self, path: str, name: str, project: str) -> None:
        """The first matching rule names the bucket."""
        assert get_resource(path) == Resource(name, project)

    @pytest.mark.parametrize(
        ("path", "name"),
        [
            ("vs/platform/foo", "vs/platform"),
            ("vs/editor/contrib/bar", "vs/editor/contrib"),
            ("vs/workbench/contrib/terminal/x", "vs/workbench/contrib/terminal"),
        ],
    )
    def test_short_paths(self, path: str, name: str) -> None:
        """Minimal module paths land in their buckets."""
        assert get_resource(path).name == name

    def test_specific_prefix_beats_general(self) -> None:
        """vs/editor/contrib is chosen over vs/editor."""
        assert get_resource("vs/editor/contrib/x").name == "vs/editor/contrib"

    def test_unmatched_path_raises(self) -> None:
        """Paths outside every rule cannot be classified."""
        with pytest.raises(ClassificationError, match="Could not identify the XLF bundle for") as e:
            get_resource("vs/unknown/thing")
        assert e.value.path == "vs/unknown/thing"

    def test_fine_grained_bucket_of_short_path(self) -> None:
        """A fine-grained path with few segments uses what it has."""
        assert get_resource("vs/workbench/contrib").name == "vs/workbench/contrib"


class TestResource:
    """Test Resource."""

    def test_file_stem_flattens_separators(self) -> None:
        """Slashes become underscores in file names."""
        assert Resource("vs/workbench/contrib/terminal", WORKBENCH_PROJECT).file_stem == (
            "vs_workbench_contrib_terminal"
        )

    def test_hashable(self) -> None:
        """Resources group modules as dictionary keys."""
        assert len({get_resource("vs/base/a"), get_resource("vs/base/b")}) == 1
