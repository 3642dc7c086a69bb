"""
Tests for DuplicateService: selection and post-deletion bookkeeping on groups.
"""
import pytest

from dupsweep.core.models import DuplicateGroup, File
from dupsweep.services import DuplicateService


@pytest.fixture
def groups():
    return [
        DuplicateGroup(group_key="h1", size=100, files=[
            File(path="/a/1.txt", size=100),
            File(path="/a/2.txt", size=100),
            File(path="/a/3.txt", size=100),
        ]),
        DuplicateGroup(group_key="h2", size=50, files=[
            File(path="/b/1.jpg", size=50),
            File(path="/b/2.jpg", size=50),
        ]),
    ]


class TestDuplicateService:

    def test_select_all_but_one_keeps_first(self, groups):
        assert DuplicateService.select_all_but_one(groups) == ["/a/2.txt", "/a/3.txt", "/b/2.jpg"]

    def test_remove_files_drops_small_groups(self, groups):
        updated = DuplicateService.remove_files_from_groups(groups, ["/a/3.txt", "/b/1.jpg"])

        assert len(updated) == 1
        assert updated[0].group_key == "h1"
        assert updated[0].paths == ["/a/1.txt", "/a/2.txt"]

    def test_remove_files_leaves_input_untouched(self, groups):
        DuplicateService.remove_files_from_groups(groups, ["/a/1.txt"])
        assert len(groups[0].files) == 3

    def test_remove_unknown_paths_is_noop(self, groups):
        updated = DuplicateService.remove_files_from_groups(groups, ["/elsewhere"])
        assert [g.paths for g in updated] == [g.paths for g in groups]

    def test_summarize(self, groups):
        assert DuplicateService.summarize(groups) == {
            "groups": 2,
            "files": 5,
            "reclaimable_bytes": 100 * 2 + 50,
        }

    def test_summarize_empty(self):
        assert DuplicateService.summarize([]) == {"groups": 0, "files": 0, "reclaimable_bytes": 0}
