from ai_review.diff.grouping import group_hunks
from ai_review.models import FileDiff

from conftest import make_file


def sizes(units):
    return [len(u.changes) for u in units]


class TestWholeFile:
    def test_two_hunks_single_unit(self):
        file = make_file(5, 4)
        units = group_hunks(file)
        assert len(units) == 1
        assert sizes(units) == [9]

    def test_three_hunks_ignore_ceiling(self):
        file = make_file(80, 90, 1)
        units = group_hunks(file)
        assert len(units) == 1
        assert units[0].changes == tuple(c for h in file.hunks for c in h.changes)

    def test_content_joins_headers(self):
        file = make_file(2, 2)
        units = group_hunks(file)
        assert units[0].content == "\n".join(h.header for h in file.hunks)

    def test_no_hunks(self):
        assert group_hunks(FileDiff(path="bin.png")) == []


class TestSlidingGroups:
    def test_mixed_sizes(self):
        units = group_hunks(make_file(1, 40, 120, 10, 10))
        assert sizes(units) == [40, 120, 20]

    def test_small_hunks_skipped(self):
        file = make_file(2, 1, 2, 0)
        assert group_hunks(file) == []

    def test_small_hunk_never_included(self):
        file = make_file(5, 1, 5, 2, 6)
        units = group_hunks(file)
        small = {c for h in file.hunks if len(h.changes) < 3 for c in h.changes}
        for unit in units:
            assert not small & set(unit.changes)
        assert sizes(units) == [5, 5, 6]

    def test_merge_pairs(self):
        units = group_hunks(make_file(10, 20, 30, 40))
        assert sizes(units) == [30, 70]

    def test_merge_is_adjacent_only(self):
        file = make_file(10, 95, 10, 10)
        units = group_hunks(file)
        assert sizes(units) == [10, 95, 20]
        assert units[0].changes == file.hunks[0].changes

    def test_exact_ceiling_merges(self):
        assert sizes(group_hunks(make_file(50, 50, 3, 3))) == [100, 6]

    def test_oversized_passed_through(self):
        units = group_hunks(make_file(3, 250, 3, 3))
        assert sizes(units) == [3, 250, 6]

    def test_last_hunk_alone(self):
        assert sizes(group_hunks(make_file(10, 10, 10, 10, 10))) == [20, 20, 10]

    def test_ceiling_respected(self):
        file = make_file(30, 80, 60, 45, 55, 101, 4)
        for unit in group_hunks(file):
            assert len(unit.changes) <= 100 or unit.changes in [h.changes for h in file.hunks]

    def test_custom_limits(self):
        units = group_hunks(make_file(5, 5, 5, 5), max_changes=8, min_changes=1, whole_file_max_hunks=1)
        assert sizes(units) == [5, 5, 5, 5]
