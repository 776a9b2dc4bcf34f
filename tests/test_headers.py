"""Tests for header comparison."""

from columndiff.headers import (
    HeaderCompareOptions,
    create_header_position_mapping,
    find_added_header_indices,
    find_deleted_header_indices,
    find_header_index,
    header_exists,
    headers_equal,
    normalize_header,
)


class TestNormalizeHeader:
    """Test header normalization."""

    def test_trims_and_collapses_whitespace(self):
        assert normalize_header("  Unit   Price \t ") == "Unit Price"

    def test_keeps_case_by_default(self):
        assert normalize_header("Name") == "Name"

    def test_ignore_case(self):
        assert normalize_header(" NAME ", {"ignore_case": True}) == "name"

    def test_whitespace_toggles(self):
        options = HeaderCompareOptions(trim_whitespace=False, normalize_whitespace=False)
        assert normalize_header("  a   b ", options) == "  a   b "

    def test_camel_case_option_keys(self):
        assert normalize_header("ABC", {"ignoreCase": True}) == "abc"


class TestHeaderLookup:
    """Test equality and lookup helpers."""

    def test_headers_equal_after_normalization(self):
        assert headers_equal("Unit  Price", " Unit Price") is True

    def test_headers_differ_by_case(self):
        assert headers_equal("Name", "name") is False
        assert headers_equal("Name", "name", {"ignore_case": True}) is True

    def test_find_header_index_first_match(self):
        assert find_header_index(["A", "B", "B"], "B") == 1

    def test_find_header_index_missing(self):
        assert find_header_index(["A", "B"], "Z") == -1

    def test_header_exists(self):
        assert header_exists(["A", "B"], " B ") is True
        assert header_exists([], "A") is False


class TestDeletedAndAdded:
    """Test set differences between header rows."""

    def test_deleted_middle_column(self):
        assert find_deleted_header_indices(["A", "B", "C", "D"], ["A", "C", "D"]) == [1]

    def test_added_trailing_column(self):
        assert find_added_header_indices(["A", "B"], ["A", "B", "C"]) == [2]

    def test_added_leading_column(self):
        assert find_added_header_indices(["A", "B"], ["X", "A", "B"]) == [0]

    def test_nothing_changed(self):
        assert find_deleted_header_indices(["A", "B"], ["A", "B"]) == []
        assert find_added_header_indices(["A", "B"], ["A", "B"]) == []

    def test_rename_is_delete_plus_add(self):
        assert find_deleted_header_indices(["A", "B"], ["A", "Z"]) == [1]
        assert find_added_header_indices(["A", "B"], ["A", "Z"]) == [1]

    def test_duplicate_headers_pair_in_order(self):
        """A removed duplicate is the one left unclaimed."""
        assert find_deleted_header_indices(["A", "A", "B"], ["A", "B"]) == [1]
        assert find_added_header_indices(["A", "B"], ["A", "A", "B"]) == [1]

    def test_surplus_duplicate_is_added(self):
        """Each old header accounts for one new copy of its label."""
        assert find_added_header_indices(["A"], ["A", "A"]) == [1]
        assert find_added_header_indices(["A", "A"], ["A", "A"]) == []

    def test_case_insensitive(self):
        options = {"ignore_case": True}
        assert find_deleted_header_indices(["Name", "Age"], ["name"], options) == [1]


class TestCreateHeaderPositionMapping:
    """Test old-to-new index mapping."""

    def test_mapping_with_deletion(self):
        assert create_header_position_mapping(["A", "B", "C"], ["A", "C"]) == [0, -1, 1]

    def test_mapping_with_insertion(self):
        assert create_header_position_mapping(["A", "B", "C"], ["A", "B", "X", "C"]) == [0, 1, 3]

    def test_duplicates_claimed_left_to_right(self):
        assert create_header_position_mapping(["A", "A"], ["B", "A", "A"]) == [1, 2]

    def test_more_old_duplicates_than_new(self):
        assert create_header_position_mapping(["A", "A", "A"], ["A"]) == [0, -1, -1]

    def test_mapping_length_matches_old_headers(self):
        mapping = create_header_position_mapping(["A", "B", "C", "D"], [])
        assert mapping == [-1, -1, -1, -1]

    def test_deleted_matches_unmapped(self):
        old = ["Id", "Name", "Name", "Qty", "Price"]
        new = ["Id", "Name", "Price", "Total"]
        mapping = create_header_position_mapping(old, new)
        deleted = find_deleted_header_indices(old, new)
        assert deleted == [i for i, target in enumerate(mapping) if target == -1]
        assert all(target == -1 or 0 <= target < len(new) for target in mapping)
