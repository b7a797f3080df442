"""Tests for the table model."""

import pytest

from tabprint import Table
from tabprint.exceptions import (
    ColumnIndexError,
    RowArityError,
    RowIndexError,
    TableIndexError,
)
from tabprint.models import Separators


class TestConstruction:
    """Tests for Table construction."""

    def test_column_count_from_titles(self) -> None:
        """Column count equals the number of titles."""
        tab = Table(["a", "b", "c"])
        assert tab.column_count == 3
        assert tab.titles == ("a", "b", "c")
        assert len(tab) == 0

    def test_titles_converted_to_strings(self) -> None:
        """Non-string titles are converted with str()."""
        tab = Table([1, 2.5, None])
        assert tab.titles == ("1", "2.5", "None")

    def test_empty_titles_rejected(self) -> None:
        """A table needs at least one column."""
        with pytest.raises(ValueError, match="at least one column"):
            Table([])

    def test_default_separators(self) -> None:
        """Default separators are |, - and +."""
        tab = Table(["a"])
        assert tab.separators == Separators("|", "-", "+")

    def test_repr(self, people: Table) -> None:
        """repr summarises titles and row count."""
        assert repr(people) == "Table(titles=['Name', 'Age'], rows=2)"


class TestAddRow:
    """Tests for add_row and add_empty_row."""

    def test_add_row_returns_index(self) -> None:
        """add_row returns the index of the inserted row."""
        tab = Table(["a", "b"])
        assert tab.add_row(["1", "2"]) == 0
        assert tab.add_row(["3", "4"]) == 1
        assert tab.get_row(1) == ("3", "4")

    def test_add_row_converts_values(self) -> None:
        """Row values are converted with str()."""
        tab = Table(["a", "b"])
        idx = tab.add_row([1, True])
        assert tab.get_row(idx) == ("1", "True")

    def test_add_row_accepts_iterables(self) -> None:
        """Any iterable of the right length is accepted."""
        tab = Table(["a", "b"])
        idx = tab.add_row(x * 2 for x in (1, 2))
        assert tab.get_row(idx) == ("2", "4")

    @pytest.mark.parametrize("row", [[], ["only"], ["1", "2", "3"]])
    def test_add_row_wrong_arity(self, people: Table, row: list[str]) -> None:
        """Wrong arity raises RowArityError and leaves the table unchanged."""
        before = list(people)
        with pytest.raises(RowArityError) as exc_info:
            people.add_row(row)

        assert exc_info.value.expected == 2
        assert exc_info.value.actual == len(row)
        assert len(people) == 2
        assert list(people) == before

    def test_add_empty_row(self) -> None:
        """add_empty_row appends a row of empty strings."""
        tab = Table(["a", "b", "c"])
        idx = tab.add_empty_row()
        assert idx == 0
        assert tab.get_row(0) == ("", "", "")

    def test_rows_do_not_alias_input(self) -> None:
        """Mutating the list passed to add_row does not affect the table."""
        tab = Table(["a"])
        row = ["x"]
        tab.add_row(row)
        row[0] = "y"
        assert tab.get_row(0) == ("x",)


class TestSetElement:
    """Tests for set_element."""

    def test_set_element(self, people: Table) -> None:
        """set_element overwrites exactly one cell."""
        people.set_element(31, column=1, row=0)
        assert people.get_row(0) == ("Alice", "31")
        assert people.get_row(1) == ("Bob", "7")

    def test_column_out_of_range(self, people: Table) -> None:
        """Column index equal to column_count is rejected."""
        with pytest.raises(ColumnIndexError) as exc_info:
            people.set_element("x", column=2, row=0)
        assert exc_info.value.index == 2
        assert exc_info.value.column_count == 2
        assert people.get_row(0) == ("Alice", "30")

    def test_row_equal_to_row_count_rejected(self, people: Table) -> None:
        """Row index equal to the row count is out of bounds."""
        with pytest.raises(RowIndexError) as exc_info:
            people.set_element("x", column=0, row=2)
        assert exc_info.value.index == 2
        assert exc_info.value.row_count == 2
        assert list(people) == [("Alice", "30"), ("Bob", "7")]

    def test_negative_indices_rejected(self, people: Table) -> None:
        """Negative indices are not interpreted from the end."""
        with pytest.raises(ColumnIndexError):
            people.set_element("x", column=-1, row=0)
        with pytest.raises(RowIndexError):
            people.set_element("x", column=0, row=-1)

    def test_column_checked_before_row(self, people: Table) -> None:
        """When both indices are invalid the column error wins."""
        with pytest.raises(ColumnIndexError):
            people.set_element("x", column=5, row=5)

    def test_set_element_on_empty_table(self) -> None:
        """Row 0 does not exist in an empty table."""
        tab = Table(["a"])
        with pytest.raises(RowIndexError):
            tab.set_element("x", column=0, row=0)

    def test_index_errors_are_index_errors(self, people: Table) -> None:
        """Index errors can be caught as the builtin IndexError."""
        with pytest.raises(IndexError):
            people.set_element("x", column=0, row=10)
        assert issubclass(ColumnIndexError, TableIndexError)


class TestRowAccess:
    """Tests for get_row, set_row, edit_row and iteration."""

    def test_get_row_out_of_range(self, people: Table) -> None:
        """get_row reports RowIndexError instead of failing on indexing."""
        with pytest.raises(RowIndexError):
            people.get_row(2)

    def test_get_row_is_snapshot(self, people: Table) -> None:
        """get_row returns an immutable tuple."""
        row = people.get_row(0)
        assert isinstance(row, tuple)

    def test_set_row(self, people: Table) -> None:
        """set_row replaces a whole row."""
        people.set_row(1, ["Carol", 44])
        assert people.get_row(1) == ("Carol", "44")

    def test_set_row_wrong_arity(self, people: Table) -> None:
        """set_row enforces the arity invariant."""
        with pytest.raises(RowArityError):
            people.set_row(1, ["Carol"])
        assert people.get_row(1) == ("Bob", "7")

    def test_edit_row_writes_back(self, people: Table) -> None:
        """Changes made inside edit_row are stored on exit."""
        with people.edit_row(1) as cells:
            cells[0] = "Robert"
        assert people.get_row(1) == ("Robert", "7")

    def test_edit_row_discards_on_error(self, people: Table) -> None:
        """An exception inside edit_row leaves the row untouched."""
        with pytest.raises(RuntimeError):
            with people.edit_row(0) as cells:
                cells[0] = "changed"
                raise RuntimeError("boom")
        assert people.get_row(0) == ("Alice", "30")

    def test_edit_row_rejects_arity_change(self, people: Table) -> None:
        """Appending a cell inside edit_row is rejected on write-back."""
        with pytest.raises(RowArityError):
            with people.edit_row(0) as cells:
                cells.append("extra")
        assert people.get_row(0) == ("Alice", "30")

    def test_edit_row_out_of_range(self, people: Table) -> None:
        """edit_row validates the index on entry."""
        with pytest.raises(RowIndexError):
            with people.edit_row(5):
                pass

    def test_iteration_order(self, people: Table) -> None:
        """Iteration yields rows in insertion order."""
        assert list(people) == [("Alice", "30"), ("Bob", "7")]

    def test_iter_lines_includes_titles(self, people: Table) -> None:
        """iter_lines yields titles first."""
        assert list(people.iter_lines()) == [
            ("Name", "Age"),
            ("Alice", "30"),
            ("Bob", "7"),
        ]


class TestRemoveRow:
    """Tests for remove_row."""

    def test_remove_shifts_indices(self) -> None:
        """Removing a row shifts later rows down."""
        tab = Table(["n"])
        for i in range(3):
            tab.add_row([i])
        tab.remove_row(0)
        assert list(tab) == [("1",), ("2",)]
        assert tab.get_row(0) == ("1",)

    @pytest.mark.parametrize("index", [2, 100, -1])
    def test_remove_out_of_range_is_noop(self, people: Table, index: int) -> None:
        """Out-of-range removal silently does nothing."""
        people.remove_row(index)
        assert list(people) == [("Alice", "30"), ("Bob", "7")]


class TestSeparatorsAndCopy:
    """Tests for set_separators and copy."""

    def test_set_separators(self, people: Table) -> None:
        """set_separators replaces all three characters."""
        people.set_separators(":", "=", "#")
        assert people.separators == Separators(column=":", rule="=", corner="#")

    def test_set_separators_allows_duplicates(self, people: Table) -> None:
        """Separator characters need not be distinct."""
        people.set_separators("*", "*", "*")
        assert people.separators.column == people.separators.corner == "*"

    def test_set_separators_rejects_strings(self, people: Table) -> None:
        """Each separator must be a single character."""
        with pytest.raises(ValueError, match="single character"):
            people.set_separators("||", "-", "+")
        assert people.separators == Separators()

    def test_copy_is_independent(self, people: Table) -> None:
        """A copy does not share rows with the original."""
        clone = people.copy()
        clone.set_element("Zed", column=0, row=0)
        clone.add_empty_row()
        assert people.get_row(0) == ("Alice", "30")
        assert len(people) == 2
        assert len(clone) == 3
