"""Tests for ErrorCollector and the user-facing exceptions."""

from sheet_powertools import (
    ErrorCollector,
    HeaderMismatchError,
    NamedRangeNotFoundError,
    SheetNotFoundError,
    UserFacingError,
)


class TestErrorCollector:
    """Test ErrorCollector formatting and ordering."""

    def test_starts_valid(self):
        """Test that a new collector is empty and valid."""
        errors = ErrorCollector()
        assert errors.is_valid
        assert errors.errors == ()
        assert len(errors) == 0

    def test_cell_address_with_sheet_name(self, worksheet):
        """Test the quoted sheet prefix."""
        errors = ErrorCollector()
        errors.add("Bad value", worksheet["C4"])
        assert errors.errors == ("['Data'!C4] Bad value",)
        assert not errors.is_valid

    def test_cell_address_without_sheet_name(self, worksheet):
        """Test the bare cell address."""
        errors = ErrorCollector()
        errors.add("Bad value", worksheet["C4"], include_sheet_name=False)
        assert errors.errors == ("[C4] Bad value",)

    def test_quotes_in_sheet_title_are_doubled(self, workbook):
        """Test that quotes in sheet titles are escaped."""
        sheet = workbook.create_sheet("Bob's list")
        errors = ErrorCollector()
        errors.add("x", sheet["A1"])
        assert errors.errors == ("['Bob''s list'!A1] x",)

    def test_message_without_cell(self):
        """Test that a message without a cell is kept as-is."""
        errors = ErrorCollector()
        errors.add("Something went wrong")
        assert list(errors) == ["Something went wrong"]

    def test_insertion_order_and_no_dedup(self, worksheet):
        """Test insertion order and duplicates."""
        errors = ErrorCollector()
        errors.add("second", worksheet["B1"])
        errors.add("first", worksheet["A1"])
        errors.add("second", worksheet["B1"])
        assert errors.errors == (
            "['Data'!B1] second",
            "['Data'!A1] first",
            "['Data'!B1] second",
        )

    def test_extend(self):
        """Test merging two collectors."""
        one, two = ErrorCollector(), ErrorCollector()
        one.add("a")
        two.add("b")
        one.extend(two)
        assert one.errors == ("a", "b")

    def test_errors_is_a_snapshot(self):
        """Test that errors returns a copy."""
        errors = ErrorCollector()
        snapshot = errors.errors
        errors.add("later")
        assert snapshot == ()


class TestExceptions:
    """Test the user-facing exception hierarchy."""

    def test_user_facing_message(self):
        """Test that message and str() agree."""
        error = UserFacingError("Please fix the file.")
        assert error.message == "Please fix the file."
        assert str(error) == "Please fix the file."

    def test_subclasses_carry_context(self):
        """Test the context attributes of each subclass."""
        assert SheetNotFoundError("missing", "Data").sheet == "Data"
        assert HeaderMismatchError("bad", "Data", ["Age (B1)"]).missing == ["Age (B1)"]
        assert NamedRangeNotFoundError("nope", "Choices").name == "Choices"
        assert issubclass(HeaderMismatchError, UserFacingError)
