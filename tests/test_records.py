"""Tests for row records."""

import pytest

from sheet_powertools import RowRecord, SheetRecord, SheetWrapper


class CustomerRow(SheetRecord):
    """Name and age, with a required name."""

    def __init__(self, sheet, row, **kwargs):
        super().__init__(sheet, row, **kwargs)
        self.name = self.reader.get_string(1, "Name", strip=True)
        self.age = self.reader.get_int(2, "Age", required=False)

    @property
    def is_blank(self):
        return self.reader.is_blank(1, 2)


class ScoreRow(SheetRecord):
    """Three optional columns."""

    def __init__(self, sheet, row):
        super().__init__(sheet, row)
        self.name = self.reader.get_string(1, "Name", required=False)
        self.age = self.reader.get_int(2, "Age", required=False)
        self.score = self.reader.get_int(3, "Score", required=False)

    @property
    def is_blank(self):
        return self.reader.is_blank(1, 2, 3)


@pytest.fixture
def people(workbook, worksheet):
    worksheet.append(["Name", "Age"])
    worksheet.append(["  Ann ", 31])
    worksheet.append([None, "old"])
    worksheet.append([None, None])
    return SheetWrapper(workbook, "Data", culture="en-US")


class TestSheetRecord:
    """Test the SheetRecord base class."""

    def test_valid_row(self, people):
        """Test that a good row parses without errors."""
        record = CustomerRow(people, 2)
        assert record.name == "Ann"
        assert record.age == 31
        assert record.is_valid
        assert record.errors == ()
        assert not record.is_blank

    def test_errors_carry_addresses(self, people):
        """Test that errors are tagged with their cells."""
        record = CustomerRow(people, 3)
        assert not record.is_valid
        assert record.errors == (
            "['Data'!A3] Name is required.",
            "['Data'!B3] Age has an invalid type, expected Integer.",
        )

    def test_sheet_name_can_be_left_out(self, people):
        """Test the include_sheet_name switch."""
        record = CustomerRow(people, 3, include_sheet_name=False)
        assert record.errors[0] == "[A3] Name is required."

    def test_accepts_bare_worksheet(self, worksheet, people):
        """Test construction from a plain worksheet."""
        record = CustomerRow(worksheet, 2, culture="en-US")
        assert record.name == "Ann"

    def test_writer_targets_same_row(self, people):
        """Test that the writer writes into the record's row."""
        record = CustomerRow(people, 2)
        record.writer.set_value(3, "ok")
        assert people.worksheet["C2"].value == "ok"

    def test_satisfies_protocol(self, people):
        """Test that SheetRecord subclasses are RowRecords."""
        assert isinstance(CustomerRow(people, 2), RowRecord)

    def test_is_abstract(self, people):
        """Test that is_blank must be implemented."""
        with pytest.raises(TypeError):
            SheetRecord(people, 2)

    def test_sheet_required(self):
        """Test that a missing sheet is rejected."""
        with pytest.raises(ValueError):
            CustomerRow(None, 2)

    def test_iter_records_skips_blank(self, people):
        """Test that iteration skips empty rows but keeps invalid ones."""
        rows = [record.row for record in people.iter_records(CustomerRow)]
        assert rows == [2, 3]

    def test_iter_records_keeps_rows_with_only_invalid_data(self, workbook, worksheet):
        """Test that a row whose only data fails conversion is still yielded."""
        worksheet.append(["Name", "Age", "Score"])
        worksheet.append([None, None, "abc"])
        sheet = SheetWrapper(workbook, "Data", culture="en-US")
        records = list(sheet.iter_records(ScoreRow))
        assert [record.row for record in records] == [2]
        assert records[0].errors == (
            "['Data'!C2] Score has an invalid type, expected Integer.",
        )


class TestProtocol:
    """Test the RowRecord protocol."""

    def test_plain_class_counts_as_record(self):
        """Test that any class with the four members qualifies."""

        class Manual:
            row = 1
            errors = ()
            is_valid = True
            is_blank = False

        assert isinstance(Manual(), RowRecord)
