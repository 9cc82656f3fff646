"""Shared fixtures: in-memory workbooks and an isolated settings source."""

import pytest
from openpyxl import Workbook

from sheet_powertools.config import FakeConfigRepository, set_repository


@pytest.fixture(autouse=True)
def _isolated_settings():
    """Keep the process environment out of every test."""
    set_repository(FakeConfigRepository())
    yield
    set_repository(None)


@pytest.fixture
def workbook():
    wb = Workbook()
    wb.active.title = "Data"
    return wb


@pytest.fixture
def worksheet(workbook):
    return workbook["Data"]


@pytest.fixture
def fill_row(worksheet):
    """Write ``values`` into ``row`` starting at column A and return the sheet."""

    def _fill(values, row=1):
        for column, value in enumerate(values, start=1):
            worksheet.cell(row=row, column=column, value=value)
        return worksheet

    return _fill
