"""
Tests de exportación a Excel
"""
from datetime import date

from openpyxl import load_workbook

from app.models import RECORD_FIELDS
from app.services.spreadsheet import SHEET_NAME, build_workbook, export_filename, write_snapshot
from tests.conftest import make_record


class TestBuildWorkbook:

    def test_single_sheet_with_canonical_columns(self):
        libro = load_workbook(build_workbook([make_record(id=1), make_record(id=2, city="Казань")]))

        assert libro.sheetnames == [SHEET_NAME]
        hoja = libro[SHEET_NAME]
        encabezados = [celda.value for celda in hoja[1]]
        assert encabezados == ["id"] + RECORD_FIELDS
        assert hoja.max_row == 3
        assert hoja.cell(row=3, column=2).value == "Казань"

    def test_visa_status_written_as_code(self):
        hoja = load_workbook(build_workbook([make_record(id=1)]))[SHEET_NAME]
        columna = ["id"] + RECORD_FIELDS
        assert hoja.cell(row=2, column=columna.index("visa_status") + 1).value == "1"

    def test_empty_store_still_has_header(self):
        hoja = load_workbook(build_workbook([]))[SHEET_NAME]
        assert hoja.max_row == 1

    def test_write_snapshot_creates_parent_dirs(self, tmp_path):
        destino = write_snapshot([make_record(id=1)], str(tmp_path / "a" / "b" / "snap.xlsx"))
        assert destino.exists()


class TestExportFilename:

    def test_embeds_date(self):
        assert export_filename(None, date(2024, 5, 9)) == "visa_statistics_2024-05-09.xlsx"

    def test_embeds_country(self):
        assert export_filename("Italy", date(2024, 5, 9)) == "visa_statistics_Italy_2024-05-09.xlsx"
