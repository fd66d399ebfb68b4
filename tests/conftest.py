"""
Fixtures compartidas: logging silenciado y libros Excel de ejemplo.
"""
import logging

import pytest
from openpyxl import Workbook


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """En los tests solo se muestran errores"""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setLevel(logging.ERROR)
    handler.setFormatter(logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)s - %(message)s'))
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.ERROR)
    yield


@pytest.fixture
def make_workbook(tmp_path):
    """Crea un .xlsx con las filas dadas en la primera hoja y devuelve su ruta"""
    def _make(rows, name="datos.xlsx", extra_sheet_rows=None):
        wb = Workbook()
        ws = wb.active
        ws.title = "Hoja1"
        for row in rows:
            ws.append(list(row))
        if extra_sheet_rows is not None:
            other = wb.create_sheet("Hoja2")
            for row in extra_sheet_rows:
                other.append(list(row))
        path = tmp_path / name
        wb.save(path)
        return str(path)
    return _make


@pytest.fixture
def fuel_rows():
    return [
        ["Name", "Qty"],
        ["Gasoline-Premium", 10],
        ["Oil", 2],
    ]
