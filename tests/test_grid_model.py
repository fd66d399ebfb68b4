"""
Tests del modelo tabular
"""
import math

from models.grid_model import TabularModel, cell_text


class TestCellText:
    """Conversión de celdas a texto"""

    def test_missing_values_are_blank(self):
        assert cell_text(None) == ""
        assert cell_text(math.nan) == ""

    def test_integral_floats_drop_decimal_suffix(self):
        assert cell_text(10.0) == "10"
        assert cell_text(2.5) == "2.5"

    def test_booleans_and_ints(self):
        assert cell_text(True) == "TRUE"
        assert cell_text(False) == "FALSE"
        assert cell_text(7) == "7"


class TestTabularModel:
    """Tests de TabularModel"""

    def test_from_rows_converts_cells_and_computes_widths(self):
        """Construcción desde filas crudas"""
        model = TabularModel.from_rows([["Name", "Qty"], ["Gasoline-Premium", 10], ["Oil", None]])

        assert model.rows == (("Name", "Qty"), ("Gasoline-Premium", "10"), ("Oil", ""))
        assert model.widths == (16, 3)
        assert model.column_count == 2
        assert model.row_count == 3

    def test_out_of_range_reads_return_empty_string(self):
        """Lecturas fuera de rango no fallan"""
        model = TabularModel.from_rows([["a", "b"], ["c"]])

        assert model.cell(1, 1) == ""
        assert model.cell(5, 0) == ""
        assert model.cell(0, 9) == ""
        assert model.cell(-1, 0) == ""

    def test_header_and_body(self):
        """La fila 0 es el encabezado, solo a nivel de presentación"""
        model = TabularModel.from_rows([["H1"], ["v1", "v2"]])

        assert model.header == ["H1", ""]
        assert model.body == (("v1", "v2"),)

    def test_empty_model(self):
        model = TabularModel()

        assert model.is_empty
        assert model.header == []
        assert model.column_count == 0
