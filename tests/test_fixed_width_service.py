"""
Tests del cálculo de anchos y del formato de ancho fijo
"""
import pytest

from services.fixed_width_service import FixedWidthService


class TestComputeWidths:
    """Tests de FixedWidthService.compute_widths"""

    def test_widths_match_longest_cell_per_column(self):
        """Ancho = largo máximo de la columna"""
        grid = [["Name", "Qty"], ["Gasoline-Premium", "10"], ["Oil", "2"]]

        assert FixedWidthService.compute_widths(grid) == [16, 3]

    def test_empty_grid_has_no_columns(self):
        """Grilla vacía no tiene columnas"""
        assert FixedWidthService.compute_widths([]) == []

    def test_missing_and_none_cells_count_as_empty(self):
        """None no se cuenta como 'None'"""
        grid = [["a", None, "ccc"], [None]]

        assert FixedWidthService.compute_widths(grid) == [1, 0, 3]

    def test_non_string_values_use_text_length(self):
        """Números se miden por su texto"""
        grid = [[12345, 1.5, 10.0, True]]

        assert FixedWidthService.compute_widths(grid) == [5, 3, 2, 4]

    def test_ragged_rows_only_contribute_reached_columns(self):
        """Filas cortas no aportan a columnas que no alcanzan"""
        grid = [["x"], ["abc", "defgh"], ["", "", "z"]]
        widths = FixedWidthService.compute_widths(grid)

        for c in range(3):
            expected = max(len(str(row[c] or "")) for row in grid if c < len(row))
            assert widths[c] == expected


class TestFormat:
    """Tests de FixedWidthService.format"""

    def test_padding_reserves_two_spaces(self):
        """Cada celda se rellena hasta ancho + 2"""
        text = FixedWidthService.format([["Oil", "2"]], [4, 2])

        assert text == "Oil   2   "
        assert len(text) == 10

    def test_rows_joined_with_newline_without_trailing(self):
        """Filas separadas por \\n, sin salto final"""
        text = FixedWidthService.format([["a"], ["bb"]], [2])

        assert text == "a   \nbb  "

    def test_trailing_newline_option(self):
        """Con trailing_newline se agrega un único \\n final"""
        text = FixedWidthService.format([["a"], ["bb"]], [2], trailing_newline=True)

        assert text == "a   \nbb  \n"

    def test_custom_gap(self):
        """La separación mínima es configurable"""
        assert FixedWidthService.format([["ab", "c"]], [2, 1], gap=1) == "ab c "

    def test_short_row_is_padded_with_empty_cells(self):
        """Fila más corta que el número de columnas no falla"""
        grid = [["A", "B", "C"], ["OnlyOneCell"]]
        widths = FixedWidthService.compute_widths(grid)
        lines = FixedWidthService.format(grid, widths).split("\n")

        assert lines[1] == "OnlyOneCell  " + " " * 3 + " " * 3
        assert len(lines[0]) == len(lines[1])

    def test_none_cells_render_as_blank(self):
        """None nunca aparece como texto"""
        text = FixedWidthService.format([[None, "x"]], [0, 1])

        assert "None" not in text
        assert text == "  x  "

    def test_long_values_are_not_truncated(self):
        """Valores más largos que el ancho se conservan enteros"""
        assert FixedWidthService.format([["abcdef"]], [2]) == "abcdef"

    def test_format_is_deterministic(self):
        """Misma grilla, mismo texto"""
        grid = [["Name", "Qty"], ["Gasoline-Premium", "10"], ["Oil", "2"]]
        widths = FixedWidthService.compute_widths(grid)

        assert FixedWidthService.format(grid, widths) == FixedWidthService.format(grid, widths)

    @pytest.mark.parametrize("grid", [[], [[]]])
    def test_empty_inputs(self, grid):
        """Entradas vacías producen texto vacío"""
        assert FixedWidthService.format(grid, FixedWidthService.compute_widths(grid)) == ""
