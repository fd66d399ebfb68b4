from models.grid_model import TabularModel, cell_text
from services.fixed_width_service import FixedWidthService


class EditController:
    """
    Aplica la edición de una celda y devuelve un modelo nuevo con los anchos
    recalculados. El modelo recibido no se modifica.
    """

    @staticmethod
    def edit_cell(model: TabularModel, row: int, col: int, value) -> TabularModel:
        if row < 0:
            raise IndexError(f"Fila inválida: {row}")
        if col < 0:
            raise IndexError(f"Columna inválida: {col}")
        # La fila debe existir (índices generados por la propia grilla)
        current = list(model.rows[row])
        if col >= len(current):
            current.extend([""] * (col + 1 - len(current)))
        current[col] = cell_text(value)

        rows = list(model.rows)
        rows[row] = tuple(current)
        grid = tuple(rows)
        return TabularModel(rows=grid, widths=tuple(FixedWidthService.compute_widths(grid)))
