from typing import Any, List, Sequence

from models.grid_model import cell_text


class FixedWidthService:
    """
    Conversión de la grilla a texto de ancho fijo.
    - compute_widths: ancho máximo por columna (siempre recalculo completo).
    - format: cada celda rellenada con espacios hasta ancho + separación.
    """

    DEFAULT_GAP = 2

    @staticmethod
    def compute_widths(grid: Sequence[Sequence[Any]]) -> List[int]:
        widths: List[int] = []
        for row in grid:
            for index, cell in enumerate(row):
                length = len(cell_text(cell))
                if index >= len(widths):
                    # Columnas nuevas empiezan en 0 aunque las filas previas no llegaran
                    widths.extend([0] * (index + 1 - len(widths)))
                if length > widths[index]:
                    widths[index] = length
        return widths

    @staticmethod
    def format(grid: Sequence[Sequence[Any]], widths: Sequence[int],
               gap: int = DEFAULT_GAP, trailing_newline: bool = False) -> str:
        lines = []
        for row in grid:
            parts = []
            for index, width in enumerate(widths):
                text = cell_text(row[index]) if index < len(row) else ""
                parts.append(text.ljust(width + gap))
            lines.append("".join(parts))
        text = "\n".join(lines)
        if trailing_newline and lines:
            text += "\n"
        return text
