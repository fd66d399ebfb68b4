import math
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Sequence, Tuple

Grid = Tuple[Tuple[str, ...], ...]


def cell_text(value: Any) -> str:
    """Texto de una celda tal como se muestra y se exporta ('' si falta)."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)


@dataclass(frozen=True)
class TabularModel:
    """
    Representa la hoja cargada en memoria:
      - rows: tupla de filas (cada fila es una tupla de textos, largo libre)
      - widths: ancho por columna, siempre calculado sobre rows
    """
    rows: Grid = ()
    widths: Tuple[int, ...] = field(default=())

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]]) -> "TabularModel":
        # Import tardío: el servicio depende de cell_text de este módulo
        from services.fixed_width_service import FixedWidthService

        grid = tuple(tuple(cell_text(c) for c in row) for row in rows)
        return cls(rows=grid, widths=tuple(FixedWidthService.compute_widths(grid)))

    def cell(self, row: int, col: int) -> str:
        if row < 0 or col < 0 or row >= len(self.rows):
            return ""
        current = self.rows[row]
        return current[col] if col < len(current) else ""

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.widths)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def header(self) -> List[str]:
        return [self.cell(0, c) for c in range(self.column_count)] if self.rows else []

    @property
    def body(self) -> Grid:
        return self.rows[1:]
