import io
import os
from typing import Any, List

import pandas as pd


class SpreadsheetServiceError(Exception):
    pass


class SpreadsheetService:
    """
    Lectura de libros Excel (.xlsx / .xls).
    - Solo se toma la primera hoja, fila por fila, sin encabezado especial.
    - Las celdas vacías quedan como None y se recortan al final de cada fila.
    """

    SUPPORTED_EXTENSIONS = (".xlsx", ".xls")

    @staticmethod
    def read_bytes(path: str) -> bytes:
        if not path:
            raise SpreadsheetServiceError("No se seleccionó ningún archivo.")
        ext = os.path.splitext(path)[1].lower()
        if ext not in SpreadsheetService.SUPPORTED_EXTENSIONS:
            raise SpreadsheetServiceError(f"Extensión no soportada: '{ext or path}'. Use .xlsx o .xls.")
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            raise SpreadsheetServiceError(f"Error de lectura: {e}")

    @staticmethod
    def read_first_sheet(data: bytes, filename: str = "") -> List[List[Any]]:
        if not data:
            raise SpreadsheetServiceError("El archivo está vacío.")

        # 1. Delegar el parseo a pandas (openpyxl para .xlsx, xlrd para .xls).
        #    Solo la celda vacía es NaN: textos como "N/A" o "null" se conservan.
        try:
            df = pd.read_excel(io.BytesIO(data), sheet_name=0, header=None, dtype=object,
                               keep_default_na=False, na_values=[""])
        except Exception as e:
            label = f" '{filename}'" if filename else ""
            raise SpreadsheetServiceError(f"No se pudo leer el libro{label}: {e}")

        # 2. NaN -> None para que el modelo los trate como celdas vacías
        df = df.astype(object).where(pd.notna(df), None)

        # 3. Recortar celdas vacías al final de cada fila (filas de largo libre)
        rows: List[List[Any]] = []
        for values in df.itertuples(index=False, name=None):
            row = list(values)
            while row and _is_blank(row[-1]):
                row.pop()
            rows.append(row)

        # 4. pandas lee desde A1: descartar filas y columnas vacías iniciales
        #    para empezar en el rango usado de la hoja
        while rows and not rows[0]:
            rows.pop(0)
        offset = min((_leading_blanks(row) for row in rows if row), default=0)
        return [row[offset:] for row in rows]


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _leading_blanks(row: List[Any]) -> int:
    count = 0
    while count < len(row) and _is_blank(row[count]):
        count += 1
    return count
