import logging
import os
from enum import Enum
from typing import Optional

import config
from controllers.edit_controller import EditController
from models.grid_model import TabularModel
from services.export_service import ExportService, ExportServiceError
from services.fixed_width_service import FixedWidthService
from services.spreadsheet_service import SpreadsheetService, SpreadsheetServiceError

LOGGER = logging.getLogger(__name__)


class SessionState(Enum):
    EMPTY = "empty"
    LOADED = "loaded"


class ConverterContext:
    def __init__(self):
        self.state: SessionState = SessionState.EMPTY
        self.model: TabularModel = TabularModel()
        self.source_name: str | None = None


class ConverterController:
    def __init__(self, export_path: str | None = None, gap: int | None = None,
                 trailing_newline: bool | None = None):
        self.ctx = ConverterContext()
        self.export_path = export_path if export_path is not None else config.EXPORT_PATH
        self.gap = gap if gap is not None else config.COLUMN_GAP
        self.trailing_newline = trailing_newline if trailing_newline is not None else config.TRAILING_NEWLINE
        self._load_token = 0

    # =========================================================================
    #  ESTADO DE LA SESIÓN
    # =========================================================================
    @property
    def state(self) -> SessionState:
        return self.ctx.state

    @property
    def model(self) -> TabularModel:
        return self.ctx.model

    @property
    def source_name(self) -> Optional[str]:
        return self.ctx.source_name

    @property
    def can_export(self) -> bool:
        return self.ctx.state is SessionState.LOADED

    # =========================================================================
    #  CARGA DE ARCHIVOS
    # =========================================================================
    def begin_load(self, path: str) -> int:
        """Registra una nueva carga; solo el último token es válido."""
        self._load_token += 1
        LOGGER.info("Carga #%d solicitada: %s", self._load_token, path)
        return self._load_token

    def is_current(self, token: int) -> bool:
        return token == self._load_token

    def finish_load(self, token: int, data: bytes, filename: str = "") -> bool:
        if not self.is_current(token):
            LOGGER.debug("Carga #%d descartada (vigente: #%d)", token, self._load_token)
            return False
        try:
            rows = SpreadsheetService.read_first_sheet(data, filename)
        except SpreadsheetServiceError: raise
        except Exception as e: raise SpreadsheetServiceError(f"Error inesperado al leer Excel: {e}")

        # Reemplazo completo: nada de la grilla anterior sobrevive
        model = TabularModel.from_rows(rows)
        ctx = ConverterContext()
        ctx.state = SessionState.LOADED
        ctx.model = model
        ctx.source_name = os.path.basename(filename) if filename else None
        self.ctx = ctx
        LOGGER.info("Libro cargado: %d filas, %d columnas", model.row_count, model.column_count)
        return True

    def load_file(self, path: str) -> bool:
        token = self.begin_load(path)
        data = SpreadsheetService.read_bytes(path)
        return self.finish_load(token, data, path)

    # =========================================================================
    #  EDICIÓN, VISTA PREVIA Y EXPORTACIÓN
    # =========================================================================
    def edit_cell(self, row: int, col: int, value: str) -> TabularModel:
        if self.ctx.state is not SessionState.LOADED:
            raise SpreadsheetServiceError("No hay datos cargados para editar.")
        self.ctx.model = EditController.edit_cell(self.ctx.model, row, col, value)
        LOGGER.debug("Celda (%d, %d) editada", row, col)
        return self.ctx.model

    def preview_text(self) -> str:
        if self.ctx.state is not SessionState.LOADED:
            return ""
        model = self.ctx.model
        return FixedWidthService.format(model.rows, model.widths, self.gap, self.trailing_newline)

    def export_txt(self, path: str | None = None) -> Optional[str]:
        if not self.can_export:
            LOGGER.info("Exportación ignorada: no hay archivo cargado")
            return None
        target = path or self.export_path
        try:
            written = ExportService.save_text(self.preview_text(), target)
        except ExportServiceError: raise
        except Exception as e: raise ExportServiceError(f"Error inesperado al exportar: {e}")
        LOGGER.info("TXT exportado en %s", written)
        return written
