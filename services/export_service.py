import os


class ExportServiceError(Exception):
    pass


class ExportService:
    """Escribe el texto exportado como UTF-8, creando las carpetas necesarias."""

    ENCODING = "utf-8"

    @staticmethod
    def save_text(text: str, path: str) -> str:
        if not path:
            raise ExportServiceError("Ruta de exportación vacía.")
        try:
            folder = os.path.dirname(path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            # newline="" evita que Windows convierta \n en \r\n
            with open(path, "w", encoding=ExportService.ENCODING, newline="") as f:
                f.write(text)
        except OSError as e:
            raise ExportServiceError(f"Error escribiendo TXT: {e}")
        return os.path.abspath(path)
