"""Valores de configuración del conversor.

Se leen una sola vez desde `config.yml` (raíz del repositorio) y se mezclan
sobre los valores por defecto, de modo que el archivo puede omitir claves.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

CONFIG_ROOT = Path(__file__).resolve().parent
CONFIG_PATH = CONFIG_ROOT / "config.yml"

DEFAULTS: Dict[str, Any] = {
    "export_path": "export/abastecimentos.txt",
    "column_gap": 2,
    "trailing_newline": False,
    "pixels_per_char": 8,
    "window_title": "Conversor de Excel a TXT",
    "log_level": "INFO",
    "log_file": "converter.log",
}


def load_config(path: Path = CONFIG_PATH) -> Dict[str, Any]:
    cfg = dict(DEFAULTS)
    if not path.exists():
        logging.warning("[config] No existe %s, se usan valores por defecto", path)
        return cfg
    data = yaml.safe_load(path.read_text(encoding="utf-8-sig")) or {}
    if not isinstance(data, dict):
        raise ValueError("config.yml debe contener un mapeo en el nivel superior")
    cfg.update(data)
    return cfg


_CFG = load_config()

EXPORT_PATH: str = str(_CFG["export_path"])
COLUMN_GAP: int = int(_CFG["column_gap"])
TRAILING_NEWLINE: bool = bool(_CFG["trailing_newline"])
PIXELS_PER_CHAR: int = int(_CFG["pixels_per_char"])
WINDOW_TITLE: str = str(_CFG["window_title"])
LOG_LEVEL: str = str(_CFG["log_level"])
LOG_FILE: str = str(_CFG["log_file"] or "")

__all__ = [
    "CONFIG_ROOT",
    "CONFIG_PATH",
    "EXPORT_PATH",
    "COLUMN_GAP",
    "TRAILING_NEWLINE",
    "PIXELS_PER_CHAR",
    "WINDOW_TITLE",
    "LOG_LEVEL",
    "LOG_FILE",
    "load_config",
]
