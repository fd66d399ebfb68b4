import logging
from pathlib import Path

import config
from ui.main_window import MainWindow


def setup_logging(level_name: str, log_path: Path | None = None) -> None:
    """Consola + archivo (opcional, modo append) con el mismo formato."""
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    fmt = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_path is not None:
        fh = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)


def main() -> int:
    log_path = config.CONFIG_ROOT / config.LOG_FILE if config.LOG_FILE else None
    setup_logging(config.LOG_LEVEL, log_path)
    MainWindow().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
