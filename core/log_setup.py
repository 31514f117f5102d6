import logging
import os
import sys
from pathlib import Path

LOG_FILE_ENV = "CLIPBOARD_LOG_FILE"
LOG_LEVEL_ENV = "CLIPBOARD_LOG_LEVEL"


def setup_logging() -> None:
    handlers = [logging.StreamHandler(sys.stderr)]

    log_file = os.environ.get(LOG_FILE_ENV)
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    # по умолчанию только ошибки: обычный вывод остаётся за ui.console
    level = os.environ.get(LOG_LEVEL_ENV, "ERROR").upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.ERROR),
        format="%(asctime)s | %(levelname)s | %(message)s",
        handlers=handlers,
        force=True,
    )
