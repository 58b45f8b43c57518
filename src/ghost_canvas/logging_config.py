"""Logging setup for ghost-canvas."""

import logging
import sys
from pathlib import Path

_initialized = False


def setup_logging(level: int = logging.INFO, log_file: Path | str | None = None) -> None:
    """루트 로거에 콘솔 (및 선택적으로 파일) 핸들러 등록. 두 번째 호출부터는 무시."""
    global _initialized
    if _initialized:
        return

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    _initialized = True
    logging.getLogger(__name__).debug("Logging initialized")
