# -*- coding: utf-8 -*-
"""
Logging 설정

모든 모듈은 logging.getLogger(__name__)으로 로거를 얻고,
루트 로거 설정은 애플리케이션 시작 시 한 번만 수행한다.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from src.settings.config import Settings

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def setup_logging(settings: Settings) -> None:
    """
    루트 로거 설정 (최초 1회)

    Args:
        settings: 애플리케이션 설정 (log_level, log_format, log_file ...)
    """
    global _initialized
    if _initialized:
        return

    formatter = logging.Formatter(settings.log_format, _DATE_FORMAT)
    root = logging.getLogger()
    root.setLevel(settings.log_level)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    root.addHandler(console)

    if settings.log_file:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            settings.log_file,
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # SQL 로그는 database_echo 설정으로만 제어
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    _initialized = True
