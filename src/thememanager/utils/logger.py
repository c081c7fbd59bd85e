# -*- coding: utf-8 -*-
"""Session logging for the app and crash report output."""

from __future__ import annotations

import logging
import os
import traceback
from datetime import datetime
from pathlib import Path
from types import TracebackType

CRASH_LOG_NAME = "LAST_CRASH.log"


def setup_session_logging(logs_dir: str | Path, app_name: str) -> Path | None:
    """Configure root logging once per process. Always uses DEBUG level."""
    root = logging.getLogger()
    if getattr(root, "_thememanager_logging_configured", False):
        return getattr(root, "_thememanager_session_log", None)

    level = logging.DEBUG
    root.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s [%(threadName)s] %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    log_dir = Path(logs_dir)
    safe_app_name = app_name.lower().replace(" ", "-")
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    session_log_path: Path | None = log_dir / f"{safe_app_name}-{timestamp}.log"
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(session_log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        root.info("=== %s starting ===", app_name)
        root.info("Session log file established: %s", session_log_path)
        root.info("System info: OS=%s", os.name)
    except OSError as exc:
        root.error("Failed to establish session log file: %s", exc)
        session_log_path = None

    root._thememanager_logging_configured = True  # type: ignore[attr-defined]
    root._thememanager_session_log = session_log_path  # type: ignore[attr-defined]
    return session_log_path


def write_crash_report(
    logs_dir: str | Path,
    exc_type: type[BaseException],
    exc_value: BaseException,
    exc_traceback: TracebackType | None,
) -> Path:
    """Log a fatal error and save it to Logs/LAST_CRASH.log."""
    error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logging.getLogger().critical("FATAL CRASH:\n%s", error_msg)

    crash_path = Path(logs_dir) / CRASH_LOG_NAME
    crash_path.parent.mkdir(parents=True, exist_ok=True)
    crash_path.write_text(error_msg, encoding="utf-8")
    return crash_path
