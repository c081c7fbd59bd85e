# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
from pathlib import Path

from thememanager.app import build_context, build_controller
from thememanager.config import AppPaths, load_app_paths
from thememanager.constants import APP_NAME, APP_VERSION
from thememanager.core.precheck import Precheck, fatal_failures
from thememanager.errors import PresenterUnavailableError
from thememanager.ui.presenter import Presenter
from thememanager.utils.logger import setup_session_logging, write_crash_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CRASH = 1
EXIT_PRESENTER_MISSING = 2
EXIT_INTERRUPTED = 130


def run_app(paths: AppPaths) -> int:
    """Precheck, bootstrap and run the screen loop."""
    presenter = Presenter(paths.base_dir)
    results = Precheck(presenter).run(paths)
    for item in results:
        log = logger.info if item["passed"] else logger.warning
        log("Precheck %s: %s", item["check"], item["message"])

    fatal = fatal_failures(results)
    if fatal:
        raise PresenterUnavailableError("; ".join(item["message"] for item in fatal))

    ctx = build_context(paths, presenter)
    logger.info("Auto-backup is %s", "on" if ctx.settings.auto_backup else "off")
    return build_controller(ctx).run()


def main(base_dir: str | Path | None = None) -> int:
    """Start the app. Every unexpected error is logged and turned into exit code 1."""
    paths = load_app_paths(base_dir)
    session_log_path = setup_session_logging(paths.logs_dir, APP_NAME)
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)
    logger.info("%s %s, app dir %s, device root %s", APP_NAME, APP_VERSION, paths.base_dir, paths.sdcard_root)

    try:
        return run_app(paths)
    except PresenterUnavailableError as exc:
        logger.error("Cannot start: %s", exc)
        return EXIT_PRESENTER_MISSING
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return EXIT_INTERRUPTED
    except Exception as exc:
        crash_path = write_crash_report(paths.logs_dir, type(exc), exc, exc.__traceback__)
        logger.error("Crash report written to %s", crash_path)
        return EXIT_CRASH


if __name__ == "__main__":
    raise SystemExit(main())
