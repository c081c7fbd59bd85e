# -*- coding: utf-8 -*-
"""Startup environment validation."""

from __future__ import annotations

import shutil
from typing import Any, Callable

from thememanager.config import AppPaths
from thememanager.stores.directories import app_directories, ensure_directory_structure
from thememanager.ui.presenter import Presenter


CheckResult = dict[str, Any]

MIN_FREE_BYTES = 50_000_000
FATAL_CHECKS = {"presenter_binaries"}


class Precheck:
    """Run environment checks before the screen loop starts."""

    def __init__(
        self,
        presenter: Presenter,
        *,
        disk_usage_provider: Callable[[str], tuple[int, int, int]] | None = None,
        create_directories: bool = True,
    ) -> None:
        self.presenter = presenter
        self.disk_usage_provider = disk_usage_provider or shutil.disk_usage
        self.create_directories = create_directories

    def run(self, paths: AppPaths) -> list[CheckResult]:
        results: list[CheckResult] = []

        missing = self.presenter.missing_binaries()
        message = "minui-list and minui-presenter found"
        if missing:
            message = "Missing: " + ", ".join(path.name for path in missing)
        results.append(self._result("presenter_binaries", not missing, message))

        if self.create_directories:
            created = ensure_directory_structure(paths)
            results.append(self._result("directories", True, f"Created {len(created)} missing director(ies)"))
        else:
            absent = [directory for directory in app_directories(paths) if not directory.is_dir()]
            results.append(self._result("directories", not absent, f"{len(absent)} director(ies) missing"))

        results.append(
            self._result(
                "sdcard_root",
                paths.sdcard_root.is_dir(),
                f"Device root: {paths.sdcard_root}",
            )
        )

        try:
            _total, _used, free = self.disk_usage_provider(str(paths.base_dir))
        except OSError as exc:
            results.append(self._result("disk_space", False, f"Disk check failed: {exc}"))
        else:
            results.append(
                self._result(
                    "disk_space",
                    free >= MIN_FREE_BYTES,
                    f"Free space: {free} bytes (required >= {MIN_FREE_BYTES})",
                )
            )
        return results

    def _result(self, check: str, passed: bool, message: str) -> CheckResult:
        return {"check": check, "passed": bool(passed), "message": message, "fatal": check in FATAL_CHECKS}


def fatal_failures(results: list[CheckResult]) -> list[CheckResult]:
    return [item for item in results if item["fatal"] and not item["passed"]]
