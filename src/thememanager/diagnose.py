# -*- coding: utf-8 -*-
"""System diagnostics for developers and bug reports."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

from thememanager.config import load_app_paths, load_settings
from thememanager.constants import APP_VERSION
from thememanager.core.precheck import Precheck
from thememanager.models.pack import PackKind
from thememanager.stores.catalog import PackStore
from thememanager.stores.system_layout import SystemLayout
from thememanager.ui.presenter import Presenter


def run_diagnostics(base_dir: str | Path | None = None) -> dict[str, Any]:
    """Collect environment, path, settings and catalog information without changing anything."""
    paths = load_app_paths(base_dir)
    report: dict[str, Any] = {
        "status": "ok",
        "version": APP_VERSION,
        "system": {
            "os": os.name,
            "platform": sys.platform,
            "python_version": sys.version,
            "cwd": os.getcwd(),
        },
        "paths": paths.as_dict(),
        "checks": [],
        "settings": {},
        "packs": {},
        "errors": [],
    }

    checks = Precheck(Presenter(paths.base_dir), create_directories=False).run(paths)
    report["checks"] = checks
    for item in checks:
        if not item["passed"]:
            report["errors"].append(f"{item['check']}: {item['message']}")
            if item["fatal"]:
                report["status"] = "error"

    if paths.settings_file.exists():
        report["settings"] = load_settings(paths.settings_file)
    else:
        report["settings"] = {"missing": True}

    layout = SystemLayout(paths)
    for kind in PackKind:
        store = PackStore(paths, kind, layout)
        try:
            report["packs"][kind.title.lower()] = {
                "catalog": len(store.catalog_names()),
                "backups": len(store.list_backups()),
            }
        except OSError as exc:
            report["errors"].append(f"{kind.title}: {exc}")

    if report["errors"] and report["status"] == "ok":
        report["status"] = "warning"
    return report
