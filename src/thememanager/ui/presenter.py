# -*- coding: utf-8 -*-
"""Thin wrapper around the minui-list and minui-presenter binaries."""

from __future__ import annotations

import json
import logging
import os
import subprocess
import tempfile
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from thememanager.constants import (
    EXIT_BACK,
    EXIT_CANCELLED,
    EXIT_GALLERY_PREVIOUS,
    EXIT_INTERRUPTED,
    EXIT_SELECTED,
    EXIT_TERMINATED,
    EXIT_TIMEOUT,
    LIST_BINARY,
    MESSAGE_TIMEOUT_LONG,
    NO,
    PRESENTER_BINARY,
    YES,
)
from thememanager.errors import IndicatorError, PresenterUnavailableError
from thememanager.models.pack import GalleryItem
from thememanager.models.selection import CANCELLED, Selection

logger = logging.getLogger(__name__)

Runner = Callable[..., Any]

GALLERY_PASSTHROUGH_CODES = {EXIT_TIMEOUT, EXIT_INTERRUPTED, EXIT_TERMINATED}
NO_ITEMS_MESSAGE = "No items to display"


class Presenter:
    """Show lists, confirmations, messages and galleries through external binaries."""

    def __init__(
        self,
        bin_dir: str | Path,
        *,
        runner: Runner | None = None,
        popen: Runner | None = None,
    ) -> None:
        self.bin_dir = Path(bin_dir)
        self._runner = runner or subprocess.run
        self._popen = popen or subprocess.Popen

    @property
    def list_binary(self) -> Path:
        return self.bin_dir / LIST_BINARY

    @property
    def presenter_binary(self) -> Path:
        return self.bin_dir / PRESENTER_BINARY

    def missing_binaries(self) -> list[Path]:
        return [
            binary
            for binary in (self.list_binary, self.presenter_binary)
            if not binary.is_file() or not os.access(binary, os.X_OK)
        ]

    def ensure_available(self) -> None:
        missing = self.missing_binaries()
        if missing:
            raise PresenterUnavailableError(
                "Missing presenter binaries: " + ", ".join(str(path) for path in missing)
            )

    def _run(self, args: list[str]) -> int:
        logger.debug("Running %s", args)
        try:
            completed = self._runner(args, check=False)
        except OSError as exc:
            raise PresenterUnavailableError(f"Cannot run {args[0]}: {exc}") from exc
        code = int(completed.returncode)
        logger.debug("%s exited with %d", Path(args[0]).name, code)
        return code

    def _run_list(self, content: str, title: str, fmt: str, extra: Sequence[str]) -> Selection:
        with tempfile.TemporaryDirectory(prefix="thememanager-") as tmp:
            input_path = Path(tmp) / "input"
            output_path = Path(tmp) / "output"
            input_path.write_text(content, encoding="utf-8")
            args = [
                str(self.list_binary),
                "--format", fmt,
                "--title", title,
                "--file", str(input_path),
                "--write-location", str(output_path),
                *extra,
            ]
            code = self._run(args)
            value = ""
            if code == EXIT_SELECTED and output_path.exists():
                value = output_path.read_text(encoding="utf-8").rstrip("\r\n")
        return Selection(value, code)

    def show_list(
        self,
        items: Sequence[str],
        title: str,
        *,
        selected_index: int | None = None,
        cancel_text: str | None = None,
    ) -> Selection:
        extra: list[str] = []
        if cancel_text:
            extra += ["--cancel-text", cancel_text]
        if selected_index is not None:
            extra += ["--selected", str(selected_index)]
        return self._run_list("\n".join(items), title, "text", extra)

    def show_json_list(
        self,
        payload: dict[str, Any],
        title: str,
        *,
        item_key: str = "items",
        cancel_text: str | None = None,
    ) -> Selection:
        extra = ["--item-key", item_key]
        if cancel_text:
            extra += ["--cancel-text", cancel_text]
        return self._run_list(json.dumps(payload), title, "json", extra)

    def confirm(self, message: str, default_yes: bool = False) -> Selection:
        """Yes/No list, preselected on "No" unless `default_yes`."""
        return self.show_list([YES, NO], message, selected_index=0 if default_yes else 1)

    def show_message(self, message: str, timeout: str = MESSAGE_TIMEOUT_LONG) -> Selection:
        code = self._run([str(self.presenter_binary), "--message", message, "--timeout", timeout])
        if code == EXIT_TIMEOUT:
            code = EXIT_SELECTED
        return Selection("", code)

    def show_gallery(self, items: Sequence[GalleryItem]) -> Selection:
        """Page through `items` one at a time; returns the chosen item's value."""
        if not items:
            self.show_message(NO_ITEMS_MESSAGE)
            return CANCELLED

        total = len(items)
        index = 0
        while True:
            item = items[index]
            code = self._show_gallery_page(item, index, total)
            if code == EXIT_SELECTED:
                return Selection(item.value, EXIT_SELECTED)
            if code in (EXIT_CANCELLED, EXIT_BACK) or code in GALLERY_PASSTHROUGH_CODES:
                return Selection("", code)
            if code == EXIT_GALLERY_PREVIOUS:
                index = (index - 1) % total
            else:
                index = (index + 1) % total

    def _show_gallery_page(self, item: GalleryItem, index: int, total: int) -> int:
        payload = {
            "items": [
                {
                    "text": f"{item.text} ({index + 1}/{total})",
                    "background_image": str(item.background_image) if item.background_image else "",
                    "show_pill": True,
                    "alignment": "top",
                }
            ],
            "selected": 0,
        }
        with tempfile.TemporaryDirectory(prefix="thememanager-") as tmp:
            payload_path = Path(tmp) / "gallery.json"
            payload_path.write_text(json.dumps(payload), encoding="utf-8")
            return self._run(
                [
                    str(self.presenter_binary),
                    "--file", str(payload_path),
                    "--confirm-text", "SELECT", "--confirm-show",
                    "--cancel-text", "BACK", "--cancel-show",
                    "--action-button", "X", "--action-text", "NEXT", "--action-show",
                    "--inaction-button", "Y", "--inaction-text", "PREV", "--inaction-show",
                ]
            )

    def start_indicator(self, message: str) -> subprocess.Popen:
        """Launch a message that stays up until the process is terminated."""
        args = [str(self.presenter_binary), "--message", message, "--timeout", "-1"]
        try:
            process = self._popen(args, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as exc:
            raise IndicatorError(f"Could not show busy indicator: {exc}") from exc
        logger.debug("Busy indicator started (pid=%s): %s", getattr(process, "pid", "?"), message)
        return process
