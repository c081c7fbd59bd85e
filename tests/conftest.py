# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import io
import sys
from collections import deque
from pathlib import Path
from typing import Any

import pytest
import yaml
from PIL import Image


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from thememanager.app import build_context  # noqa: E402
from thememanager.config import AppPaths  # noqa: E402
from thememanager.models.selection import Selection  # noqa: E402
from thememanager.stores.directories import ensure_directory_structure  # noqa: E402
from thememanager.workflows.base import FlowContext  # noqa: E402


def _png_bytes(size: tuple[int, int] = (1, 1)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, (200, 40, 40)).save(buffer, format="PNG")
    return buffer.getvalue()


PNG_1X1_BYTES = _png_bytes()


class ScriptedPresenter:
    """Presenter double that replays queued selections and records every call."""

    def __init__(self, responses: list[Selection] | None = None) -> None:
        self.responses: deque[Selection] = deque(responses or [])
        self.calls: list[tuple[str, Any]] = []
        self.messages: list[str] = []

    def queue(self, *responses: Selection) -> None:
        self.responses.extend(responses)

    def _next(self, method: str, payload: Any) -> Selection:
        self.calls.append((method, payload))
        if not self.responses:
            raise AssertionError(f"No scripted response left for {method}({payload!r})")
        return self.responses.popleft()

    def show_list(self, items, title, *, selected_index=None, cancel_text=None) -> Selection:
        return self._next("show_list", {"items": list(items), "title": title, "selected_index": selected_index})

    def show_json_list(self, payload, title, *, item_key="items", cancel_text=None) -> Selection:
        return self._next("show_json_list", {"payload": payload, "title": title})

    def confirm(self, message, default_yes=False) -> Selection:
        return self._next("confirm", {"message": message, "default_yes": default_yes})

    def show_gallery(self, items) -> Selection:
        return self._next("show_gallery", {"items": list(items)})

    def show_message(self, message, timeout="3") -> Selection:
        self.calls.append(("show_message", message))
        self.messages.append(message)
        return Selection("", 0)

    def start_indicator(self, message):
        raise AssertionError("Flows must use the supervisor")

    def missing_binaries(self) -> list[Path]:
        return []


class RecordingSupervisor:
    """Runs operations inline and records their busy messages."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def run(self, message, operation):
        self.messages.append(message)
        return operation()


class FakeProcess:
    def __init__(self, events: list[str] | None = None, exits_on_terminate: bool = True) -> None:
        self.events = events if events is not None else []
        self.exits_on_terminate = exits_on_terminate
        self.returncode: int | None = None
        self.pid = 4242

    def poll(self) -> int | None:
        return self.returncode

    def terminate(self) -> None:
        self.events.append("terminate")
        if self.exits_on_terminate:
            self.returncode = -15

    def wait(self, timeout: float | None = None) -> int:
        import subprocess

        if self.returncode is None:
            self.events.append("wait-timeout")
            raise subprocess.TimeoutExpired(cmd="minui-presenter", timeout=timeout or 0)
        self.events.append("wait")
        return self.returncode

    def kill(self) -> None:
        self.events.append("kill")
        self.returncode = -9


def write_manifest(pack_dir: Path, name: str, author: str = "Tester", **content: Any) -> None:
    pack_dir.mkdir(parents=True, exist_ok=True)
    data = {
        "info": {"name": name, "author": author, "version": "1.0.0", "created_date": "2026-01-01"},
        "content": content,
    }
    (pack_dir / "manifest.yml").write_text(yaml.safe_dump(data), encoding="utf-8")


def make_theme(root: Path, name: str, author: str = "Tester") -> Path:
    """Create `<root>/<name>.theme` with a wallpaper, an icon and accent colors."""
    theme_dir = root / f"{name}.theme"
    write_manifest(theme_dir, name, author, wallpapers=True, icons=True, accents=True, leds=False, fonts=False)
    (theme_dir / "preview.png").parent.mkdir(parents=True, exist_ok=True)
    (theme_dir / "preview.png").write_bytes(PNG_1X1_BYTES)
    wallpaper = theme_dir / "Wallpapers" / "Roms" / "GBA (GBA)" / ".media" / "bg.png"
    wallpaper.parent.mkdir(parents=True, exist_ok=True)
    wallpaper.write_bytes(PNG_1X1_BYTES)
    root_bg = theme_dir / "Wallpapers" / "bg.png"
    root_bg.write_bytes(PNG_1X1_BYTES)
    icon = theme_dir / "Icons" / "Roms" / ".media" / "GBA (GBA).png"
    icon.parent.mkdir(parents=True, exist_ok=True)
    icon.write_bytes(PNG_1X1_BYTES)
    accents = theme_dir / "Accents" / "accents.txt"
    accents.parent.mkdir(parents=True, exist_ok=True)
    accents.write_text("color1=0x112233\ncolor2=0x445566\n", encoding="utf-8")
    return theme_dir


def make_overlay(root: Path, name: str, systems: tuple[str, ...] = ("GBA", "GB")) -> Path:
    overlay_dir = root / f"{name}.over"
    write_manifest(overlay_dir, name, systems=list(systems))
    for system in systems:
        target = overlay_dir / "Systems" / system / "overlay.png"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(PNG_1X1_BYTES)
    return overlay_dir


@pytest.fixture
def app_paths(tmp_path: Path) -> AppPaths:
    paths = AppPaths(
        base_dir=tmp_path / "app",
        sdcard_root=tmp_path / "sdcard",
        catalog_source=tmp_path / "source",
    )
    paths.sdcard_root.mkdir(parents=True)
    ensure_directory_structure(paths)
    return paths


@pytest.fixture
def presenter() -> ScriptedPresenter:
    return ScriptedPresenter()


@pytest.fixture
def supervisor() -> RecordingSupervisor:
    return RecordingSupervisor()


@pytest.fixture
def flow_ctx(app_paths: AppPaths, presenter: ScriptedPresenter, supervisor: RecordingSupervisor) -> FlowContext:
    return build_context(app_paths, presenter, supervisor)  # type: ignore[arg-type]
