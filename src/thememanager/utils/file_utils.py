# -*- coding: utf-8 -*-
"""File helpers with UTF-8 defaults."""

from __future__ import annotations

import json
import os
import re
import shutil
from pathlib import Path
from typing import Any


def ensure_dir(path: str | Path) -> Path:
    """Create a directory if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def read_json_file(path: str | Path) -> dict[str, Any]:
    """Read a JSON file."""
    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object in {file_path}")
    return data


def write_json_file(path: str | Path, data: dict[str, Any]) -> Path:
    """Write JSON to a file with indentation."""
    file_path = Path(path)
    ensure_dir(file_path.parent)
    with file_path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, ensure_ascii=True)
        handle.write("\n")
    return file_path


def read_text_file(path: str | Path) -> str:
    """Read a UTF-8 text file."""
    file_path = Path(path)
    return file_path.read_text(encoding="utf-8")


def write_text_atomic(path: str | Path, content: str) -> Path:
    """Write a UTF-8 text file through a temp file and rename."""
    file_path = Path(path)
    ensure_dir(file_path.parent)
    tmp_path = file_path.with_name(file_path.name + ".tmp")
    tmp_path.write_text(content, encoding="utf-8")
    os.replace(tmp_path, file_path)
    return file_path


def read_key_values(path: str | Path) -> dict[str, str]:
    """Parse a key=value settings file, keeping the last value per key."""
    values: dict[str, str] = {}
    for raw_line in read_text_file(path).splitlines():
        if "=" not in raw_line:
            continue
        key, value = raw_line.split("=", 1)
        key = key.strip()
        if key:
            values[key] = value.strip()
    return values


def update_key_values(path: str | Path, updates: dict[str, str]) -> Path:
    """Rewrite selected keys of a key=value file, preserving every other line."""
    file_path = Path(path)
    lines = read_text_file(file_path).splitlines() if file_path.exists() else []
    pending = dict(updates)
    output: list[str] = []
    for raw_line in lines:
        key = raw_line.split("=", 1)[0].strip() if "=" in raw_line else ""
        if key in pending:
            output.append(f"{key}={pending.pop(key)}")
        else:
            output.append(raw_line)
    output.extend(f"{key}={value}" for key, value in pending.items())
    return write_text_atomic(file_path, "\n".join(output) + "\n")


def copy_file(source: str | Path, target: str | Path) -> Path:
    """Copy one file, creating parent directories."""
    target_path = Path(target)
    ensure_dir(target_path.parent)
    shutil.copy2(source, target_path)
    return target_path


def copy_tree(source: str | Path, target: str | Path) -> list[Path]:
    """Copy every file under `source` onto `target`, returning the written paths."""
    source_dir = Path(source)
    written: list[Path] = []
    for item in sorted(source_dir.rglob("*")):
        if item.is_file():
            written.append(copy_file(item, Path(target) / item.relative_to(source_dir)))
    return written


def clear_directory(path: str | Path) -> None:
    """Remove the contents of a directory, keeping the directory itself."""
    dir_path = Path(path)
    if not dir_path.exists():
        return
    for child in dir_path.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()


def remove_path(path: str | Path) -> None:
    """Remove a file or directory tree if present."""
    target = Path(path)
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    elif target.exists() or target.is_symlink():
        target.unlink()


def next_numbered_path(directory: str | Path, prefix: str, suffix: str = ".txt") -> Path:
    """Return `<directory>/<prefix>_<n><suffix>` with n one past the highest existing number."""
    dir_path = Path(directory)
    pattern = re.compile(rf"^{re.escape(prefix)}_(\d+){re.escape(suffix)}$")
    highest = 0
    if dir_path.is_dir():
        for child in dir_path.iterdir():
            match = pattern.match(child.name)
            if match:
                highest = max(highest, int(match.group(1)))
    return dir_path / f"{prefix}_{highest + 1}{suffix}"
