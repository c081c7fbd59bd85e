# -*- coding: utf-8 -*-
"""YAML manifest carried by themes, overlays, component packs and backups."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from thememanager.models.component import ComponentType


@dataclass
class PackManifest:
    """`info` and `content` sections of a manifest.yml."""

    name: str
    author: str = "Unknown"
    version: str = "1.0.0"
    created_date: str = ""
    content: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: str | Path) -> PackManifest:
        manifest_path = Path(path)
        try:
            data = yaml.safe_load(manifest_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {manifest_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Manifest must be a mapping: {manifest_path}")
        info = data.get("info") or {}
        content = data.get("content") or {}
        if not isinstance(info, dict) or not isinstance(content, dict):
            raise ValueError(f"Manifest sections must be mappings: {manifest_path}")
        return cls(
            name=str(info.get("name") or manifest_path.parent.stem),
            author=str(info.get("author") or "Unknown"),
            version=str(info.get("version") or "1.0.0"),
            created_date=str(info.get("created_date") or ""),
            content=dict(content),
        )

    @classmethod
    def create(cls, name: str, **content: Any) -> PackManifest:
        return cls(name=name, created_date=datetime.now().strftime("%Y-%m-%d"), content=dict(content))

    def save(self, path: str | Path) -> Path:
        manifest_path = Path(path)
        manifest_path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "info": {
                "name": self.name,
                "author": self.author,
                "version": self.version,
                "created_date": self.created_date,
            },
            "content": self.content,
        }
        manifest_path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return manifest_path

    @property
    def systems(self) -> list[str]:
        systems = self.content.get("systems") or []
        return [str(system) for system in systems] if isinstance(systems, list) else []

    def has_component(self, component: ComponentType) -> bool:
        """Missing flags count as present so hand-made themes still apply."""
        return bool(self.content.get(component.content_dir.lower(), True))
