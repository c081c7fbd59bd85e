# -*- coding: utf-8 -*-
"""Image helpers built on Pillow."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PIL import Image, ImageColor, ImageDraw

logger = logging.getLogger(__name__)

SWATCH_SIZE = (640, 480)


def is_valid_image(path: str | Path) -> bool:
    """Return True if Pillow can identify and verify the file."""
    image_path = Path(path)
    if not image_path.is_file():
        return False
    try:
        with Image.open(image_path) as img:
            img.verify()
    except (OSError, SyntaxError, ValueError) as exc:
        logger.warning("Ignoring unreadable image %s: %s", image_path, exc)
        return False
    return True


def render_color_swatch(
    colors: Sequence[str],
    path: str | Path,
    size: tuple[int, int] = SWATCH_SIZE,
) -> Path:
    """Draw one vertical band per color and save the result as PNG.

    Colors use the display format (#RRGGBB). Unparsable colors are drawn black.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    width, height = size
    image = Image.new("RGB", size, (0, 0, 0))
    draw = ImageDraw.Draw(image)
    count = max(len(colors), 1)
    band = width / count
    for index, color in enumerate(colors):
        try:
            fill = ImageColor.getrgb(color)
        except ValueError:
            logger.debug("Invalid swatch color %r", color)
            fill = (0, 0, 0)
        left = int(index * band)
        right = int((index + 1) * band)
        draw.rectangle([left, 0, right, height], fill=fill)
    image.save(target, format="PNG")
    return target
