"""
App Icon Set - 应用图标生成

Renders the iOS app icon sizes from one square source image into an
``AppIcon.appiconset`` folder of the asset catalog.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

# 不在 stdout 输出 pygame 欢迎信息
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IconSize:
    idiom: str
    size: float                 # points
    scale: int

    @property
    def pixels(self) -> int:
        return int(round(self.size * self.scale))

    @property
    def size_label(self) -> str:
        s = f"{self.size:g}"
        return f"{s}x{s}"

    @property
    def filename(self) -> str:
        suffix = "" if self.scale == 1 else f"@{self.scale}x"
        return f"Icon-{self.idiom}-{self.size:g}{suffix}.png"


IOS_ICON_SIZES: List[IconSize] = [
    IconSize("iphone", 20, 2),
    IconSize("iphone", 20, 3),
    IconSize("iphone", 29, 2),
    IconSize("iphone", 29, 3),
    IconSize("iphone", 40, 2),
    IconSize("iphone", 40, 3),
    IconSize("iphone", 60, 2),
    IconSize("iphone", 60, 3),
    IconSize("ipad", 20, 1),
    IconSize("ipad", 20, 2),
    IconSize("ipad", 29, 1),
    IconSize("ipad", 29, 2),
    IconSize("ipad", 40, 1),
    IconSize("ipad", 40, 2),
    IconSize("ipad", 76, 1),
    IconSize("ipad", 76, 2),
    IconSize("ipad", 83.5, 2),
    IconSize("ios-marketing", 1024, 1),
]


def icon_set_dir(project_dir: Path, game_folder: str = "Game") -> Path:
    return Path(project_dir) / game_folder / "Assets.xcassets" / "AppIcon.appiconset"


def _scale(surface: "pygame.Surface", px: int) -> "pygame.Surface":
    # smoothscale 仅支持 24/32 位
    if surface.get_bitsize() in (24, 32):
        return pygame.transform.smoothscale(surface, (px, px))
    return pygame.transform.scale(surface, (px, px))


def generate_icon_set(icon_path: Path, output_dir: Path, sizes: List[IconSize] = IOS_ICON_SIZES) -> Path:
    """
    生成图标集

    Raises:
        pygame.error: 图片无法读取或写入
        OSError: 目录无法创建
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    source = pygame.image.load(str(icon_path))
    w, h = source.get_size()
    if w != h:
        logger.warning("App icon %s is not square (%dx%d); it will be stretched", icon_path, w, h)

    images = []
    for icon in sizes:
        pygame.image.save(_scale(source, icon.pixels), str(output_dir / icon.filename))
        images.append({
            "filename": icon.filename,
            "idiom": icon.idiom,
            "scale": f"{icon.scale}x",
            "size": icon.size_label,
        })

    contents = {"images": images, "info": {"author": "xcode", "version": 1}}
    (output_dir / "Contents.json").write_text(json.dumps(contents, indent=2), encoding="utf-8")
    logger.info("App icon set written: %s (%d images)", output_dir, len(images))
    return output_dir
