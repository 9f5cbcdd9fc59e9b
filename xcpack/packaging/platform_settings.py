"""
Platform Settings - 打包配置系统

统一管理游戏设置、iOS 平台设置与构建设置
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

T = TypeVar("T")

# 平台描述
PLATFORM_NAME = "iOS"
PLATFORM_DISPLAY_NAME = "iOS"
ARCHITECTURE = "ARM64"
NATIVE_LIBRARY_EXTENSION = ".dylib"


def is_native_code_file(name: str) -> bool:
    """无扩展名（可执行文件）或 .dylib 视为原生代码"""
    suffix = Path(name).suffix
    return suffix == "" or suffix == NATIVE_LIBRARY_EXTENSION


@dataclass
class GameSettings:
    """游戏设置"""
    product_name: str = "Game"
    company_name: str = "Company"
    project_version: str = "1.0.0"


@dataclass
class IosPlatformSettings:
    """iOS 平台设置"""
    app_identifier: str = "com.${COMPANY_NAME}.${PROJECT_NAME}"
    app_team_id: str = ""
    app_version: str = "1"                  # CURRENT_PROJECT_VERSION
    icon: Optional[str] = None              # 方形图标源文件


@dataclass
class BuildSettings:
    """构建设置"""
    skip_packaging: bool = False
    debug: bool = False                     # 检查占位符覆盖
    header_search_paths: Optional[str] = None
    game_folder: str = "Game"


def _from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
    # 忽略未知字段
    known = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in (data or {}).items() if k in known})


@dataclass
class PackagingConfig:
    """完整打包配置"""
    game: GameSettings = field(default_factory=GameSettings)
    ios: IosPlatformSettings = field(default_factory=IosPlatformSettings)
    build: BuildSettings = field(default_factory=BuildSettings)

    def to_json(self) -> str:
        """序列化为 JSON"""
        data = {
            'game': asdict(self.game),
            'ios': asdict(self.ios),
            'build': asdict(self.build),
        }
        return json.dumps(data, ensure_ascii=False, indent=2)

    def save(self, path: Path) -> None:
        """保存到文件"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(), encoding='utf-8')

    @classmethod
    def from_json(cls, json_str: str) -> 'PackagingConfig':
        """从 JSON 反序列化"""
        data = json.loads(json_str)
        return cls(
            game=_from_dict(GameSettings, data.get('game', {})),
            ios=_from_dict(IosPlatformSettings, data.get('ios', {})),
            build=_from_dict(BuildSettings, data.get('build', {})),
        )

    @classmethod
    def load(cls, path: Path) -> 'PackagingConfig':
        """从文件加载"""
        path = Path(path)
        return cls.from_json(path.read_text(encoding='utf-8'))


def load_packaging_config(path: Optional[Path]) -> PackagingConfig:
    """加载打包配置，未指定路径时使用默认值"""
    if path is None:
        return PackagingConfig()
    return PackagingConfig.load(path)
