"""
Project Template - Xcode 项目模板

部署静态 Xcode 项目模板，并在生成前修正输出目录
"""
from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import DeploymentError
from .substitution import find_placeholders

logger = logging.getLogger(__name__)

# 内置模板
DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "ios"

PROJECT_FILE = "project.pbxproj"

RECOGNIZED_PLACEHOLDERS = (
    "${AppName}",
    "${AppIdentifier}",
    "${AppTeamId}",
    "${AppVersion}",
    "${ProjectName}",
    "${ProjectVersion}",
    "${HeaderSearchPaths}",
    "${PBXBuildFile}",
    "${PBXCopyFilesBuildPhaseFiles}",
    "${PBXFileReference}",
    "${PBXFrameworksBuildPhase}",
    "${PBXFrameworksGroup}",
    "${PBXFilesGroup}",
    "${PBXResourcesGroup}",
)

# .NET 许可文件改名，避免与游戏自身的许可混淆
LICENSE_RENAMES = (
    ("Dotnet/DOTNET-LICENSE.TXT", "Dotnet/LICENSE.TXT"),
    ("Dotnet/DOTNET-THIRD-PARTY-NOTICES.TXT", "Dotnet/THIRD-PARTY-NOTICES.TXT"),
)


def project_file_path(project_dir: Path, game_folder: str = "Game") -> Path:
    return Path(project_dir) / f"{game_folder}.xcodeproj" / PROJECT_FILE


def deploy_template(source_dir: Path, dest_dir: Path) -> Path:
    """
    复制项目模板到输出目录（覆盖已有文件）

    Raises:
        DeploymentError: 复制失败
    """
    source_dir = Path(source_dir)
    dest_dir = Path(dest_dir)
    if not source_dir.is_dir():
        raise DeploymentError(
            "Failed to deploy XCode project: template directory not found",
            source=source_dir,
            destination=dest_dir,
        )
    try:
        shutil.copytree(source_dir, dest_dir, dirs_exist_ok=True)
    except (OSError, shutil.Error) as e:
        raise DeploymentError(
            "Failed to deploy XCode project",
            source=source_dir,
            destination=dest_dir,
            cause=e,
        ) from e
    logger.info("Deployed XCode project to %s from %s", dest_dir, source_dir)
    return dest_dir


def rename_license_files(data_dir: Path) -> int:
    """Returns the number of files renamed; absent sources are skipped."""
    data_dir = Path(data_dir)
    renamed = 0
    for src_rel, dst_rel in LICENSE_RENAMES:
        src = data_dir / src_rel
        if not src.is_file():
            continue
        src.replace(data_dir / dst_rel)
        renamed += 1
    return renamed


def validate_template(template_dir: Optional[Path] = None, game_folder: str = "Game") -> Dict[str, Any]:
    """
    验证模板完整性

    Returns:
        验证结果字典
    """
    template_dir = Path(template_dir) if template_dir is not None else DEFAULT_TEMPLATE_DIR

    result: Dict[str, Any] = {
        "valid": True,
        "errors": [],
        "warnings": [],
        "info": {},
    }

    project_file = project_file_path(template_dir, game_folder)
    if not project_file.exists():
        result["errors"].append(f"Missing project file: {project_file.relative_to(template_dir).as_posix()}")
        result["valid"] = False
        return result

    present = find_placeholders(project_file.read_text(encoding="utf-8"))
    for name in present:
        if name not in RECOGNIZED_PLACEHOLDERS:
            result["errors"].append(f"Unknown placeholder: {name}")
            result["valid"] = False
    for name in RECOGNIZED_PLACEHOLDERS:
        if name not in present:
            result["warnings"].append(f"Placeholder not used: {name}")

    if not (template_dir / game_folder).is_dir():
        result["warnings"].append(f"Missing game folder: {game_folder}")

    result["info"]["placeholders"] = len(present)
    return result
