"""
Packaging Pipeline - iOS 打包流程

Turns a cooked build output folder into a ready-to-build Xcode project:

    1. 解析应用标识符
    2. 部署项目模板
    3. 初始化占位符映射
    4. 修正许可文件名
    5. 扫描输出文件并生成项目对象图
    6. 执行 install_name_tool 修正（失败仅警告）
    7. 替换 project.pbxproj 中的占位符
    8. 打包（可跳过）

Any terminal error stops the run; the run is never resumed.
"""
from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .bundle_id import get_app_name, resolve_app_identifier
from .errors import FixupWarning, PackagingError
from .fixups import Runner, run_fixups
from .identifiers import IdentifierGenerator
from .platform_settings import PackagingConfig
from .project_graph import GENERATED_SECTIONS, FixupCommand, ProjectGraphBuilder, scan_output_files
from .project_template import (
    DEFAULT_TEMPLATE_DIR,
    deploy_template,
    project_file_path,
    rename_license_files,
)
from .substitution import replace_in_file

logger = logging.getLogger(__name__)


@dataclass
class CookingData:
    """一次打包的路径信息"""
    output_path: Path
    template_dir: Path = DEFAULT_TEMPLATE_DIR
    game_folder: str = "Game"

    def __post_init__(self):
        self.output_path = Path(self.output_path)
        self.template_dir = Path(self.template_dir)

    @property
    def data_output_path(self) -> Path:
        return self.output_path / self.game_folder / "Data"

    @property
    def project_file(self) -> Path:
        return project_file_path(self.output_path, self.game_folder)


def on_build_started(data: CookingData) -> Path:
    """烘焙输出统一写入 <game>/Data"""
    data.data_output_path.mkdir(parents=True, exist_ok=True)
    return data.data_output_path


@dataclass
class PackagingResult:
    success: bool
    error: Optional[str] = None
    project_file: Optional[Path] = None
    fixups: List[FixupCommand] = field(default_factory=list)
    warnings: List[FixupWarning] = field(default_factory=list)
    diagnostics: List[str] = field(default_factory=list)
    packaged: bool = False

    @property
    def message(self) -> str:
        if not self.success:
            return f"Packaging failed: {self.error}"
        if self.warnings:
            return f"Packaging finished with {len(self.warnings)} warning(s): {self.project_file}"
        return f"Packaging finished: {self.project_file}"


class PackagingPipeline:
    """
    iOS 打包流程

    Args:
        config: 打包配置
        data: 路径信息
        ids: ID 生成器（测试时可注入）
        runner: 外部进程执行函数，签名同 subprocess.run
        package_files: 通用文件打包步骤（由外部烘焙器提供）
        export_archive: 归档/导出步骤（可选扩展点）
    """

    def __init__(
        self,
        config: PackagingConfig,
        data: CookingData,
        ids: Optional[IdentifierGenerator] = None,
        runner: Runner = subprocess.run,
        package_files: Optional[Callable[[], None]] = None,
        export_archive: Optional[Callable[[Path], None]] = None,
    ):
        self.config = config
        self.data = data
        self.ids = ids
        self.runner = runner
        self.package_files = package_files
        self.export_archive = export_archive

    def seed_tokens(self, app_identifier: str) -> Dict[str, str]:
        game = self.config.game
        ios = self.config.ios
        build = self.config.build
        tokens = {
            "${AppName}": get_app_name(game.product_name),
            "${AppIdentifier}": app_identifier,
            "${AppTeamId}": ios.app_team_id,
            "${AppVersion}": ios.app_version,
            "${ProjectName}": game.product_name,
            "${ProjectVersion}": game.project_version,
            "${HeaderSearchPaths}": build.header_search_paths or str(Path.cwd()),
        }
        # 自动生成区域初始为空
        for key in GENERATED_SECTIONS:
            tokens[key] = ""
        return tokens

    def run(self) -> PackagingResult:
        try:
            return self._run()
        except PackagingError as e:
            logger.error("%s", e)
            return PackagingResult(success=False, error=str(e))

    def _run(self) -> PackagingResult:
        config = self.config
        data = self.data

        app_identifier = resolve_app_identifier(
            config.ios.app_identifier,
            config.game.product_name,
            config.game.company_name,
        )

        deploy_template(data.template_dir, data.output_path)

        tokens = self.seed_tokens(app_identifier)

        renamed = rename_license_files(data.data_output_path)
        if renamed:
            logger.info("Renamed %d license file(s)", renamed)

        artifacts = scan_output_files(data.data_output_path)
        # 每次运行使用新的 ID 生成器
        ids = self.ids if self.ids is not None else IdentifierGenerator()
        builder = ProjectGraphBuilder(game_folder=data.game_folder, ids=ids)
        generated, fixups = builder.build(artifacts)
        tokens.update(generated)
        logger.info("Project graph: %d file(s), %d library fix-up(s)", len(artifacts), len(fixups))

        warnings = run_fixups(fixups, runner=self.runner)

        coverage = replace_in_file(data.project_file, tokens, check=config.build.debug)
        diagnostics = coverage.diagnostics() if coverage is not None else []
        for line in diagnostics:
            logger.warning("%s", line)

        if config.ios.icon:
            self._write_icon_set(Path(config.ios.icon), diagnostics)

        result = PackagingResult(
            success=True,
            project_file=data.project_file,
            fixups=fixups,
            warnings=warnings,
            diagnostics=diagnostics,
        )

        if config.build.skip_packaging:
            return result

        if self.package_files is not None:
            self.package_files()
        logger.info("Building app package...")
        if self.export_archive is not None:
            self.export_archive(data.output_path)
        result.packaged = True
        return result

    def _write_icon_set(self, icon: Path, diagnostics: List[str]) -> None:
        # pygame 经 icon_set 导入（已隐藏欢迎信息）
        from .icon_set import generate_icon_set, icon_set_dir, pygame

        try:
            generate_icon_set(icon, icon_set_dir(self.data.output_path, self.data.game_folder))
        except (pygame.error, OSError) as e:
            message = f"Failed to update app icon from {icon}: {e}"
            logger.warning("%s", message)
            diagnostics.append(message)


def package(
    config: PackagingConfig,
    output_path: Path,
    template_dir: Optional[Path] = None,
    **kwargs,
) -> PackagingResult:
    """便捷入口"""
    data = CookingData(
        output_path=output_path,
        template_dir=template_dir or DEFAULT_TEMPLATE_DIR,
        game_folder=config.build.game_folder,
    )
    return PackagingPipeline(config, data, **kwargs).run()
