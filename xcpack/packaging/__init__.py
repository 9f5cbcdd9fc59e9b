"""
xcpack Packaging Module
iOS 打包：把烘焙输出转换为 Xcode 项目

包含:
- identifiers: Xcode 对象 ID 生成
- bundle_id: 应用标识符解析
- texture_format: 纹理格式降级
- project_template: 模板部署与验证
- project_graph: 项目对象图生成
- fixups: install_name_tool 修正
- substitution: 占位符替换
- icon_set: 应用图标生成
- pipeline: 打包流程
"""

from .errors import (
    PackagingError,
    InvalidIdentifier,
    DeploymentError,
    SubstitutionError,
    FixupWarning,
)

from .identifiers import IdentifierGenerator, new_object_id

from .bundle_id import clean_name, get_app_name, resolve_app_identifier

from .texture_format import PixelFormat, is_compressed_bc, downgrade

from .platform_settings import (
    GameSettings,
    IosPlatformSettings,
    BuildSettings,
    PackagingConfig,
    load_packaging_config,
    is_native_code_file,
)

from .project_template import (
    deploy_template,
    rename_license_files,
    validate_template,
)

from .project_graph import (
    ArtifactKind,
    OutputArtifact,
    FixupCommand,
    ProjectGraph,
    ProjectGraphBuilder,
    scan_output_files,
)

from .fixups import run_fixups

from .substitution import PlaceholderCoverage, replace_in_file

from .icon_set import generate_icon_set

from .pipeline import (
    CookingData,
    PackagingResult,
    PackagingPipeline,
    on_build_started,
    package,
)

__all__ = [
    # Errors
    'PackagingError',
    'InvalidIdentifier',
    'DeploymentError',
    'SubstitutionError',
    'FixupWarning',
    # Identifiers
    'IdentifierGenerator',
    'new_object_id',
    'clean_name',
    'get_app_name',
    'resolve_app_identifier',
    # Texture
    'PixelFormat',
    'is_compressed_bc',
    'downgrade',
    # Settings
    'GameSettings',
    'IosPlatformSettings',
    'BuildSettings',
    'PackagingConfig',
    'load_packaging_config',
    'is_native_code_file',
    # Template
    'deploy_template',
    'rename_license_files',
    'validate_template',
    # Project Graph
    'ArtifactKind',
    'OutputArtifact',
    'FixupCommand',
    'ProjectGraph',
    'ProjectGraphBuilder',
    'scan_output_files',
    'run_fixups',
    'PlaceholderCoverage',
    'replace_in_file',
    'generate_icon_set',
    # Pipeline
    'CookingData',
    'PackagingResult',
    'PackagingPipeline',
    'on_build_started',
    'package',
]
