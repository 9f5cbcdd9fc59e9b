"""
Project Graph - Xcode 项目对象图生成

Walks the cooked output files and produces the generated sections of
``project.pbxproj``:

    ${PBXBuildFile}                  build-file entries
    ${PBXFileReference}              file-reference entries
    ${PBXCopyFilesBuildPhaseFiles}   "Embed Frameworks" copy phase members
    ${PBXFrameworksBuildPhase}       frameworks build phase members
    ${PBXFrameworksGroup}            Frameworks group members
    ${PBXFilesGroup}                 Data group members
    ${PBXResourcesGroup}             resources build phase members

Every ID listed as a member is the subject of exactly one entry.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .identifiers import IdentifierGenerator
from .platform_settings import NATIVE_LIBRARY_EXTENSION

# ============================================================================
# 常量定义
# ============================================================================

PBX_BUILD_FILE = "${PBXBuildFile}"
PBX_COPY_FILES_BUILD_PHASE_FILES = "${PBXCopyFilesBuildPhaseFiles}"
PBX_FILE_REFERENCE = "${PBXFileReference}"
PBX_FRAMEWORKS_BUILD_PHASE = "${PBXFrameworksBuildPhase}"
PBX_FRAMEWORKS_GROUP = "${PBXFrameworksGroup}"
PBX_FILES_GROUP = "${PBXFilesGroup}"
PBX_RESOURCES_GROUP = "${PBXResourcesGroup}"

GENERATED_SECTIONS = (
    PBX_BUILD_FILE,
    PBX_COPY_FILES_BUILD_PHASE_FILES,
    PBX_FILE_REFERENCE,
    PBX_FRAMEWORKS_BUILD_PHASE,
    PBX_FRAMEWORKS_GROUP,
    PBX_FILES_GROUP,
    PBX_RESOURCES_GROUP,
)

MEMBERSHIP_SECTIONS = (
    PBX_COPY_FILES_BUILD_PHASE_FILES,
    PBX_FRAMEWORKS_BUILD_PHASE,
    PBX_FRAMEWORKS_GROUP,
    PBX_FILES_GROUP,
    PBX_RESOURCES_GROUP,
)

EXCLUDED_NAMES = frozenset({".DS_Store"})

INSTALL_NAME_TOOL = "install_name_tool"

DYLIB_FILE_TYPE = '"compiled.mach-o.dylib"'
RESOURCE_FILE_TYPE = "file"


class ArtifactKind(Enum):
    RESOURCE = 0
    DYNAMIC_LIBRARY = 1


def classify(name: str) -> ArtifactKind:
    if name.endswith(NATIVE_LIBRARY_EXTENSION):
        return ArtifactKind.DYNAMIC_LIBRARY
    return ArtifactKind.RESOURCE


# ============================================================================
# 数据结构
# ============================================================================

@dataclass(frozen=True)
class OutputArtifact:
    """烘焙输出文件"""
    name: str
    relative_path: str                  # 相对 Data 目录, POSIX 风格
    kind: ArtifactKind
    absolute_path: Optional[Path] = None

    @classmethod
    def from_file(cls, path: Path, data_root: Path) -> 'OutputArtifact':
        path = Path(path)
        return cls(
            name=path.name,
            relative_path=path.relative_to(data_root).as_posix(),
            kind=classify(path.name),
            absolute_path=path,
        )

    @property
    def is_library(self) -> bool:
        return self.kind == ArtifactKind.DYNAMIC_LIBRARY


@dataclass(frozen=True)
class FixupCommand:
    """install_name_tool -id "@rpath/<name>" "<path>" """
    name: str
    path: Path
    tool: str = INSTALL_NAME_TOOL

    @property
    def args(self) -> List[str]:
        return [self.tool, "-id", f"@rpath/{self.name}", str(self.path)]

    @property
    def command_line(self) -> str:
        return f'{self.tool} -id "@rpath/{self.name}" "{self.path}"'


@dataclass
class BuildFileEntry:
    id: str
    name: str
    file_ref: str
    phase: str                          # Frameworks / Embed Frameworks / Resources
    code_sign_on_copy: bool = False

    @property
    def label(self) -> str:
        return f"{self.name} in {self.phase}"

    def render(self) -> str:
        settings = " settings = {ATTRIBUTES = (CodeSignOnCopy, ); };" if self.code_sign_on_copy else ""
        return (
            f"\t\t{self.id} /* {self.label} */ = {{isa = PBXBuildFile; "
            f"fileRef = {self.file_ref} /* {self.name} */;{settings} }};\n"
        )


@dataclass
class FileReferenceEntry:
    id: str
    name: str
    path: str
    file_type: str

    @property
    def label(self) -> str:
        return self.name

    def render(self) -> str:
        return (
            f"\t\t{self.id} /* {self.name} */ = {{isa = PBXFileReference; "
            f"lastKnownFileType = {self.file_type}; name = \"{self.name}\"; "
            f"path = \"{self.path}\"; sourceTree = \"<group>\"; }};\n"
        )


@dataclass
class ProjectGraph:
    build_files: List[BuildFileEntry] = field(default_factory=list)
    file_references: List[FileReferenceEntry] = field(default_factory=list)
    # section -> [(id, label)]
    memberships: Dict[str, List[Tuple[str, str]]] = field(
        default_factory=lambda: {key: [] for key in MEMBERSHIP_SECTIONS}
    )

    def add_member(self, section: str, object_id: str, label: str) -> None:
        self.memberships[section].append((object_id, label))

    def subjects(self) -> List[str]:
        """所有条目的主体 ID（按生成顺序）"""
        return [e.id for e in self.build_files] + [e.id for e in self.file_references]

    def dangling_references(self) -> List[str]:
        """被引用但没有对应条目的 ID"""
        known: Set[str] = set(self.subjects())
        refs = [e.file_ref for e in self.build_files]
        for members in self.memberships.values():
            refs.extend(object_id for object_id, _ in members)
        return [r for r in refs if r not in known]

    def to_tokens(self) -> Dict[str, str]:
        tokens = {key: "" for key in GENERATED_SECTIONS}
        tokens[PBX_BUILD_FILE] = "".join(e.render() for e in self.build_files)
        tokens[PBX_FILE_REFERENCE] = "".join(e.render() for e in self.file_references)
        for section, members in self.memberships.items():
            tokens[section] = "".join(
                f"\t\t\t\t{object_id} /* {label} */,\n" for object_id, label in members
            )
        return tokens


# ============================================================================
# 构建器
# ============================================================================

class ProjectGraphBuilder:
    """
    Builds the project graph from the output artifacts, in scan order.

    Args:
        game_folder: 游戏目录名（也是需要跳过的可执行文件名）
        ids: ID 生成器
    """

    def __init__(
        self,
        game_folder: str = "Game",
        ids: Optional[IdentifierGenerator] = None,
        excluded_names: Iterable[str] = EXCLUDED_NAMES,
    ):
        self.game_folder = game_folder
        self.ids = ids if ids is not None else IdentifierGenerator()
        self.excluded_names = frozenset(excluded_names) | {game_folder}
        self.graph = ProjectGraph()
        self.fixups: List[FixupCommand] = []

    def is_excluded(self, artifact: OutputArtifact) -> bool:
        return artifact.name in self.excluded_names

    def add(self, artifact: OutputArtifact) -> None:
        if self.is_excluded(artifact):
            return
        file_id = self.ids.next()
        if artifact.is_library:
            self._add_library(artifact, file_id)
        else:
            self._add_resource(artifact, file_id)

    def _add_library(self, artifact: OutputArtifact, file_id: str) -> None:
        graph = self.graph
        name = artifact.name
        framework_id = self.ids.next()
        embed_id = self.ids.next()

        framework = BuildFileEntry(framework_id, name, file_id, "Frameworks")
        embed = BuildFileEntry(embed_id, name, file_id, "Embed Frameworks", code_sign_on_copy=True)
        graph.build_files += [framework, embed]
        graph.add_member(PBX_COPY_FILES_BUILD_PHASE_FILES, embed_id, embed.label)
        graph.file_references.append(FileReferenceEntry(
            file_id, name, f"{self.game_folder}/Data/{artifact.relative_path}", DYLIB_FILE_TYPE,
        ))
        graph.add_member(PBX_FRAMEWORKS_BUILD_PHASE, framework_id, framework.label)
        graph.add_member(PBX_FRAMEWORKS_GROUP, file_id, name)

        # 修正 rpath id
        path = artifact.absolute_path if artifact.absolute_path is not None else Path(artifact.relative_path)
        self.fixups.append(FixupCommand(name, path))

    def _add_resource(self, artifact: OutputArtifact, file_id: str) -> None:
        graph = self.graph
        name = artifact.name
        file_ref_id = self.ids.next()

        resource = BuildFileEntry(file_ref_id, name, file_id, "Resources")
        graph.build_files.append(resource)
        graph.file_references.append(FileReferenceEntry(
            file_id, name, f"Data/{artifact.relative_path}", RESOURCE_FILE_TYPE,
        ))
        graph.add_member(PBX_FILES_GROUP, file_id, name)
        graph.add_member(PBX_RESOURCES_GROUP, file_ref_id, resource.label)

    def build(self, artifacts: Iterable[OutputArtifact]) -> Tuple[Dict[str, str], List[FixupCommand]]:
        for artifact in artifacts:
            self.add(artifact)
        return self.graph.to_tokens(), list(self.fixups)


def scan_output_files(data_root: Path) -> List[OutputArtifact]:
    """递归扫描 Data 目录（排序以保证输出稳定）"""
    data_root = Path(data_root)
    if not data_root.exists():
        return []
    return [
        OutputArtifact.from_file(p, data_root)
        for p in sorted(data_root.rglob("*"))
        if p.is_file()
    ]
