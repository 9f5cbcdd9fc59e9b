"""
Template Substitution - 模板占位符替换

Replaces literal ``${Name}`` placeholders in a file. Placeholders missing from
the token map and tokens never found are ignored unless a coverage check is
requested.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from .errors import SubstitutionError

PLACEHOLDER_PATTERN = re.compile(r"\$\{[A-Za-z_][A-Za-z0-9_]*\}")


@dataclass
class PlaceholderCoverage:
    """占位符覆盖检查结果"""
    missing: List[str] = field(default_factory=list)   # 模板中有、映射中没有
    unused: List[str] = field(default_factory=list)    # 映射中有、模板中没有

    @property
    def ok(self) -> bool:
        return not self.missing and not self.unused

    def diagnostics(self) -> List[str]:
        return (
            [f"MissingPlaceholder: {name}" for name in self.missing]
            + [f"UnusedToken: {name}" for name in self.unused]
        )


def find_placeholders(text: str) -> List[str]:
    """按出现顺序返回去重后的占位符"""
    return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(text)))


def check_coverage(text: str, tokens: Mapping[str, str]) -> PlaceholderCoverage:
    present = find_placeholders(text)
    return PlaceholderCoverage(
        missing=[name for name in present if name not in tokens],
        unused=[key for key in tokens if key not in text],
    )


def substitute(text: str, tokens: Mapping[str, str]) -> str:
    for key, value in tokens.items():
        text = text.replace(key, value)
    return text


def replace_in_file(
    path: Path,
    tokens: Mapping[str, str],
    check: bool = False,
) -> Optional[PlaceholderCoverage]:
    """
    替换文件中的占位符并写回

    Args:
        path: 模板文件
        tokens: 占位符 -> 替换文本
        check: 是否返回覆盖检查结果

    Raises:
        SubstitutionError: 读取或写入失败
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SubstitutionError("Failed to read project file", path=path, cause=e) from e

    coverage = check_coverage(text, tokens) if check else None

    try:
        path.write_text(substitute(text, tokens), encoding="utf-8")
    except OSError as e:
        raise SubstitutionError("Failed to write project file", path=path, cause=e) from e
    return coverage
