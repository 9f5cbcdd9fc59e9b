"""
Packaging Errors - 打包错误类型

Terminal errors abort the pipeline; ``FixupWarning`` is only recorded.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class PackagingError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class InvalidIdentifier(PackagingError):
    identifier: str = ""

    def __str__(self) -> str:
        return f"{self.message} (identifier: '{self.identifier}')"


@dataclass
class DeploymentError(PackagingError):
    source: Optional[Path] = None
    destination: Optional[Path] = None
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        reason = f": {self.cause}" if self.cause else ""
        return f"{self.message} (from {self.source} to {self.destination}){reason}"


@dataclass
class SubstitutionError(PackagingError):
    path: Optional[Path] = None
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        reason = f": {self.cause}" if self.cause else ""
        return f"{self.message} ({self.path}){reason}"


@dataclass
class FixupWarning:
    """非致命: install_name_tool 返回非零"""
    command: str
    returncode: Optional[int] = None
    detail: str = ""

    def __str__(self) -> str:
        code = "not run" if self.returncode is None else f"exit code {self.returncode}"
        extra = f": {self.detail}" if self.detail else ""
        return f"Fix-up failed ({code}): {self.command}{extra}"
