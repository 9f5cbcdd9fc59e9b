"""Runs the queued install_name_tool fix-ups (best effort)."""
from __future__ import annotations

import logging
import subprocess
from typing import Callable, Iterable, List

from .errors import FixupWarning
from .project_graph import FixupCommand

logger = logging.getLogger(__name__)

Runner = Callable[..., "subprocess.CompletedProcess"]


def run_fixups(commands: Iterable[FixupCommand], runner: Runner = subprocess.run) -> List[FixupWarning]:
    """
    依次执行修正命令；失败只记录警告，不中断打包

    Returns:
        失败命令的警告列表
    """
    warnings: List[FixupWarning] = []
    for cmd in commands:
        logger.info("Running: %s", cmd.command_line)
        try:
            res = runner(cmd.args, check=False)
        except FileNotFoundError:
            warning = FixupWarning(cmd.command_line, None, f"{cmd.tool} not found")
        except OSError as e:
            # 无执行权限等启动失败
            warning = FixupWarning(cmd.command_line, None, str(e))
        else:
            if res.returncode == 0:
                continue
            warning = FixupWarning(cmd.command_line, res.returncode)
        logger.warning("%s", warning)
        warnings.append(warning)
    return warnings
