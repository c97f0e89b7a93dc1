from __future__ import annotations

import subprocess
from dataclasses import dataclass


@dataclass(frozen=True)
class GitInfo:
    commit: str | None
    branch: str | None
    dirty: bool


def _run(cmd: list[str]) -> str:
    return subprocess.check_output(cmd, text=True, stderr=subprocess.DEVNULL).strip()


def get_git_info() -> GitInfo:
    # git이 없거나 저장소 밖에서 실행되면 빈 정보로 대체
    try:
        commit = _run(["git", "rev-parse", "HEAD"])
        branch = _run(["git", "rev-parse", "--abbrev-ref", "HEAD"])
        dirty = bool(_run(["git", "status", "--porcelain"]))
    except (OSError, subprocess.CalledProcessError):
        return GitInfo(commit=None, branch=None, dirty=False)
    return GitInfo(commit=commit, branch=branch, dirty=dirty)
