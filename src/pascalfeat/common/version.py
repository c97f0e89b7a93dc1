from __future__ import annotations

import sys
from importlib import metadata

from pascalfeat.common.gitinfo import get_git_info
from pascalfeat.features.estimator import DEFAULT_MAX_DEGREE, INTERACTION_CAP


def _safe_pkg_version(name: str) -> str | None:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return None


def get_build_info() -> dict[str, object]:
    """빌드/실행 식별 정보.

    - API /version 과 run manifest에 함께 기록해서 "어떤 커밋으로 만든 리포트인가"를 추적.
    """
    git = get_git_info()
    pkg_version = _safe_pkg_version("pascalfeat")

    return {
        "package": {"name": "pascalfeat", "version": pkg_version},
        "git": {"commit": git.commit, "branch": git.branch, "dirty": git.dirty},
        "python": {"version": sys.version.split()[0]},
        # 같은 입력이라도 상수가 바뀌면 피처 수가 달라지므로 함께 기록
        "estimator": {
            "default_max_degree": DEFAULT_MAX_DEGREE,
            "interaction_cap": INTERACTION_CAP,
        },
    }
