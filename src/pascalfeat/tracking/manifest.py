from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class RunManifest:
    run_id: str
    run_dir_name: str
    created_at: str
    kind: str
    status: str
    artifacts_dir: str
    params: Dict[str, Any]
    summary: Dict[str, Any]
    files: Dict[str, str] = field(default_factory=dict)
    build: Dict[str, Any] = field(default_factory=dict)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _slug(s: str) -> str:
    """Filesystem-safe short slug."""
    s = s.strip()
    s = re.sub(r"[^0-9A-Za-z]+", "_", s)
    s = re.sub(r"_+", "_", s).strip("_")
    return s or "run"


def default_run_dir_name(*, run_id: str, kind: str, created_dt: datetime) -> str:
    # 예: 20261017_163015_generate_2fef9e39
    ts = created_dt.strftime("%Y%m%d_%H%M%S")
    short = re.sub(r"[^0-9A-Za-z]", "", run_id)[:8] or run_id[:8]
    return f"{ts}_{_slug(kind)}_{short}"


def prepare_run_dir(
    *,
    run_id: str,
    kind: str,
    artifacts_root: Path = Path("artifacts"),
    run_dir_name: str | None = None,
) -> tuple[Path, str]:
    """manifest를 쓰기 전에 리포트/CSV를 먼저 넣을 run 디렉터리를 만든다."""
    created_dt = _utc_now()
    if run_dir_name is None:
        run_dir_name = default_run_dir_name(run_id=run_id, kind=kind, created_dt=created_dt)

    run_dir = artifacts_root / "runs" / run_dir_name
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir, created_dt.isoformat()


def _write_pointer(p: Path, payload: dict[str, Any]) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def write_run_manifest(
    *,
    run_id: str,
    kind: str,
    status: str,
    run_dir: Path,
    created_at: str,
    artifacts_root: Path = Path("artifacts"),
    params: Optional[Dict[str, Any]] = None,
    summary: Optional[Dict[str, Any]] = None,
    files: Optional[Dict[str, str]] = None,
    build: Optional[Dict[str, Any]] = None,
    write_latest: bool = True,
) -> Path:
    """
    - run_id(UUID)는 조회용 식별자로 유지
    - 폴더명은 사람이 읽기 쉬운 run_dir_name(YYYYMMDD_HHMMSS_kind_shortid)
    - run_id로도 찾기 쉽도록 artifacts/runs/_by_id/<run_id>.json 포인터 기록
    - files: 논리 이름 -> run 디렉터리 기준 상대 경로 (예: {"report": "report.txt"})
    """
    manifest = RunManifest(
        run_id=run_id,
        run_dir_name=run_dir.name,
        created_at=created_at,
        kind=kind,
        status=status,
        artifacts_dir=run_dir.as_posix(),
        params=params or {},
        summary=summary or {},
        files=files or {},
        build=build or {},
    )

    manifest_path = run_dir / "manifest.json"
    manifest_path.write_text(
        json.dumps(asdict(manifest), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )

    pointer = {
        "run_id": run_id,
        "run_dir_name": run_dir.name,
        "manifest_path": manifest_path.as_posix(),
        "created_at": created_at,
    }
    _write_pointer(artifacts_root / "runs" / "_by_id" / f"{run_id}.json", pointer)
    if write_latest:
        _write_pointer(artifacts_root / "runs" / "_latest.json", pointer)

    return manifest_path
