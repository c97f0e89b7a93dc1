from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _read_json(p: Path) -> dict[str, Any] | None:
    if not p.exists():
        return None
    try:
        obj = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        logger.warning("broken pointer/manifest JSON: %s", p)
        return None
    return obj if isinstance(obj, dict) else None


def get_latest_run_id(artifacts_root: str | Path) -> str | None:
    p = _read_json(Path(artifacts_root) / "runs" / "_latest.json")
    if p and isinstance(p.get("run_id"), str):
        return p["run_id"]
    return None


def _manifest_path(artifacts_root: Path, run_id: str) -> Path | None:
    pointer = _read_json(artifacts_root / "runs" / "_by_id" / f"{run_id}.json")
    if pointer is None:
        return None

    # 포인터에 절대경로가 깨져 있으면 run_dir_name 기준으로 다시 찾는다
    mp = Path(str(pointer.get("manifest_path") or ""))
    if mp.is_file():
        return mp
    name = pointer.get("run_dir_name")
    if isinstance(name, str):
        alt = artifacts_root / "runs" / name / "manifest.json"
        if alt.is_file():
            return alt
    return None


def get_run_manifest(artifacts_root: str | Path, run_id: str) -> dict[str, Any] | None:
    """run_id 단건 manifest. 없으면 None."""
    ar = Path(artifacts_root)
    mp = _manifest_path(ar, run_id)
    if mp is None:
        return None
    return _read_json(mp)


def get_run_file(artifacts_root: str | Path, run_id: str, name: str) -> Path:
    """manifest.files[name]이 가리키는 파일 경로. 없으면 FileNotFoundError."""
    ar = Path(artifacts_root)
    mp = _manifest_path(ar, run_id)
    if mp is None:
        raise FileNotFoundError(f"run not found: {run_id}")

    manifest = _read_json(mp) or {}
    rel = (manifest.get("files") or {}).get(name)
    if not rel:
        raise FileNotFoundError(f"run {run_id} has no '{name}' file")

    p = mp.parent / str(rel)
    if not p.is_file():
        raise FileNotFoundError(str(p))
    return p
