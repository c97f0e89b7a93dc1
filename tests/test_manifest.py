from __future__ import annotations

import json
from pathlib import Path

import pytest

from pascalfeat.tracking.manifest import prepare_run_dir, write_run_manifest
from pascalfeat.tracking.read import get_latest_run_id, get_run_file, get_run_manifest


def _write(artifacts_root: Path, run_id: str, **kw) -> Path:
    run_dir, created_at = prepare_run_dir(
        run_id=run_id, kind="generate", artifacts_root=artifacts_root
    )
    (run_dir / "report.txt").write_text("hello", encoding="utf-8")
    return write_run_manifest(
        run_id=run_id,
        kind="generate",
        status="success",
        run_dir=run_dir,
        created_at=created_at,
        artifacts_root=artifacts_root,
        summary={"total_features": 1},
        files={"report": "report.txt"},
        **kw,
    )


def test_manifest_and_pointers(tmp_path: Path) -> None:
    ar = tmp_path / "artifacts"
    mp = _write(ar, "run-0001-abcdef")

    assert mp.name == "manifest.json"
    assert "generate_run0001a" in mp.parent.name
    assert (ar / "runs" / "_by_id" / "run-0001-abcdef.json").exists()
    assert get_latest_run_id(ar) == "run-0001-abcdef"

    manifest = get_run_manifest(ar, "run-0001-abcdef")
    assert manifest is not None
    assert manifest["summary"] == {"total_features": 1}
    assert get_run_file(ar, "run-0001-abcdef", "report").read_text(encoding="utf-8") == "hello"


def test_write_latest_false_keeps_previous_pointer(tmp_path: Path) -> None:
    ar = tmp_path / "artifacts"
    _write(ar, "first")
    _write(ar, "second", write_latest=False)

    assert get_latest_run_id(ar) == "first"
    assert get_run_manifest(ar, "second") is not None


def test_missing_run_and_file(tmp_path: Path) -> None:
    ar = tmp_path / "artifacts"
    assert get_latest_run_id(ar) is None
    assert get_run_manifest(ar, "nope") is None
    with pytest.raises(FileNotFoundError):
        get_run_file(ar, "nope", "report")

    _write(ar, "r1")
    with pytest.raises(FileNotFoundError):
        get_run_file(ar, "r1", "results")


def test_pointer_with_stale_path_falls_back_to_run_dir_name(tmp_path: Path) -> None:
    ar = tmp_path / "artifacts"
    _write(ar, "r2")

    p = ar / "runs" / "_by_id" / "r2.json"
    pointer = json.loads(p.read_text(encoding="utf-8"))
    pointer["manifest_path"] = "/elsewhere/on/another/machine/manifest.json"
    p.write_text(json.dumps(pointer), encoding="utf-8")

    assert get_run_manifest(ar, "r2")["run_id"] == "r2"
