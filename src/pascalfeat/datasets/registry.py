from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pascalfeat.common.errors import InvalidArgumentError


def _as_count(ds_id: str, key: str, raw: Any) -> int:
    # bool/소수/문자열은 거부, 4.0 같은 정수값 float만 허용
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise InvalidArgumentError(f"{key} must be an integer for dataset {ds_id}: {raw!r}")
    if raw < 0:
        raise InvalidArgumentError(f"{key} must be >= 0 for dataset {ds_id}")
    return raw


def _read_json(p: Path) -> Any:
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(f"invalid JSON in {p}: {e}") from e


@dataclass(frozen=True)
class DatasetSpec:
    """카탈로그에 올라가는 데이터셋 설명.

    - id: 선택/조회 키 (예: iris)
    - name: 리포트 표시용 이름
    - problem: 해결하려는 문제 라벨 (예: Disease diagnosis)
    - n_features: 원본 피처 수. 추정기는 이 값만 읽는다
    - n_samples: 샘플 수(표시용, 선택)
    """

    id: str
    name: str
    problem: str
    n_features: int
    n_samples: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "problem": self.problem,
            "n_features": self.n_features,
            "n_samples": self.n_samples,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "DatasetSpec":
        ds_id = str(d.get("id") or "").strip()
        if not ds_id:
            raise InvalidArgumentError("dataset id is required")

        # 원본 카탈로그 키(features/samples)도 허용
        raw_features = d.get("n_features", d.get("features"))
        if raw_features is None:
            raise InvalidArgumentError(f"n_features is required for dataset: {ds_id}")
        n_features = _as_count(ds_id, "n_features", raw_features)

        raw_samples = d.get("n_samples", d.get("samples"))
        n_samples = None if raw_samples is None else _as_count(ds_id, "n_samples", raw_samples)
        return DatasetSpec(
            id=ds_id,
            name=str(d.get("name") or ds_id),
            problem=str(d.get("problem") or ""),
            n_features=n_features,
            n_samples=n_samples,
        )

    @staticmethod
    def from_json(path: str | Path) -> "DatasetSpec":
        p = Path(path)
        obj = _read_json(p)
        if not isinstance(obj, dict):
            raise InvalidArgumentError("dataset spec JSON must be an object")
        return DatasetSpec.from_dict(obj)


_DATASETS: dict[str, DatasetSpec] = {}


def register_dataset(spec: DatasetSpec, *, overwrite: bool = False) -> None:
    k = spec.id.strip().lower()
    if not k:
        raise InvalidArgumentError("dataset id is required")
    if (k in _DATASETS) and (not overwrite):
        raise InvalidArgumentError(f"dataset already registered: {k}")
    _DATASETS[k] = spec


def unregister_dataset(dataset_id: str) -> None:
    _DATASETS.pop(dataset_id.strip().lower(), None)


def list_datasets() -> list[DatasetSpec]:
    """등록 순서 그대로 반환(카탈로그 표시 순서)."""
    return list(_DATASETS.values())


def get_dataset(dataset_id: str) -> DatasetSpec:
    k = dataset_id.strip().lower()
    if k not in _DATASETS:
        known = ", ".join(_DATASETS.keys()) or "(none)"
        raise InvalidArgumentError(f"unknown dataset id: {k} (known: {known})")
    return _DATASETS[k]


def select_datasets(
    ids: Iterable[str], catalog: Sequence[DatasetSpec] | None = None
) -> list[DatasetSpec]:
    """선택한 id 순서대로 DatasetSpec을 돌려준다. 중복 id는 한 번만."""
    if catalog is None:
        lookup = dict(_DATASETS)
    else:
        lookup = {spec.id.strip().lower(): spec for spec in catalog}

    out: list[DatasetSpec] = []
    seen: set[str] = set()
    missing: list[str] = []
    for raw in ids:
        k = str(raw).strip().lower()
        if not k or k in seen:
            continue
        seen.add(k)
        spec = lookup.get(k)
        if spec is None:
            missing.append(k)
            continue
        out.append(spec)

    if missing:
        known = ", ".join(lookup.keys()) or "(none)"
        raise InvalidArgumentError(f"unknown dataset id(s): {missing} (known: {known})")
    return out


def load_catalog(path: str | Path) -> list[DatasetSpec]:
    """JSON 카탈로그 로드. 최상위가 list 이거나 {"datasets": [...]} 형태."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))

    obj = _read_json(p)
    if isinstance(obj, dict):
        obj = obj.get("datasets")
    if not isinstance(obj, list):
        raise InvalidArgumentError("catalog JSON must be a list or an object with 'datasets'")

    specs: list[DatasetSpec] = []
    for item in obj:
        if not isinstance(item, dict):
            raise InvalidArgumentError("catalog entries must be objects")
        specs.append(DatasetSpec.from_dict(item))
    return specs


def register_catalog(path: str | Path, *, overwrite: bool = True) -> list[DatasetSpec]:
    specs = load_catalog(path)
    for spec in specs:
        register_dataset(spec, overwrite=overwrite)
    return specs
