from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from pascalfeat.common.errors import InvalidArgumentError


@dataclass(frozen=True)
class Settings:
    artifacts_dir: str
    catalog_path: str | None
    max_degree: int
    min_datasets: int
    seed: int | None
    log_level: str


def _env_opt_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidArgumentError(f"{name} must be an integer, got {raw!r}") from e


def _env_int(name: str, default: int) -> int:
    v = _env_opt_int(name)
    return default if v is None else v


def get_settings() -> Settings:
    # 로컬 개발에서는 .env가 있으면 읽고, 배포에서는 환경변수만으로 동작
    load_dotenv(override=False)

    artifacts_dir = os.getenv("PASCALFEAT_ARTIFACTS", "artifacts")
    catalog_path = os.getenv("PASCALFEAT_CATALOG") or None

    Path(artifacts_dir).mkdir(parents=True, exist_ok=True)

    return Settings(
        artifacts_dir=artifacts_dir,
        catalog_path=catalog_path,
        max_degree=_env_int("PASCALFEAT_MAX_DEGREE", 4),
        min_datasets=_env_int("PASCALFEAT_MIN_DATASETS", 5),
        seed=_env_opt_int("PASCALFEAT_SEED"),
        log_level=os.getenv("PASCALFEAT_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
