from __future__ import annotations

import argparse
import logging
import sys
import uuid
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pascalfeat.common.config import get_settings
from pascalfeat.common.errors import InvalidArgumentError
from pascalfeat.common.version import get_build_info
from pascalfeat.datasets import DatasetSpec, list_datasets, load_catalog, select_datasets
from pascalfeat.metrics import MetricsGenerator, SimulatedMetricsGenerator
from pascalfeat.pipeline.aggregate import ProgressCallback, estimate
from pascalfeat.reporting import breakdown_frame, breakdown_pivot, results_frame, write_report
from pascalfeat.tracking.manifest import prepare_run_dir, write_run_manifest

logger = logging.getLogger(__name__)

RUN_KIND = "generate"


def _resolve_catalog(catalog_path: str | None) -> list[DatasetSpec]:
    if catalog_path:
        return load_catalog(catalog_path)
    return list_datasets()


def run_generation(
    *,
    dataset_ids: Sequence[str] | None = None,
    max_degree: int | None = None,
    seed: int | None = None,
    min_datasets: int | None = None,
    catalog_path: str | None = None,
    report_path: str | Path | None = None,
    metrics: MetricsGenerator | None = None,
    on_progress: ProgressCallback | None = None,
) -> dict[str, Any]:
    """데이터셋 선택 -> 추정/집계 -> 리포트/CSV/manifest 기록.

    dataset_ids가 None이면 카탈로그 전체를 카탈로그 순서로 사용한다.
    """
    s = get_settings()
    max_degree = s.max_degree if max_degree is None else max_degree
    min_datasets = s.min_datasets if min_datasets is None else min_datasets
    seed = s.seed if seed is None else seed

    # 1) catalog + selection
    catalog = _resolve_catalog(catalog_path or s.catalog_path)
    if dataset_ids is None:
        selected = list(catalog)
    else:
        selected = select_datasets(dataset_ids, catalog=catalog)

    if len(selected) < min_datasets:
        raise InvalidArgumentError(
            f"at least {min_datasets} datasets required, got {len(selected)}"
        )

    # 2) estimate (지표 생성기는 주입 가능, 기본은 시드 기반 시뮬레이션)
    generator = metrics if metrics is not None else SimulatedMetricsGenerator(seed=seed)
    aggregate = estimate(selected, max_degree, metrics=generator, on_progress=on_progress)
    logger.info(
        "generated %d features over %d datasets", aggregate.total_features, aggregate.n_datasets
    )

    # 3) run dir + 결과물
    run_id = str(uuid.uuid4())
    artifacts_root = Path(s.artifacts_dir)
    run_dir, created_at = prepare_run_dir(
        run_id=run_id, kind=RUN_KIND, artifacts_root=artifacts_root
    )

    report_file = write_report(aggregate, run_dir / "report.txt")
    results_frame(aggregate).to_csv(run_dir / "results.csv", index=False)
    breakdown_frame(aggregate).to_csv(run_dir / "breakdown.csv", index=False)

    export_path: Path | None = None
    if report_path is not None:
        export_path = write_report(aggregate, report_path)

    # 4) manifest
    summary = {
        "total_features": aggregate.total_features,
        "n_datasets": aggregate.n_datasets,
        "avg_efficiency_gain": aggregate.avg_efficiency_gain,
        "avg_accuracy_improvement": aggregate.avg_accuracy_improvement,
    }
    params = {
        "kind": RUN_KIND,
        "dataset_ids": [d.id for d in selected],
        "max_degree": max_degree,
        "seed": seed,
        "min_datasets": min_datasets,
        "catalog_path": catalog_path or s.catalog_path,
    }
    manifest_path = write_run_manifest(
        run_id=run_id,
        kind=RUN_KIND,
        status="success",
        run_dir=run_dir,
        created_at=created_at,
        artifacts_root=artifacts_root,
        params=params,
        summary=summary,
        files={
            "report": "report.txt",
            "results": "results.csv",
            "breakdown": "breakdown.csv",
        },
        build=get_build_info(),
    )

    return {
        "run_id": run_id,
        "run_dir": str(run_dir),
        "report_path": str(report_file),
        "export_path": str(export_path) if export_path is not None else None,
        "manifest_path": str(manifest_path),
        "summary": summary,
        "aggregate": aggregate,
    }


def _print_progress(pct: float) -> None:
    print(f"[..] processing datasets... {pct:.0f}%")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Generate a Pascal's Triangle feature report.")
    g = ap.add_mutually_exclusive_group(required=False)
    g.add_argument("--datasets", nargs="+", default=None, help="dataset ids in selection order")
    g.add_argument("--all", action="store_true", help="use the whole catalog (default)")
    ap.add_argument("--max-degree", type=int, default=None)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--min-datasets", type=int, default=None)
    ap.add_argument("--catalog", type=str, default=None, help="catalog JSON path")
    ap.add_argument("--out", type=str, default=None, help="extra copy of the report")
    ap.add_argument("--print", dest="print_report", action="store_true")
    ap.add_argument("--show-breakdown", action="store_true")
    ap.add_argument("--progress", action="store_true")
    ap.add_argument("--list", dest="list_datasets", action="store_true", help="list datasets")
    args = ap.parse_args(argv)

    s = get_settings()
    logging.basicConfig(
        level=getattr(logging, s.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_datasets:
        try:
            catalog = _resolve_catalog(args.catalog or s.catalog_path)
        except (InvalidArgumentError, FileNotFoundError) as e:
            print(f"[ERR] {e}", file=sys.stderr)
            return 2
        for d in catalog:
            print(f"{d.id}\t{d.n_features}\t{d.name} - {d.problem}")
        return 0

    try:
        out = run_generation(
            dataset_ids=None if args.all else args.datasets,
            max_degree=args.max_degree,
            seed=args.seed,
            min_datasets=args.min_datasets,
            catalog_path=args.catalog,
            report_path=args.out,
            on_progress=_print_progress if args.progress else None,
        )
    except InvalidArgumentError as e:
        print(f"[ERR] {e}", file=sys.stderr)
        return 2
    except FileNotFoundError as e:
        print(f"[ERR] file not found: {e}", file=sys.stderr)
        return 3

    summary = out["summary"]
    print(f"[OK] run_id: {out['run_id']}")
    print(f"[OK] report: {out['report_path']}")
    if out["export_path"]:
        print(f"[OK] exported: {out['export_path']}")
    print(f"[OK] manifest: {out['manifest_path']}")
    print(
        f"[OK] total_features: {summary['total_features']:,} "
        f"({summary['n_datasets']} datasets)"
    )

    if args.show_breakdown:
        print(breakdown_pivot(out["aggregate"]).to_string())
    if args.print_report:
        print(Path(out["report_path"]).read_text(encoding="utf-8"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
