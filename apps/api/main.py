from __future__ import annotations

import logging
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from pydantic import BaseModel, Field

from pascalfeat.common.config import get_settings
from pascalfeat.common.errors import InvalidArgumentError
from pascalfeat.common.version import get_build_info
from pascalfeat.datasets import list_datasets, load_catalog
from pascalfeat.features import DEFAULT_MAX_DEGREE, estimate_features
from pascalfeat.pipeline.generate import run_generation
from pascalfeat.reporting import DEFAULT_REPORT_FILENAME
from pascalfeat.tracking.read import get_latest_run_id, get_run_file, get_run_manifest

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # startup: artifacts 디렉터리 보장
    get_settings()
    yield


app = FastAPI(lifespan=lifespan)


class EstimateRequest(BaseModel):
    n_features: int = Field(..., ge=0)
    max_degree: int = Field(DEFAULT_MAX_DEGREE, ge=1)


class GenerateRequest(BaseModel):
    dataset_ids: list[str] | None = None
    max_degree: int | None = Field(None, ge=1)
    seed: int | None = None
    min_datasets: int | None = Field(None, ge=0)


def _err(
    code: str,
    message: str,
    *,
    hint: str | None = None,
    details: Any | None = None,
) -> dict[str, Any]:
    err: dict[str, Any] = {"code": code, "message": message}
    if hint:
        err["hint"] = hint
    if details is not None:
        err["details"] = details
    return err


def _error_response(request: Request, status_code: int, err: dict[str, Any]) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    payload: dict[str, Any] = {"ok": False, "error": err}
    if request_id:
        payload["request_id"] = request_id
    return JSONResponse(status_code=status_code, content=payload)


@app.middleware("http")
async def _request_id_middleware(request: Request, call_next):
    rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = rid
    resp = await call_next(request)
    resp.headers["X-Request-ID"] = rid
    return resp


@app.exception_handler(HTTPException)
async def _http_exception_handler(request: Request, exc: HTTPException):
    if isinstance(exc.detail, dict) and "code" in exc.detail and "message" in exc.detail:
        err = exc.detail
    else:
        err = _err("HTTP_ERROR", str(exc.detail))
    return _error_response(request, exc.status_code, err)


@app.exception_handler(RequestValidationError)
async def _validation_exception_handler(request: Request, exc: RequestValidationError):
    err = _err("VALIDATION_ERROR", "Invalid request.", details=exc.errors())
    return _error_response(request, 422, err)


@app.exception_handler(InvalidArgumentError)
async def _invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    return _error_response(request, 400, _err("INVALID_ARGUMENT", str(exc)))


@app.exception_handler(Exception)
async def _unhandled_exception_handler(request: Request, exc: Exception):
    # 내부 예외 메시지를 그대로 노출하지 않음(세부는 type만 제공)
    logger.exception("unhandled error on %s", request.url.path)
    err = _err("INTERNAL_ERROR", "Unexpected server error.", details={"type": type(exc).__name__})
    return _error_response(request, 500, err)


def _run_not_found(run_id: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=_err("RUN_NOT_FOUND", "Run not found.", details={"run_id": run_id}),
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
def version() -> dict[str, Any]:
    """서버 식별용 버전/빌드 정보."""
    return {
        "service": "pascalfeat-api",
        **get_build_info(),
    }


@app.get("/datasets")
def datasets() -> dict[str, Any]:
    s = get_settings()
    catalog = load_catalog(s.catalog_path) if s.catalog_path else list_datasets()
    items = [d.to_dict() for d in catalog]
    return {"items": items, "count": len(items)}


@app.post("/estimate")
def estimate(req: EstimateRequest) -> dict[str, Any]:
    return estimate_features(req.n_features, req.max_degree).to_dict()


@app.post("/generate")
def generate(req: GenerateRequest) -> dict[str, Any]:
    out = run_generation(
        dataset_ids=req.dataset_ids,
        max_degree=req.max_degree,
        seed=req.seed,
        min_datasets=req.min_datasets,
    )
    return {
        "ok": True,
        "run_id": out["run_id"],
        "summary": out["summary"],
        "result": out["aggregate"].to_dict(),
    }


@app.get("/runs/latest")
def latest_run() -> dict[str, Any]:
    s = get_settings()
    run_id = get_latest_run_id(s.artifacts_dir)
    if run_id is None:
        raise HTTPException(
            status_code=404,
            detail=_err(
                "RUN_NOT_FOUND",
                "No runs found.",
                hint="POST /generate (or: python -m pascalfeat.pipeline.generate) to create one.",
            ),
        )

    manifest = get_run_manifest(s.artifacts_dir, run_id)
    if manifest is None:
        raise _run_not_found(run_id)
    return manifest


@app.get("/runs/{run_id}")
def get_run(run_id: str) -> dict[str, Any]:
    s = get_settings()
    manifest = get_run_manifest(s.artifacts_dir, run_id)
    if manifest is None:
        raise _run_not_found(run_id)
    return manifest


@app.get("/runs/{run_id}/report")
def get_run_report(run_id: str) -> FileResponse:
    s = get_settings()
    if run_id == "latest":
        run_id = get_latest_run_id(s.artifacts_dir) or run_id
    try:
        p = get_run_file(s.artifacts_dir, run_id, "report")
    except FileNotFoundError:
        raise _run_not_found(run_id) from None
    return FileResponse(
        p,
        media_type="text/plain; charset=utf-8",
        filename=DEFAULT_REPORT_FILENAME,
    )
