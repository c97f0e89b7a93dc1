"""Cross-platform local CI check.

Steps:

1) ruff format --check
2) ruff check
3) pytest
4) generation smoke: full built-in catalog, fixed seed, report written to .ci/ (or skip)

Usage:
  python -m pascalfeat.tools.ci_check
  python -m pascalfeat.tools.ci_check --skip-smoke
"""

from __future__ import annotations

import argparse
import os
import shutil
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path


def _find_repo_root(start: Path) -> Path:
    for p in [start, *start.parents]:
        if (p / "pyproject.toml").exists() and (p / "src").exists():
            return p
    return start


def _ensure_ci_env(repo_root: Path) -> None:
    """Pin artifacts to .ci/ unless the user already configured it."""
    os.environ.setdefault("PASCALFEAT_ARTIFACTS", str(repo_root / ".ci" / "artifacts"))
    os.environ.setdefault("PYTHONUNBUFFERED", "1")
    (repo_root / ".ci" / "artifacts").mkdir(parents=True, exist_ok=True)


def _resolve_ruff(repo_root: Path) -> str | None:
    """Find ruff executable with sensible fallbacks (.venv first, then PATH)."""
    candidates = [
        repo_root / ".venv" / "Scripts" / "ruff.exe",  # Windows venv
        repo_root / ".venv" / "bin" / "ruff",  # Linux/macOS venv
    ]
    for p in candidates:
        if p.exists():
            return str(p)
    return shutil.which("ruff")


def _run(cmd: list[str], *, cwd: Path) -> int:
    print(f"[ci_check] $ {' '.join(cmd)}")
    p = subprocess.run(cmd, cwd=str(cwd))
    return int(p.returncode)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="PascalFeat local CI check (cross-platform).")
    ap.add_argument("--skip-smoke", action="store_true", help="skip generation smoke step")
    ap.add_argument("--seed", type=int, default=42, help="seed for the smoke run (default 42)")
    ap.add_argument(
        "--no-ci-env",
        action="store_true",
        help="do not force .ci/ sandbox env vars (use existing env/default settings)",
    )
    return ap


def build_step_names(*, skip_smoke: bool) -> list[str]:
    """Return the ordered list of step names for the given option set.

    Pure function: safe to regression-test without executing subprocesses.
    """
    names = ["ruff format --check", "ruff check", "pytest"]
    names.append("skip generation smoke" if skip_smoke else "generation smoke")
    return names


def run_ci_check(*, skip_smoke: bool, seed: int, no_ci_env: bool) -> int:
    repo_root = _find_repo_root(Path.cwd())
    print(f"[ci_check] repo_root: {repo_root}")

    if not no_ci_env:
        _ensure_ci_env(repo_root)

    ruff = _resolve_ruff(repo_root)
    if not ruff:
        print(
            "[ci_check] ERROR: ruff not found. Run: python -m pip install -e '.[dev]'",
            file=sys.stderr,
        )
        return 2

    plan = build_step_names(skip_smoke=skip_smoke)

    runnables: dict[str, Callable[[], int]] = {
        "ruff format --check": lambda: _run([ruff, "format", "--check", "."], cwd=repo_root),
        "ruff check": lambda: _run([ruff, "check", "."], cwd=repo_root),
        "pytest": lambda: _run([sys.executable, "-m", "pytest", "-q"], cwd=repo_root),
        "skip generation smoke": lambda: 0,
        "generation smoke": lambda: _run(
            [
                sys.executable,
                "-m",
                "pascalfeat.pipeline.generate",
                "--all",
                "--seed",
                str(seed),
            ],
            cwd=repo_root,
        ),
    }

    missing = [name for name in plan if name not in runnables]
    if missing:
        print(f"[ci_check] ERROR: unknown step name(s) in plan: {missing}", file=sys.stderr)
        return 2

    total = len(plan)
    for i, name in enumerate(plan, start=1):
        print(f"[ci_check] step {i}/{total}: {name}")
        code = runnables[name]()
        if code != 0:
            return code

    print("[ci_check] OK")
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    return run_ci_check(
        skip_smoke=bool(args.skip_smoke),
        seed=int(args.seed),
        no_ci_env=bool(args.no_ci_env),
    )


if __name__ == "__main__":
    raise SystemExit(main())
