#!/usr/bin/env python3
"""
Quality Gates Runner.

Runs lint, type and test gates for matecheck and writes a JSON report.

Gates:
1. Rules gate: bundled rules file loads and validates
2. Lint gate: ruff linting
3. Format gate: ruff formatting (warning only)
4. Type gate: mypy type checking
5. Test gate: full pytest suite
6. Transcript gate: golden console output
"""

from __future__ import annotations

import argparse
import datetime
import json
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

# --- Configuration ---

ARTIFACTS_DIR = Path("artifacts")
PROJECT_ROOT = Path(__file__).parent.parent


@dataclass
class GateConfig:
    """Configuration for a quality gate."""

    name: str
    description: str
    command: list[str]
    required: bool = True
    timeout_seconds: int = 300


GATES: list[GateConfig] = [
    GateConfig(
        name="rules",
        description="Rules file validation",
        command=[sys.executable, "-m", "pytest", "tests/unit/test_move_rules.py", "-q"],
    ),
    GateConfig(
        name="lint",
        description="Code linting (ruff)",
        command=[sys.executable, "-m", "ruff", "check", "."],
    ),
    GateConfig(
        name="format",
        description="Code formatting check (ruff)",
        command=[sys.executable, "-m", "ruff", "format", "--check", "."],
        required=False,
    ),
    GateConfig(
        name="types",
        description="Type checking (mypy)",
        command=[sys.executable, "-m", "mypy", "matecheck", "--ignore-missing-imports"],
    ),
    GateConfig(
        name="tests",
        description="All tests (pytest)",
        command=[sys.executable, "-m", "pytest", "-q"],
        timeout_seconds=600,
    ),
    GateConfig(
        name="transcript",
        description="Golden console transcript",
        command=[sys.executable, "-m", "pytest", "tests/regression", "tests/integration", "-q"],
    ),
]


# --- Result Types ---


@dataclass
class GateResult:
    """Result from running a gate."""

    name: str
    status: str  # "pass" | "fail" | "skip" | "warn"
    exit_code: int
    duration_seconds: float
    stdout: str
    stderr: str
    required: bool


# --- Gate Runner ---


def run_gate(config: GateConfig) -> GateResult:
    """Run a single quality gate."""
    print(f"[{config.name}] {config.description}...", end="", flush=True)
    start_time = time.time()

    try:
        result = subprocess.run(
            config.command,
            capture_output=True,
            text=True,
            timeout=config.timeout_seconds,
            cwd=PROJECT_ROOT,
        )
    except subprocess.TimeoutExpired:
        duration = time.time() - start_time
        print(f" TIMEOUT ({duration:.1f}s)")
        return GateResult(
            name=config.name,
            status="fail",
            exit_code=-1,
            duration_seconds=duration,
            stdout="",
            stderr=f"Timeout after {config.timeout_seconds}s",
            required=config.required,
        )
    except OSError as e:
        duration = time.time() - start_time
        print(f" ERROR ({duration:.1f}s)")
        return GateResult(
            name=config.name,
            status="fail",
            exit_code=-1,
            duration_seconds=duration,
            stdout="",
            stderr=str(e),
            required=config.required,
        )

    duration = time.time() - start_time
    if result.returncode == 0:
        status = "pass"
    elif not config.required:
        status = "warn"
    else:
        status = "fail"
    print(f" {status.upper()} ({duration:.1f}s)")

    return GateResult(
        name=config.name,
        status=status,
        exit_code=result.returncode,
        duration_seconds=duration,
        stdout=result.stdout,
        stderr=result.stderr,
        required=config.required,
    )


def run_all_gates(
    gates: list[GateConfig] | None = None,
    skip_gates: list[str] | None = None,
) -> list[GateResult]:
    """Run all configured gates."""
    gates = gates or GATES
    skip_gates = skip_gates or []

    results = []
    for config in gates:
        if config.name in skip_gates:
            results.append(
                GateResult(
                    name=config.name,
                    status="skip",
                    exit_code=0,
                    duration_seconds=0,
                    stdout="",
                    stderr="Skipped by user",
                    required=config.required,
                )
            )
            print(f"[{config.name}] SKIPPED")
        else:
            results.append(run_gate(config))

    return results


# --- Report ---


def generate_report(results: list[GateResult]) -> dict[str, Any]:
    """Summarise gate results; fails if any required gate failed."""
    required_failures = [r for r in results if r.status == "fail" and r.required]

    return {
        "timestamp_utc": datetime.datetime.now(datetime.UTC).isoformat(),
        "overall_status": "fail" if required_failures else "pass",
        "total_gates": len(results),
        "passed_gates": sum(1 for r in results if r.status == "pass"),
        "failed_gates": sum(1 for r in results if r.status == "fail"),
        "warned_gates": sum(1 for r in results if r.status == "warn"),
        "skipped_gates": sum(1 for r in results if r.status == "skip"),
        "gates": [
            {
                "name": r.name,
                "status": r.status,
                "exit_code": r.exit_code,
                "duration_seconds": r.duration_seconds,
                "required": r.required,
            }
            for r in results
        ],
    }


def write_report(report: dict[str, Any], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(report, f, indent=2)
    print(f"\nJSON report: {path}")


# --- CLI ---


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run matecheck quality gates.")
    parser.add_argument("--skip", nargs="*", default=[], help="Gates to skip")
    parser.add_argument("--only", nargs="*", help="Only run specified gates")
    parser.add_argument("--list", action="store_true", help="List available gates and exit")
    parser.add_argument(
        "--out",
        type=Path,
        default=ARTIFACTS_DIR / "quality_gates_run.json",
        help="Output path for JSON report",
    )
    args = parser.parse_args(argv)

    if args.list:
        for gate in GATES:
            req = "required" if gate.required else "optional"
            print(f"  - {gate.name}: {gate.description} ({req})")
        return 0

    gates_to_run = GATES
    if args.only:
        gates_to_run = [g for g in GATES if g.name in args.only]
        if not gates_to_run:
            print(f"Error: No gates found matching: {args.only}")
            return 1

    results = run_all_gates(gates_to_run, skip_gates=args.skip)
    report = generate_report(results)
    write_report(report, args.out)

    if report["overall_status"] == "pass":
        print("SUCCESS: All required quality gates passed.")
        return 0
    print("FAILURE: One or more required quality gates failed.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
