#!/usr/bin/env python3
# Copyright 2026 AdaLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, and build."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=adalex", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main(argv: list[str] | None = None) -> int:
    """Run the CI steps (all, or those whose names are given) and report results."""
    selected = [name.lower() for name in (argv if argv is not None else sys.argv[1:])]
    steps = [(name, cmd) for name, cmd in STEPS if not selected or name.lower() in selected]
    if not steps:
        print(chalk.red(f"No CI step matches {', '.join(selected)}"))
        return 1

    results = [_run_step(name, cmd) for name, cmd in steps]
    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    """Run one CI step in the repository root and time it."""
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(name))
    print(sep)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_repo_root())
    return name, proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue("  Summary"))
    print(sep)
    for name, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(color(f"  {status}  {name} ({elapsed:.1f}s)"))
    print()


def _repo_root() -> str:
    return str(Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main())
