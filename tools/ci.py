#!/usr/bin/env python3
# Copyright 2026 xmllex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the xmllex CI checks locally.

Usage: ``tools/ci.py [STEP ...]`` where STEP is one of ``format``, ``lint``,
``types``, ``tests``, ``build``. Without arguments every step runs.
"""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, tuple[str, list[str]]] = {
    "format": ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    "lint": ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    "types": ("Type check", ["uv", "run", "ty", "check", "src/"]),
    "tests": ("Tests", ["uv", "run", "pytest", "--cov=xmllex", "--cov-report=term-missing"]),
    "build": ("Build", ["uv", "build"]),
}


def main(argv: list[str]) -> int:
    """Run the selected CI steps and print a summary."""
    selected = argv or list(STEPS)
    unknown = [step for step in selected if step not in STEPS]
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)}. Choose from: {', '.join(STEPS)}"))
        return 2

    results = [_run_step(*STEPS[step]) for step in selected]
    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_RULE = "=" * 60


def _run_step(title: str, cmd: list[str]) -> tuple[str, bool, float]:
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue(title))
    print(chalk.blue(_RULE))
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=Path(__file__).resolve().parent.parent)
    return title, proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(_RULE))
    for title, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(color(f"  {status}  {title} ({elapsed:.1f}s)"))
    print()


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
