#!/usr/bin/env python
"""Local quality checks and tests runner for lifeboard.

Runs formatting, import ordering, lint, typing, dead-code, complexity and
test checks in one go, optionally applying the automatic fixes.

Usage:
    python run_quality_checks.py                    # Run all checks (no fixes)
    python run_quality_checks.py --fix              # Run all checks + auto fixes
    python run_quality_checks.py --skip lint type   # Skip some checks
"""

import argparse
import subprocess
import sys
from typing import Callable

PACKAGE_DIR = "lifeboard"
TESTS_DIR = "tests"
DIRS_TO_CHECK = [PACKAGE_DIR, TESTS_DIR]


class CheckRunner:
    """Runs quality checks and tests with optional auto-fixes."""

    def __init__(self, fix: bool = False, verbose: bool = False, skip_checks=None):
        self.fix = fix
        self.verbose = verbose
        self.skip_checks = skip_checks or []
        self.failed_checks: list[str] = []
        self.passed_checks: list[str] = []

    def run_command(self, cmd: list[str], name: str, show_output: bool = True) -> bool:
        """Run one tool and record whether it passed."""
        print(f"\n{'=' * 70}\n> {name}\n{'=' * 70}")

        try:
            if self.verbose or show_output:
                result = subprocess.run(cmd, check=False)
            else:
                result = subprocess.run(cmd, check=False, capture_output=True, text=True)
                if result.returncode != 0:
                    print(result.stdout)
                    print(result.stderr)
        except FileNotFoundError as e:
            print(f"[error] {e}")
            print('   Make sure all tools are installed: pip install -e ".[dev]"')
            self.failed_checks.append(name)
            return False

        if result.returncode == 0:
            print(f"[ok] {name}")
            self.passed_checks.append(name)
            return True
        print(f"[failed] {name}")
        self.failed_checks.append(name)
        return False

    def check_formatting(self) -> bool:
        cmd = ["black", *DIRS_TO_CHECK] if self.fix else ["black", "--check", *DIRS_TO_CHECK]
        return self.run_command(cmd, "Black formatting")

    def check_imports(self) -> bool:
        cmd = ["isort", *DIRS_TO_CHECK] if self.fix else ["isort", "--check-only", *DIRS_TO_CHECK]
        return self.run_command(cmd, "isort import ordering")

    def check_lint(self) -> bool:
        return self.run_command(["pylint", PACKAGE_DIR], "Pylint")

    def check_types(self) -> bool:
        return self.run_command(["mypy", PACKAGE_DIR], "Mypy")

    def check_deadcode(self) -> bool:
        return self.run_command(["vulture", PACKAGE_DIR, "examples"], "Vulture dead code")

    def check_complexity(self) -> bool:
        return self.run_command(["radon", "cc", PACKAGE_DIR, "-a"], "Radon complexity")

    def run_tests(self) -> bool:
        return self.run_command(
            ["pytest", f"--cov={PACKAGE_DIR}", "--cov-report=term-missing", TESTS_DIR],
            "Pytest + coverage",
        )

    def print_summary(self) -> None:
        print(f"\n{'=' * 70}\nSUMMARY\n{'=' * 70}")
        for check in self.passed_checks:
            print(f"  passed: {check}")
        for check in self.failed_checks:
            print(f"  FAILED: {check}")
        if not self.failed_checks:
            print("\nAll checks passed.")

    def run_all(self) -> int:
        """Run all checks in order; return 0 only if every check passed."""
        checks: list[tuple[str, Callable[[], bool]]] = [
            ("formatting", self.check_formatting),
            ("imports", self.check_imports),
            ("lint", self.check_lint),
            ("type", self.check_types),
            ("deadcode", self.check_deadcode),
            ("complexity", self.check_complexity),
            ("tests", self.run_tests),
        ]

        for check_name, check_func in checks:
            if check_name in self.skip_checks:
                print(f"skipping {check_name}")
                continue
            check_func()

        self.print_summary()
        return 0 if not self.failed_checks else 1


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Run local quality checks and tests with optional auto-fixes",
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Automatically fix formatting and import ordering",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show detailed output from all commands",
    )
    parser.add_argument(
        "--skip",
        nargs="+",
        default=[],
        help="Skip checks (formatting, imports, lint, type, deadcode, complexity, tests)",
    )
    args = parser.parse_args()

    runner = CheckRunner(fix=args.fix, verbose=args.verbose, skip_checks=args.skip)
    return runner.run_all()


if __name__ == "__main__":
    sys.exit(main())
