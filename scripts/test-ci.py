#!/usr/bin/env python
"""
Simple CI Tester for TreeText
=============================

Tests if your code will pass CI.
Focuses on the critical checks that actually fail in CI.

Usage:
    python scripts/test-ci.py
"""

import subprocess
import sys
from pathlib import Path


def run_command(cmd, description, critical=True):
    """Run a command and return True if it succeeds."""
    print(f"\n[Testing] {description}...")
    print(f"  Command: {' '.join(cmd)}")

    result = subprocess.run(cmd, capture_output=True, text=True,
                            cwd=Path(__file__).parent.parent)

    if result.returncode == 0:
        print("  PASSED")
        return True

    if critical:
        print("  FAILED - This will fail in CI!")
        if result.stderr:
            print(f"  Error: {result.stderr[:500]}")
    else:
        print("  WARNING - Non-critical issue")
    return False


def main():
    print("=" * 60)
    print("CI LOCAL TESTER")
    print("=" * 60)

    all_passed = True

    # Test 1: Can we import the package?
    if not run_command(
        [sys.executable, "-c", "import treetext"],
        "Basic import test",
    ):
        print("\n  Fix: Check the package imports and setup.py")
        all_passed = False

    # Test 2: Do the fast tests pass?
    if not run_command(
        [sys.executable, "run_tests.py"],
        "Run fast tests (what CI runs)",
    ):
        print("\n  Fix: Debug the failing tests")
        all_passed = False

    # Test 3: Any Python syntax errors?
    try:
        import flake8  # noqa: F401
        if not run_command(
            [sys.executable, "-m", "flake8", "treetext", "tests",
             "--count", "--select=E9,F63,F7,F82", "--show-source"],
            "Check for Python syntax errors",
        ):
            print("\n  Fix: Fix the syntax errors shown above")
            all_passed = False
    except ImportError:
        print("\n[Skipped] Flake8 not installed (pip install -e .[dev] to enable)")

    # Test 4: Type check (advisory only)
    try:
        import mypy  # noqa: F401
        run_command(
            [sys.executable, "-m", "mypy", "treetext", "--ignore-missing-imports"],
            "Type check",
            critical=False,
        )
    except ImportError:
        print("\n[Skipped] mypy not installed (pip install -e .[dev] to enable)")

    print("\n" + "=" * 60)
    if all_passed:
        print("SUCCESS: Your code should pass CI!")
    else:
        print("FAILURE: Fix the issues above before pushing")
    print("=" * 60)

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
