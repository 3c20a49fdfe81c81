"""
msbcodec - shared test tracker.

Every test module exposes plain test_* functions (pytest collects them
directly) and a run_all_tests(results) hook used by tests.py.
"""

import sys
import traceback
from pathlib import Path
from typing import List

# Path setup
TESTS_DIR = Path(__file__).parent
DEV_DIR = TESTS_DIR.parent
SUITE_DIR = DEV_DIR.parent
SRC_DIR = SUITE_DIR / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


class TestResults:
    """Shared test results tracker."""
    __test__ = False

    def __init__(self, verbose: bool = False):
        self.passed = 0
        self.failed = 0
        self.verbose = verbose
        self.errors: List[str] = []

    def record(self, name: str, passed: bool, reason: str = ""):
        if passed:
            self.passed += 1
            print(f"  [OK] {name}")
        else:
            self.failed += 1
            self.errors.append(f"{name}: {reason}")
            print(f"  [FAIL] {name}: {reason}")

    def summary(self):
        total = self.passed + self.failed
        print(f"\n{'='*60}")
        print("TEST SUMMARY")
        print(f"{'='*60}")
        print(f"Total:   {total}")
        print(f"Passed:  {self.passed} [OK]")
        print(f"Failed:  {self.failed} [FAIL]")
        return self.failed == 0


def run_module_tests(module, results: TestResults, title: str):
    """Run every test_* function of a module and record the outcome."""
    print("\n" + "="*60)
    print(title)
    print("="*60)

    for name in sorted(vars(module)):
        func = getattr(module, name)
        if not name.startswith("test_") or not callable(func):
            continue
        try:
            func()
        except Exception as e:
            reason = f"{type(e).__name__}: {e}"
            if results.verbose:
                reason += "\n" + traceback.format_exc()
            results.record(name, False, reason)
        else:
            results.record(name, True)


def expect_raises(exc_type, func, *args, **kwargs):
    """Call func and return the exception it raises; fail if it does not."""
    try:
        func(*args, **kwargs)
    except exc_type as e:
        return e
    raise AssertionError(f"{getattr(func, '__name__', func)} did not raise {exc_type.__name__}")
