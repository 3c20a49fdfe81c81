#!/usr/bin/env python3
"""
msbcodec - UNIFIED TEST SYSTEM

Main test runner that loads and executes test modules.

USAGE:
  python tests.py                    # Run ALL tests
  python tests.py --only msb         # One module only (binary, names, param, msb)
  python tests.py --verbose          # Include tracebacks for failures

TEST MODULES:
  test_binary.py  - IoBuffer reads, writes, assertions and reservations
  test_names.py   - EntryCollection, disambiguation, name <-> index lookups
  test_param.py   - Param offset tables, tags, IDs and read-time checks
  test_msb.py     - Whole MSB1/MSBE files: round trips, references, bad input

All modules also run under pytest (pytest dev/tests).
"""

import sys
import argparse
import importlib
from datetime import datetime

import harness


MODULES = {
    'binary': ('BINARY I/O', 'test_binary'),
    'names': ('ENTRY NAMES', 'test_names'),
    'param': ('PARAM FRAMING', 'test_param'),
    'msb': ('MSB FILES', 'test_msb'),
}


def main():
    parser = argparse.ArgumentParser(
        description="msbcodec - Unified Test System",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python tests.py              # Run all tests
  python tests.py --only names # Name handling tests only
  python tests.py --verbose    # Detailed output
"""
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    parser.add_argument('--only', choices=sorted(MODULES), help='Run a single test module')
    args = parser.parse_args()

    selected = [args.only] if args.only else list(MODULES)

    # Print header
    print("╔" + "═"*60 + "╗")
    print("║  MSBCODEC - UNIFIED TEST SYSTEM" + " "*29 + "║")
    print("║  " + datetime.now().strftime("%Y-%m-%d %H:%M:%S") + " "*39 + "║")
    print("╚" + "═"*60 + "╝")

    total_passed = 0
    total_failed = 0

    for key in selected:
        title, module_name = MODULES[key]
        print("\n" + "═"*60)
        print(f"  MODULE: {title} ({module_name}.py)")
        print("═"*60)

        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            print(f"  ❌ Failed to import {module_name}: {e}")
            total_failed += 1
            continue

        results = harness.TestResults(verbose=args.verbose)
        module.run_all_tests(results)

        total_passed += results.passed
        total_failed += results.failed

        print(f"\n  📊 {title}: {results.passed} passed, {results.failed} failed")
        if args.verbose:
            for error in results.errors:
                print(f"     - {error}")

    # Final Summary
    total = total_passed + total_failed
    print("\n" + "═"*60)
    print("FINAL SUMMARY")
    print("═"*60)
    print(f"Total:   {total}")
    print(f"Passed:  {total_passed} ✅")
    print(f"Failed:  {total_failed} ❌")

    if total_failed == 0:
        print("\n🎉 ALL TESTS PASSED!")
        return 0
    else:
        print(f"\n⚠️  {total_failed} TESTS FAILED")
        return 1


if __name__ == "__main__":
    sys.exit(main())
