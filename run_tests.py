#!/usr/bin/env python3
"""
Test runner script for the lfmc project.

This script runs all tests and provides a summary of results.
"""

import sys
import unittest
from pathlib import Path


def _load_module(test_file: Path):
    """Import a test module by putting its directory on the path."""
    test_dir = str(test_file.parent)
    if test_dir not in sys.path:
        sys.path.insert(0, test_dir)
    return __import__(test_file.stem)


def discover_and_run_tests():
    """Discover and run all tests in the project."""
    script_dir = Path(__file__).parent
    test_dir = script_dir / 'tests'

    if not test_dir.exists():
        print(f"Tests directory not found: {test_dir}")
        return False

    # Test modules live in plain directories, one per package area
    test_files = sorted(test_dir.rglob('test_*.py'))
    print(f"Found test files: {[f.stem for f in test_files]}")

    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    for test_file in test_files:
        try:
            module = _load_module(test_file)
            suite.addTests(loader.loadTestsFromModule(module))
            print(f"Loaded tests from {test_file.relative_to(script_dir)}")
        except ImportError as e:
            print(f"Failed to import {test_file.stem}: {e}")
            continue

    runner = unittest.TextTestRunner(
        verbosity=2,
        stream=sys.stdout,
        descriptions=True,
        failfast=False
    )

    print("\n" + "="*70)
    print("RUNNING TESTS")
    print("="*70)

    result = runner.run(suite)

    print("\n" + "="*70)
    print("TEST SUMMARY")
    print("="*70)
    print(f"Tests run: {result.testsRun}")
    print(f"Failures: {len(result.failures)}")
    print(f"Errors: {len(result.errors)}")
    print(f"Skipped: {len(result.skipped)}")

    success = result.wasSuccessful()
    print(f"\nOverall result: {'PASSED' if success else 'FAILED'}")

    return success


def run_specific_test_file(test_file):
    """Run tests from a specific test file."""
    if not test_file.endswith('.py'):
        test_file += '.py'

    test_dir = Path(__file__).parent / 'tests'
    matches = sorted(test_dir.rglob(Path(test_file).name))

    if not matches:
        print(f"Test file {test_file} not found in {test_dir}")
        return False

    try:
        module = _load_module(matches[0])
    except ImportError as e:
        print(f"Failed to import {test_file}: {e}")
        return False

    suite = unittest.TestLoader().loadTestsFromModule(module)
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


def main():
    """Main entry point for the test runner."""
    if len(sys.argv) > 1:
        test_file = sys.argv[1]
        print(f"Running tests from {test_file}")
        success = run_specific_test_file(test_file)
    else:
        print("Running all tests...")
        success = discover_and_run_tests()

    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()
