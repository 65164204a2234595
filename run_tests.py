#!/usr/bin/env python3
"""
Main test runner for the parsetree test suite.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests():
    """Discover and run every test module under tests/."""

    print("🚀 parsetree Test Suite")
    print("=" * 60)

    try:
        import parsetree
        print(f"✅ parsetree {parsetree.__version__} imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import parsetree: {e}")
        return False

    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"), pattern="test_*.py")
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print()
    print("=" * 60)
    if result.wasSuccessful():
        print(f"✅ All {result.testsRun} tests passed")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors "
              f"in {result.testsRun} tests")

    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
