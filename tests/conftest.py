"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed coderunner package.
"""

import pytest

from coderunner.kernel.files import SourceFileSet


@pytest.fixture
def file_set():
    """Build a SourceFileSet from positional paths, main file first."""
    def _make(*paths):
        return SourceFileSet.from_paths(paths)
    return _make
