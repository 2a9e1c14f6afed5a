"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["lexpath._pytest_plugin"]

This makes the ``path_normalizer`` and ``windows_path_normalizer`` fixtures
available::

    def test_something(path_normalizer):
        assert path_normalizer.normalize("a/../b") == "/work/b"
"""

import pytest

from ._normalizer import PathNormalizer


@pytest.fixture
def path_normalizer() -> PathNormalizer:
    """A posix :class:`PathNormalizer` with the working directory pinned to ``/work``.

    Results do not depend on the directory the test run was started from.
    """
    return PathNormalizer(flavour="posix", cwd="/work")


@pytest.fixture
def windows_path_normalizer() -> PathNormalizer:
    """A windows :class:`PathNormalizer` with the working directory pinned to ``C:\\work``."""
    return PathNormalizer(flavour="windows", cwd="C:\\work")
